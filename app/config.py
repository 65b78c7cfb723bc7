"""
Server configuration, loaded from environment variables (and .env if present).
"""

import os
from dotenv import load_dotenv

load_dotenv()


class ServerConfig:
    """Configuration for the product listing server."""

    SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
    SERVER_PORT = int(os.getenv("SERVER_PORT", "5075"))

    # the listing is abandoned with a 408 when it takes longer than this
    REQUEST_TIMEOUT_SECONDS = float(os.getenv("SERVER_REQUEST_TIMEOUT_SECONDS", "5"))
    SIMULATED_LATENCY_SECONDS = float(os.getenv("SIMULATED_LATENCY_SECONDS", "0.01"))
