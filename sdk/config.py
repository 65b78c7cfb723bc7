"""
Client configuration.

Values come from the environment (a .env file in the working directory is
loaded first). CLI flags may override the endpoint and timeout.
"""

import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_PRODUCTS_ENDPOINT = "http://localhost:5075/api/products"


def _health_from(endpoint: str) -> str:
    base = endpoint.split("/api/", 1)[0] if "/api/" in endpoint else endpoint.rstrip("/")
    return f"{base}/health"


class ClientConfig:
    """Configuration for the products client."""

    PRODUCTS_ENDPOINT = os.getenv("PRODUCTS_ENDPOINT", DEFAULT_PRODUCTS_ENDPOINT)
    HEALTH_ENDPOINT = os.getenv("HEALTH_ENDPOINT", _health_from(PRODUCTS_ENDPOINT))
    REQUEST_TIMEOUT_SECONDS = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "10"))
    BODY_PREVIEW_CHARS = int(os.getenv("BODY_PREVIEW_CHARS", "200"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def health_endpoint_for(endpoint: str) -> str:
        return _health_from(endpoint)
