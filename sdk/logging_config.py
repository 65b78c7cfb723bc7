"""
Logging configuration using Loguru.

The console sink is human-readable and coloured; set verbose=True (or
LOG_LEVEL=DEBUG) to see response body previews.
"""

import sys
from loguru import logger

from .config import ClientConfig


def setup_logging(verbose: bool = False, level: str = None):
    """
    Configure the Loguru console handler.

    Args:
        verbose: If True, log at DEBUG regardless of LOG_LEVEL
        level: Explicit level, overrides LOG_LEVEL

    Returns:
        The configured logger
    """
    logger.remove()
    console_level = "DEBUG" if verbose else (level or ClientConfig.LOG_LEVEL)
    logger.add(
        sys.stderr,
        level=console_level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
        colorize=True,
    )
    return logger
