"""
Logging setup for the client desk core.
"""

import logging
import sys

from clientdesk.core.config import settings


def setup_logging() -> None:
    """
    Configure root logging with the shared format and the configured level.
    """
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    logger = logging.getLogger(__name__)
    logger.info("Logging configured", extra={"project": settings.PROJECT_NAME})


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(name)
