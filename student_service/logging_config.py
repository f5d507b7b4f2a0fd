"""Logging setup for the API."""

import logging

from .config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = None) -> logging.Logger:
    """Configure the root logger once and return the API logger.

    `basicConfig` is skipped when handlers are already installed (for
    example by uvicorn or pytest), so the host's configuration wins.
    """
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level or settings.LOG_LEVEL, format=LOG_FORMAT)
    return logging.getLogger("student_service.api")
