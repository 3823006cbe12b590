# /app/core/app_logger.py

import logging

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ROOT_LOGGER_NAME = "school_admin"


def setup_logging() -> logging.Logger:
    """Configures the application logger once. Safe to call repeatedly."""
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate console handlers when the app is reloaded.
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.propagate = False
    return logger


def get_logger(name: str = None) -> logging.Logger:
    base = logging.getLogger(ROOT_LOGGER_NAME)
    return base.getChild(name) if name else base
