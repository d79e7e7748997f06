"""
Logging setup for the indicator engine.
"""
import logging
from typing import Optional, Union
from .config import settings

PACKAGE_LOGGER = "equity_indicators"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Apply a log level to the package logger.

    Args:
        level: Level name or number. Defaults to settings.LOG_LEVEL.

    Returns:
        The package logger. A stream handler is attached only the first time;
        the root logger is left untouched.
    """
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
