"""
Logging setup shared by every module of the service.
"""

import logging
import sys
from typing import Optional, Union

from fixtures_api.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Configure a logger for a module.

    Args:
        name: Logger name (usually __name__)
        level: Logging level (defaults to settings.LOG_LEVEL)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers when called twice for the same module
    if logger.handlers:
        return logger

    logger.setLevel(level if level is not None else settings.LOG_LEVEL)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
