# libs/shop_common/logging.py
"""
Standardized logging configuration for all services.
"""

import logging
import os
import sys
from typing import Optional

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
    '"logger": "%(name)s", "message": "%(message)s"}'
)


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name, typically __name__ from the calling module
        level: Optional level name; defaults to the LOG_LEVEL environment variable

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(JSON_FORMAT))
        logger.addHandler(handler)
        logger.setLevel((level or os.environ.get("LOG_LEVEL", "INFO")).upper())

    return logger
