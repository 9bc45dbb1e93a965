"""Logging setup for docfront.

Every module logs through logging.getLogger(__name__); this only attaches a
formatted console handler to the package logger.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_PACKAGE_LOGGER = "docfront"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the docfront logger.

    Calling this again replaces the previous handler instead of adding a
    second one.

    Args:
        level: Level name, e.g. "INFO" or "DEBUG".

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(level.upper())
    logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)
    return logger
