"""Logging setup for the maintenance commands."""

import logging
from typing import TextIO

PACKAGE_LOGGER = "door_catalog_ops"
_LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(
    level: int | str = logging.INFO, stream: TextIO | None = None
) -> logging.Logger:
    """Route package records to one stream handler and return the package logger.

    `level` accepts a number or a level name such as ``"debug"``. Later calls only
    change the level; the first handler is kept.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
