"""Central logging configuration for questlog.

Modules log through ``logging.getLogger(__name__)``; this installs the
handlers on the package logger once, so repeated calls are harmless.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from questlog.core.config import settings


LOGGER_NAME = "questlog"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """Attach a stderr handler (and a rotating file handler when configured)."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.log_level).upper())

    # Avoid stacking handlers when called again
    if logger.handlers:
        return logger

    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(fmt)
    logger.addHandler(stream_handler)

    path = log_file or settings.log_file
    if path:
        try:
            file_handler = RotatingFileHandler(
                path,
                maxBytes=1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
        except OSError:
            logger.warning("Cannot open log file %s, logging to stderr only", path)
        else:
            file_handler.setFormatter(fmt)
            logger.addHandler(file_handler)

    return logger
