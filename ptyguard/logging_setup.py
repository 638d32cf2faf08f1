"""Logging configuration for ptyguard."""

import logging
import os
import sys

LOG_LEVEL_ENV = "PTYGUARD_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "ptyguard"


def setup_logging(level: int | str = DEFAULT_LEVEL) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling it again only changes the level.
    """
    logger = logging.getLogger("ptyguard")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


def setup_logging_from_env() -> logging.Logger:
    """Configure logging from PTYGUARD_LOG_LEVEL."""
    return setup_logging(os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL))
