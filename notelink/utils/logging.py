"""Simple logging utilities for notelink."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger instance for the given module name."""
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)

    return logger


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the package logger used by every notelink module.

    Module loggers are children of ``notelink``, so setting the level here
    controls all of them.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING

    logger = get_logger("notelink", numeric)
    logger.setLevel(numeric)
    return logger
