"""
Logging setup for the query builder.

The package logs under the "es_query_builder" namespace and stays silent
until ``setup_logging`` is called by the application.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "es_query_builder"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(level: str = "INFO", propagate: bool = False) -> logging.Logger:
    """
    Configure the package logger with a single stderr handler.

    Existing handlers are cleared first, so calling this repeatedly does
    not duplicate output.

    Args:
        level: Logging threshold name (e.g. "DEBUG", "INFO")
        propagate: Whether records also bubble up to the root logger

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)

    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = propagate

    logger.debug("Logging initialized at level: %s", level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger inside the package namespace.

    Args:
        name: Usually ``__name__``; None returns the package root logger
    """
    return logging.getLogger(name or LOGGER_NAME)
