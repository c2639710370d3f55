"""Opt-in log output for the ``investcalc`` logger namespace.

The library only attaches a ``NullHandler``; applications call
``configure_logging`` (or configure ``logging`` themselves) to see solver
iteration traces.
"""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "investcalc"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(
    level: str = "INFO",
    stream: Optional[TextIO] = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)
        stream: Output stream, stderr by default
        fmt: ``logging.Formatter`` format string

    Returns:
        The configured ``investcalc`` logger
    """
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown logging level: {level}")

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(log_level)
    return logger
