"""Logging setup for the generator.

Usage in generator modules:
    from .log import get_logger
    logger = get_logger(__name__)

All loggers live under "gdgen". Levels are set by the CLI.
"""

from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "gdgen"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a child logger under the gdgen hierarchy."""
    if name is None or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    short = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"{_LOGGER_NAME}.{short}")


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the gdgen logger hierarchy.

    --verbose -> DEBUG (every rendered path)
    default   -> INFO  (one line per description)
    --quiet   -> WARNING
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    root_logger = logging.getLogger(_LOGGER_NAME)
    root_logger.setLevel(level)

    if root_logger.handlers:
        for handler in root_logger.handlers:
            handler.setLevel(level)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_MessageFormatter())
    root_logger.addHandler(handler)
    root_logger.propagate = False


class _MessageFormatter(logging.Formatter):
    """Emit the message only."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message
