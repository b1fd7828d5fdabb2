"""Logging configuration shared by the deckart entry points."""

from __future__ import annotations

import logging
from enum import Enum

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(str, Enum):
    """Log levels accepted on the command line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


_LEVELS: dict[LogLevel, int] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
}

DEFAULT_LEVEL = LogLevel.WARNING


def setup_logging(level: LogLevel | str = DEFAULT_LEVEL) -> None:
    """Call once at program start; diagnostics go to stderr so stdout stays clean.

    Raises ``ValueError`` for anything other than a standard level name.
    """

    resolved = LogLevel(level.upper())
    logging.basicConfig(
        level=_LEVELS[resolved],
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
