"""Levelled logging to standard output and standard error with coloured prefixes."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from ftssl.colors import Color, get_color


class LogLevel(IntEnum):
    """Severity of a message, from least to most severe."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


_PREFIXES = {
    LogLevel.DEBUG: (Color.PURPLE, "DBG"),
    LogLevel.INFO: (Color.CYAN, "INF"),
    LogLevel.WARNING: (Color.YELLOW, "WRN"),
    LogLevel.ERROR: (Color.RED, "ERR"),
}


@dataclass
class _LogState:
    level: LogLevel = LogLevel.INFO
    prefix_enabled: bool = True


_state = _LogState()


def get_log_level() -> LogLevel:
    """Return the lowest level that is currently written."""
    return _state.level


def set_log_level(level: Union[LogLevel, int]) -> None:
    """Set the lowest level that is written; raise ValueError for an unknown level."""
    _state.level = LogLevel(level)


def get_log_prefix(level: Union[LogLevel, int]) -> str:
    """Return the tag written before messages of ``level``, or "" when prefixes are off."""
    if not _state.prefix_enabled:
        return ""
    color, tag = _PREFIXES[LogLevel(level)]
    return f"[{get_color(color)}{tag}{get_color(Color.RESET)}] "


def disable_prefix() -> None:
    """Stop writing level tags before messages."""
    _state.prefix_enabled = False


def enable_prefix() -> None:
    """Write level tags before messages again."""
    _state.prefix_enabled = True


def log(level: Union[LogLevel, int], message: str, prefix: bool = True) -> None:
    """Write ``message`` if ``level`` is at or above the current level.

    Debug and info go to standard output, warnings and errors to standard error.
    """
    level = LogLevel(level)
    if level < _state.level:
        return
    stream = sys.stderr if level >= LogLevel.WARNING else sys.stdout
    head = get_log_prefix(level) if prefix else ""
    stream.write(head + message)


def debug(message: str) -> None:
    """Log ``message`` at debug level with its prefix."""
    log(LogLevel.DEBUG, message)


def info(message: str) -> None:
    """Log ``message`` at info level with its prefix."""
    log(LogLevel.INFO, message)


def warning(message: str) -> None:
    """Log ``message`` at warning level with its prefix."""
    log(LogLevel.WARNING, message)


def error(message: str) -> None:
    """Log ``message`` at error level with its prefix."""
    log(LogLevel.ERROR, message)