"""ANSI colour escape sequences that can be switched off globally."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Union


class Color(IntEnum):
    """The colours known to the terminal output."""

    RESET = 0
    BLACK = 1
    RED = 2
    GREEN = 3
    ORANGE = 4
    BLUE = 5
    PURPLE = 6
    CYAN = 7
    LIGHTGRAY = 8
    DARKGRAY = 9
    LIGHTRED = 10
    LIGHTGREEN = 11
    YELLOW = 12
    LIGHTBLUE = 13
    LIGHTPURPLE = 14
    LIGHTCYAN = 15
    WHITE = 16


_DEFAULT_CODES = (
    "\033[0m",
    "\033[0;30m",
    "\033[0;31m",
    "\033[0;32m",
    "\033[0;33m",
    "\033[0;34m",
    "\033[0;35m",
    "\033[0;36m",
    "\033[0;37m",
    "\033[1;30m",
    "\033[1;31m",
    "\033[1;32m",
    "\033[1;33m",
    "\033[1;34m",
    "\033[1;35m",
    "\033[1;36m",
    "\033[1;37m",
)

_active: List[str] = list(_DEFAULT_CODES)


def disable_colors() -> None:
    """Make every colour an empty string."""
    _active[:] = [""] * len(_DEFAULT_CODES)


def enable_colors() -> None:
    """Restore the default escape sequences."""
    _active[:] = _DEFAULT_CODES


def get_color(color: Union[Color, int]) -> str:
    """Return the escape sequence currently in use for ``color``.

    Raises ValueError for a value that names no colour.
    """
    try:
        member = Color(color)
    except ValueError:
        raise ValueError(f"unknown color {color!r}") from None
    return _active[member]