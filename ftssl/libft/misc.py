"""Small numeric helpers and a source of random bytes."""

from __future__ import annotations

import os


def max_int(first: int, second: int) -> int:
    """Return the larger of two integers."""
    return first if first > second else second


def min_int(first: int, second: int) -> int:
    """Return the smaller of two integers."""
    return first if first < second else second


def random_bytes(size: int) -> bytes:
    """Return ``size`` bytes from the operating system's random source.

    Raises OSError when the random source cannot be read.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return os.urandom(size)