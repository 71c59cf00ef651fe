"""32-bit rotations and byte-order helpers."""

from __future__ import annotations

import sys

_MASK32 = 0xFFFFFFFF


def rotl32(x: int, n: int) -> int:
    """Rotate the 32-bit value ``x`` left by ``n`` bits."""
    x &= _MASK32
    n %= 32
    return ((x << n) | (x >> (32 - n))) & _MASK32


def rotr32(x: int, n: int) -> int:
    """Rotate the 32-bit value ``x`` right by ``n`` bits."""
    x &= _MASK32
    n %= 32
    return ((x >> n) | (x << (32 - n))) & _MASK32


def byteswap(value: int, size: int) -> int:
    """Reverse the byte order of an unsigned value of ``size`` bytes.

    Sizes 2, 4 and 8 are swapped; any other size leaves the value as it is.
    """
    if size not in (2, 4, 8):
        return value
    mask = (1 << (8 * size)) - 1
    return int.from_bytes((value & mask).to_bytes(size, "little"), "big")


def native_byteorder() -> str:
    """Return "little" or "big", the byte order of the running machine."""
    return sys.byteorder