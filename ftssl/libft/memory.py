"""Byte-buffer helpers: allocation, filling, searching, comparing and copying."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_span(length: int, n: int, what: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > length:
        raise ValueError(f"{what} holds {length} bytes, {n} requested")


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer`` in place."""
    memset(buffer, 0, n)


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    _check_span(len(buffer), n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value % 256`` among the first ``n``.

    Returns None when no such byte is found.
    """
    _check_span(len(data), n)
    index = bytes(data[:n]).find(value % 256)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_span(len(first), n, "first buffer")
    _check_span(len(second), n, "second buffer")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``; return ``dest``."""
    _check_span(len(src), n, "source")
    _check_span(len(dest), n, "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_span(len(buffer) - src, n, "source region")
    _check_span(len(buffer) - dest, n, "destination region")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer