"""String helpers: parsing, searching, slicing, joining and bounded copies."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_NUL = "\0"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _char(c: CharLike) -> str:
    """Turn a one-character string or an int code (taken modulo 256) into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) % 256)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as the C library function does.

    Leading whitespace is skipped, one optional sign is accepted, and parsing stops
    at the first non-digit. When the accumulated value overflows a 64-bit integer,
    -1 is returned for a positive number and 0 for a negative one. The result is
    truncated to a 32-bit signed integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    number = 0
    for ch in text[pos:]:
        if not "0" <= ch <= "9":
            break
        digit = ord(ch) - ord("0")
        if number > _wrap((number + digit) * 10, 64):
            return -1 if sign > 0 else 0
        number = number * 10 + digit
    return _wrap(number * sign, 32)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in text.split(sep) if piece]


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of ``c`` in ``text``, or None.

    Searching for the NUL character finds the terminator, at ``len(text)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of ``c`` in ``text``, or None.

    Searching for the NUL character finds the terminator, at ``len(text)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal pair.

    A string that ends early compares as if followed by NUL characters.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    pairs = zip_longest(first, second, fillvalue=_NUL)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of ``needle`` inside the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start beyond the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of two strings."""
    return first + second


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text, truncated to ``size - 1`` characters, and the full
    length of ``src``, which shows whether truncation happened.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters, terminator included.

    Returns the resulting text and the length the full concatenation would have had.
    When ``dst`` already fills the buffer it is left as it is and ``size`` plus the
    length of ``src`` is reported.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dst_len = min(size, len(dst))
    if dst_len == size:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each element of ``chars``, in place.

    When ``func`` returns a value, it replaces the element; None leaves it unchanged.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement