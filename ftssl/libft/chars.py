"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``, which is an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_digit(c: CharLike) -> bool:
    """True for the decimal digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged.

    The result has the same kind as the argument: an int for an int, a str for a str.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged.

    The result has the same kind as the argument: an int for an int, a str for a str.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code