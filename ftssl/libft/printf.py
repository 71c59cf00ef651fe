"""A small printf supporting %c %s %p %d %i %u %x %X and %%, plus put helpers."""

from __future__ import annotations

from typing import Any, Iterator, Optional, TextIO

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"


def _wrap_signed32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >> 31 else value


def is_base_wrong(base: str) -> bool:
    """True when ``base`` cannot be used as a numeral base.

    A base needs at least two symbols, all distinct, and neither '+' nor '-'.
    """
    if len(base) <= 1:
        return True
    if "+" in base or "-" in base:
        return True
    return len(set(base)) != len(base)


def nbrlen_base(nbr: int, base: str) -> int:
    """Return how many digits ``nbr`` takes when written in ``base``."""
    if nbr < 0:
        raise ValueError(f"number must not be negative, got {nbr}")
    if nbr == 0:
        return 1
    radix = len(base)
    length = 0
    while nbr:
        nbr //= radix
        length += 1
    return length


def format_base(nbr: int, base: str) -> str:
    """Write the non-negative ``nbr`` with the symbols of ``base``."""
    if is_base_wrong(base):
        raise ValueError(f"invalid base {base!r}")
    if nbr < 0:
        raise ValueError(f"number must not be negative, got {nbr}")
    radix = len(base)
    digits = [base[nbr % radix]]
    nbr //= radix
    while nbr:
        digits.append(base[nbr % radix])
        nbr //= radix
    return "".join(reversed(digits))


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _format_address(value: Optional[int]) -> str:
    if not value:
        return "(nil)"
    return "0x" + format_base(int(value) & 0xFFFFFFFFFFFFFFFF, _LOWER_HEX)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _format_address(value)
    if spec in "di":
        return str(_wrap_signed32(int(value)))
    if spec == "u":
        return str(int(value) & 0xFFFFFFFF)
    base = _LOWER_HEX if spec == "x" else _UPPER_HEX
    return format_base(int(value) & 0xFFFFFFFF, base)


def format_fd(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the text.

    Unknown conversions produce nothing and consume no argument; a lone '%' at
    the end of the format is dropped. Extra arguments are ignored.
    """
    remaining = iter(args)
    pieces = []
    pos = 0
    while pos < len(fmt):
        ch = fmt[pos]
        if ch != "%":
            pieces.append(ch)
            pos += 1
            continue
        if pos + 1 >= len(fmt):
            break
        pieces.append(_convert(fmt[pos + 1], remaining))
        pos += 2
    return "".join(pieces)


def printf_fd(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to ``stream``; return the number of characters."""
    text = format_fd(fmt, *args)
    stream.write(text)
    return len(text)


def put_char(c: str, stream: TextIO) -> None:
    """Write one character."""
    stream.write(_format_char(c))


def put_str(text: Optional[str], stream: TextIO) -> None:
    """Write ``text``; None writes nothing."""
    if text:
        stream.write(text)


def put_endl(text: Optional[str], stream: TextIO) -> None:
    """Write ``text`` followed by a newline."""
    put_str(text, stream)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal representation of ``n``."""
    stream.write(str(int(n)))