"""Formatting of hashes and their labels on standard output."""

from __future__ import annotations

import sys

from ftssl.colors import Color, get_color
from ftssl.libft.chars import to_upper
from ftssl.log import LogLevel, info, log

MAX_CMD_LEN = 32


def _write_raw(data: bytes) -> None:
    """Write bytes to standard output, whatever the log level."""
    stream = sys.stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(data.decode("utf-8", "replace"))
        return
    stream.flush()
    buffer.write(data)
    buffer.flush()


def _strip_newline(data: bytes) -> bytes:
    return data[:-1] if data.endswith(b"\n") else data


def hash_to_hex(digest: bytes) -> str:
    """Return the lower-case hexadecimal form of ``digest``."""
    return digest.hex()


def print_stdin_alone(data: bytes) -> None:
    """Echo standard input on a line of its own, one trailing newline removed."""
    info(get_color(Color.CYAN))
    _write_raw(_strip_newline(data))
    log(LogLevel.INFO, f"{get_color(Color.RESET)}\n", prefix=False)


def print_stdin_inline(data: bytes) -> None:
    """Echo standard input as a quoted label before its hash."""
    info(f'("{get_color(Color.CYAN)}')
    _write_raw(_strip_newline(data))
    log(LogLevel.INFO, f'{get_color(Color.RESET)}")= ', prefix=False)


def print_stdin_literal_inline() -> None:
    """Write the "(stdin)= " label."""
    info(f"({get_color(Color.CYAN)}stdin{get_color(Color.RESET)})= ")


def print_cmd_inline(cmd: str, text: str, quotes: bool) -> None:
    """Write the "CMD (text) = " label, the command upper-cased."""
    upper = "".join(to_upper(ch) for ch in cmd[:MAX_CMD_LEN - 1])
    mark = '"' if quotes else ""
    info(
        f"{get_color(Color.GREEN)}{upper}{get_color(Color.RESET)} "
        f"({mark}{get_color(Color.CYAN)}{text}{get_color(Color.RESET)}{mark}) = "
    )


def print_suffix(text: str, quotes: bool) -> None:
    """Write the name after a hash, as in reversed output."""
    mark = '"' if quotes else ""
    log(
        LogLevel.INFO,
        f" {mark}{get_color(Color.CYAN)}{text}{get_color(Color.RESET)}{mark}\n",
        prefix=False,
    )


def print_hash(digest: bytes, prefix: bool, newline: bool) -> None:
    """Write ``digest`` in hex, optionally after the info tag and before a newline."""
    if not digest:
        return
    if prefix:
        info("")
    sys.stdout.write(hash_to_hex(digest))
    if newline:
        log(LogLevel.INFO, "\n", prefix=False)