"""Reading inputs, hashing them and printing the results; the program entry point."""

from __future__ import annotations

import os
import sys
from typing import BinaryIO, List, Optional

from ftssl.args import ArgumentError, Command, Option, Params, parse_args
from ftssl.block import format_blocks, pad_message
from ftssl.log import LogLevel, debug, error, get_log_level, set_log_level
from ftssl.output import (
    print_cmd_inline,
    print_hash,
    print_stdin_alone,
    print_stdin_inline,
    print_stdin_literal_inline,
    print_suffix,
)

MAX_READ = 4096


def read_stream(stream: BinaryIO) -> bytes:
    """Read a binary stream to its end."""
    return b"".join(iter(lambda: stream.read(MAX_READ), b""))


def _read_fd(fd: int) -> bytes:
    chunks = []
    while True:
        chunk = os.read(fd, MAX_READ)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


def compute_hash(command: Command, data: bytes) -> bytes:
    """Pad ``data`` for ``command`` and return its digest."""
    padded = pad_message(data, command.block_endian)
    if get_log_level() <= LogLevel.DEBUG:
        for line in format_blocks(padded).splitlines():
            debug(line + "\n")
    return command.hash_algorithm(padded)


def _show(command: Command, name: str, digest: bytes, options: Option, quotes: bool) -> None:
    reverse = bool(options & Option.REVERSE)
    quiet = bool(options & Option.QUIET)
    if not reverse and not quiet:
        print_cmd_inline(command.name, name, quotes)
    print_hash(digest, quiet or reverse, not reverse or quiet)
    if reverse and not quiet:
        print_suffix(name, quotes)


def process_stdin(options: Option, command: Command, stdin: Optional[BinaryIO] = None) -> None:
    """Hash everything on standard input and print it as the options ask."""
    data = read_stream(sys.stdin.buffer if stdin is None else stdin)
    debug(f"Ret {len(data)} bytes from stdin\n")
    digest = compute_hash(command, data)
    if options & Option.ECHO_STDIN:
        if options & Option.QUIET:
            print_stdin_alone(data)
        else:
            print_stdin_inline(data)
    elif not options & Option.QUIET:
        print_stdin_literal_inline()
    print_hash(digest, bool(options & Option.QUIET), True)


def process_string(text: str, command: Command, options: Option) -> None:
    """Hash a string given on the command line and print it."""
    digest = compute_hash(command, os.fsencode(text))
    _show(command, text, digest, options, True)


def process_file(path: str, command: Command, options: Option) -> None:
    """Hash a file and print it; report a file that cannot be opened or read."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        error(f"ft_ssl: {command.name}: {path}: No such file or directory\n")
        return
    try:
        data = _read_fd(fd)
    except OSError:
        error(f"ft_ssl: Error: failed to read file {path}\n")
        return
    finally:
        os.close(fd)
    debug(f"Ret {len(data)} bytes from file {path}\n")
    digest = compute_hash(command, data)
    _show(command, path, digest, options, False)


def process_params(params: Params, stdin: Optional[BinaryIO] = None) -> None:
    """Hash standard input when asked or when nothing else is given, then strings, then files."""
    if params.command is None:
        raise ValueError("no hash command selected")
    options = params.options
    if options & Option.ECHO_STDIN or (not params.strings and not params.files):
        try:
            process_stdin(options, params.command, stdin)
        except OSError as exc:
            debug(f"Failed to read stdin: {exc}\n")
    for text in params.strings:
        process_string(text, params.command, options)
    for path in params.files:
        process_file(path, params.command, options)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line; return the exit status."""
    if argv is None:
        argv = sys.argv
    set_log_level(LogLevel.DEBUG)
    try:
        params = parse_args(argv, os.environ)
    except ArgumentError as exc:
        for line in str(exc).split("\n"):
            error(line + "\n")
        return 1
    process_params(params)
    return 0


if __name__ == "__main__":
    sys.exit(main())