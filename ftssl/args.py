"""Command-line and environment parsing for the hashing tool."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntFlag
from typing import Callable, Iterable, List, Optional, Tuple, Union

from ftssl.colors import disable_colors
from ftssl.libft.strings import atoi
from ftssl.log import LogLevel, debug, disable_prefix, set_log_level
from ftssl.md5 import MD5_BLOCK_ENDIAN, MD5_HASH_SIZE, MD5_NAME, md5_handler
from ftssl.sha256 import (
    SHA256_BLOCK_ENDIAN,
    SHA256_HASH_SIZE,
    SHA256_NAME,
    sha256_handler,
)

MAX_STRING = 32
MAX_FILES = 32

_ANSI_RESET = "\033[0m"
_ANSI_RED = "\033[0;31m"
_ANSI_GREEN = "\033[0;32m"


class ArgumentError(Exception):
    """Raised when the command line cannot be parsed."""


@dataclass(frozen=True)
class Command:
    """A hash command: its name, its block function and how blocks are laid out."""

    name: str
    hash_algorithm: Callable[[bytes], bytes]
    block_endian: str
    hash_size: int


class Option(IntFlag):
    """Option bits set by the command-line flags."""

    ECHO_STDIN = 1
    QUIET = 2
    REVERSE = 4


COMMANDS: Tuple[Command, ...] = (
    Command(MD5_NAME, md5_handler, MD5_BLOCK_ENDIAN, MD5_HASH_SIZE),
    Command(SHA256_NAME, sha256_handler, SHA256_BLOCK_ENDIAN, SHA256_HASH_SIZE),
)

FLAGS: Tuple[Tuple[str, Option], ...] = (
    ("p", Option.ECHO_STDIN),
    ("q", Option.QUIET),
    ("r", Option.REVERSE),
    ("s", Option(0)),
)


@dataclass
class Params:
    """Everything the command line asks for."""

    options: Option = Option(0)
    strings: List[str] = field(default_factory=list)
    files: List[str] = field(default_factory=list)
    command: Optional[Command] = None


def parse_command(name: str) -> Command:
    """Return the command that ``name`` starts with; raise ArgumentError otherwise."""
    for command in COMMANDS:
        if name.startswith(command.name):
            return command
    flags_line = "".join(f"-{flag} " for flag, _ in FLAGS)
    lines = [
        f"ft_ssl: Error: {name} is an invalid command.",
        "",
        "Commands:",
        *(command.name for command in COMMANDS),
        "",
        "Flags:",
        flags_line,
    ]
    raise ArgumentError("\n".join(lines))


def match_flag(flag: str) -> Optional[Option]:
    """Return the option bits of a flag letter, or None for an unknown flag."""
    for name, mask in FLAGS:
        if name == flag:
            return mask
    return None


def parse_flags(args: List[str], params: Params) -> int:
    """Consume leading flags into ``params``; return how many arguments were used."""
    index = 0
    while index < len(args) and args[index].startswith("-"):
        arg = args[index]
        mask = match_flag(arg[1]) if len(arg) == 2 else None
        if mask is None:
            raise ArgumentError(f"ft_ssl: Error: invalid flag {arg}")
        if arg[1] == "s":
            if index + 1 >= len(args):
                raise ArgumentError("ft_ssl: Error: -s flag requires a string argument")
            if len(params.strings) >= MAX_STRING:
                raise ArgumentError("ft_ssl: Error: too many strings")
            params.strings.append(args[index + 1])
            index += 1
        else:
            params.options |= mask
        index += 1
    return index


def parse_files(args: Iterable[str], params: Params) -> None:
    """Append every argument to the files of ``params``."""
    for arg in args:
        if len(params.files) >= MAX_FILES:
            raise ArgumentError("ft_ssl: Error: too many files")
        params.files.append(arg)


_LEVEL_NAMES = (
    ("debug", LogLevel.DEBUG),
    ("info", LogLevel.INFO),
    ("warning", LogLevel.WARNING),
    ("error", LogLevel.ERROR),
)


def _set_level_from(value: str) -> None:
    for name, level in _LEVEL_NAMES:
        if value.startswith(name):
            set_log_level(level)
            return
    number = atoi(value)
    if LogLevel.DEBUG <= number <= LogLevel.ERROR:
        set_log_level(number)


def parse_env(env: Union[Mapping, Iterable[str]]) -> None:
    """Apply NOPREFIX, NOCOLOR and LOGLEVEL from the environment.

    ``env`` is a mapping of variables or an iterable of ``NAME=value`` entries.
    """
    if isinstance(env, Mapping):
        entries: Iterable[str] = (f"{key}={value}" for key, value in env.items())
    else:
        entries = env
    for entry in entries:
        if entry.startswith("NOPREFIX"):
            disable_prefix()
        elif entry.startswith("NOCOLOR"):
            disable_colors()
        elif entry.startswith("LOGLEVEL"):
            _, sep, value = entry.partition("=")
            if sep:
                _set_level_from(value)


def describe_params(params: Params) -> List[str]:
    """Return lines describing the enabled flags, strings and files."""
    lines: List[str] = []
    if not params.options:
        lines.append(f"{_ANSI_RED}No flags{_ANSI_RESET} enabled")
    else:
        lines.append("Flags enabled:")
        lines.extend(f"\t- -{name}" for name, mask in FLAGS if params.options & mask)
    if not params.strings:
        lines.append(f"{_ANSI_RED}No strings{_ANSI_RESET} to hash")
    else:
        lines.append("Strings to hash:")
        lines.extend(f'\t- "{text}"' for text in params.strings)
    if not params.files:
        lines.append(f"{_ANSI_RED}No files{_ANSI_RESET} to hash")
    else:
        lines.append("Files to hash:")
        lines.extend(f'\t- "{path}"' for path in params.files)
    return lines


def parse_args(argv: List[str], env: Union[Mapping, Iterable[str]]) -> Params:
    """Parse the full argument vector, program name first, and the environment."""
    if len(argv) < 2:
        program = argv[0] if argv else "ft_ssl"
        raise ArgumentError(f"Usage: {program} <command> [flags] [file/string]")
    parse_env(env)
    params = Params(command=parse_command(argv[1]))
    debug(f"Running command {_ANSI_GREEN}{argv[1]}{_ANSI_RESET}\n")
    rest = argv[2:]
    used = parse_flags(rest, params)
    parse_files(rest[used:], params)
    for line in describe_params(params):
        debug(line + "\n")
    return params