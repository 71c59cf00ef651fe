# ftssl

Compute MD5 and SHA-256 digests of standard input, strings and files,
with output in the style of `openssl`. Both digests are implemented in
pure Python; the package has no dependencies.

## Installation

    pip install .

This installs the `ft_ssl` command.

## Usage

    ft_ssl <command> [flags] [file ...]

Commands (a command argument is accepted when it starts with one of these names):

- `md5`
- `sha256`

Flags, which must come before any file name:

- `-p` echo standard input to the output and hash it
- `-q` quiet mode: print the digest only
- `-r` reverse the output format: digest first, then the name
- `-s <string>` hash the given string (may be repeated, at most 32 times)

Everything after the flags is taken as a file name, at most 32 files.
Standard input is hashed when `-p` is given, or when neither a string nor
a file has been named; then the strings are hashed, then the files.
A file that cannot be opened is reported on standard error and the
remaining inputs are still processed.

An unknown command or flag, a `-s` without its string, or too many strings
or files print an error on standard error and the command exits with
status 1.

Examples:

    echo "hello" | ft_ssl md5
    ft_ssl sha256 -s "hello world"
    ft_ssl md5 -r -q some_file.txt

### Environment

The command starts at the debug log level, so by default it also prints
the parsed arguments and the padded blocks. These variables change that:

- `LOGLEVEL=debug|info|warning|error` (or `0`–`3`) chooses how much is
  printed; `LOGLEVEL=info` leaves only the results.
- `NOPREFIX` drops the `[INF]`-style prefixes from output lines.
- `NOCOLOR` turns off ANSI colours.

For plain `openssl`-like output:

    NOPREFIX=1 NOCOLOR=1 LOGLEVEL=info ft_ssl md5 -s "hello"

## Library use

The digests are available directly and return raw bytes:

    from ftssl.md5 import md5
    from ftssl.sha256 import sha256

    md5(b"abc").hex()
    sha256(b"abc").hex()

`ftssl.block.pad_message` produces the padded 64-byte blocks, and
`ftssl.md5.md5_handler` and `ftssl.sha256.sha256_handler` hash blocks that
are already padded. `ftssl.workflow.main(argv)` runs the command line from
Python and returns its exit status.

The `ftssl.libft` sub-package holds small helpers for ASCII characters
(`chars`), byte buffers (`memory`), strings (`strings`), a singly linked
list (`linked_list`), a minimal printf (`printf`) and min/max and random
bytes (`misc`).

## Limits

Only MD5 and SHA-256 are provided: there are no other digests, no
ciphers, no key handling and no HMAC. Flags cannot follow file names, and
the digest output is always lower-case hexadecimal.

## Tests

    pip install .[test]
    pytest