import io

import pytest

from ftssl.libft.printf import (
    format_base,
    format_fd,
    is_base_wrong,
    nbrlen_base,
    printf_fd,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)

HEX = "0123456789abcdef"


@pytest.mark.parametrize("base", ["", "0", "00", "0+1", "01-", "0121"])
def test_is_base_wrong_true(base):
    assert is_base_wrong(base) is True


@pytest.mark.parametrize("base", ["01", HEX, "abc"])
def test_is_base_wrong_false(base):
    assert is_base_wrong(base) is False


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 2**40])
def test_nbrlen_base_matches_hex_length(n):
    assert nbrlen_base(n, HEX) == len(format(n, "x"))


def test_nbrlen_base_negative_raises():
    with pytest.raises(ValueError):
        nbrlen_base(-1, HEX)


@pytest.mark.parametrize("n", [0, 1, 9, 10, 255, 123456789])
def test_format_base_matches_builtins(n):
    assert format_base(n, HEX) == format(n, "x")
    assert format_base(n, "01") == format(n, "b")
    assert format_base(n, "0123456789") == str(n)
    assert len(format_base(n, "01")) == nbrlen_base(n, "01")


def test_format_base_rejects_bad_base():
    with pytest.raises(ValueError):
        format_base(5, "0")


def test_format_plain_text():
    assert format_fd("hello world") == "hello world"


@pytest.mark.parametrize("n", [0, 42, -42, 2147483647, -2147483648])
def test_format_decimal(n):
    assert format_fd("%d", n) == str(n)
    assert format_fd("%i", n) == str(n)


def test_format_decimal_wraps_to_32_bits():
    assert format_fd("%d", 2**31) == str(-(2**31))


def test_format_unsigned_wraps():
    assert format_fd("%u", -1) == str(2**32 - 1)
    assert format_fd("%u", 7) == "7"


@pytest.mark.parametrize("n", [0, 10, 255, 0xDEADBEEF])
def test_format_hex(n):
    assert format_fd("%x", n) == format(n, "x")
    assert format_fd("%X", n) == format(n, "X")


def test_format_string_and_null():
    assert format_fd("[%s]", "abc") == "[abc]"
    assert format_fd("%s", None) == "(null)"


def test_format_char():
    assert format_fd("%c%c", "o", ord("k")) == "ok"


def test_format_pointer():
    assert format_fd("%p", 0) == "(nil)"
    assert format_fd("%p", 0x1F) == "0x" + format(0x1F, "x")


def test_format_percent_and_unknown():
    assert format_fd("100%%") == "100%"
    assert format_fd("a%zb", 1) == "ab"
    assert format_fd("end%") == "end"


def test_format_mixed():
    assert format_fd("%s=%d (%x)", "v", 12, 12) == "v=12 (" + format(12, "x") + ")"


def test_format_missing_argument_raises():
    with pytest.raises(ValueError):
        format_fd("%d %d", 1)


def test_printf_fd_writes_and_counts():
    stream = io.StringIO()
    count = printf_fd(stream, "%s:%d%%", "n", -5)
    assert stream.getvalue() == "n:-5%"
    assert count == len(stream.getvalue())


def test_put_helpers():
    stream = io.StringIO()
    put_char("x", stream)
    put_str("yz", stream)
    put_str(None, stream)
    put_endl("!", stream)
    put_nbr(-2147483648, stream)
    assert stream.getvalue() == "xyz!\n" + str(-2147483648)


def test_put_endl_none_writes_newline_only():
    stream = io.StringIO()
    put_endl(None, stream)
    assert stream.getvalue() == "\n"