import pytest

from ftssl.libft.strings import (
    atoi,
    itoa,
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    striteri,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t\n-42abc", -42),
        ("+17", 17),
        ("abc", 0),
        ("", 0),
        ("- 5", 0),
        ("--5", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi_parses_leading_number(text, expected):
    assert atoi(text) == expected


def test_atoi_overflow_gives_source_sentinels():
    huge = "9" * 30
    assert atoi(huge) == -1
    assert atoi("-" + huge) == 0


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 12345])
def test_itoa_round_trips_with_atoi(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", ",") == []
    assert split(",,,", ",") == []
    assert split("solo", ",") == ["solo"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a--b", "--")


def test_split_pieces_rejoin_to_stripped_text():
    text = "a,b,,c"
    assert ",".join(split(text, ",")) == "a,b,c"


def test_strchr_and_strrchr():
    text = "banana"
    assert strchr(text, "a") == text.index("a")
    assert strrchr(text, "a") == text.rindex("a")
    assert strchr(text, "z") is None
    assert strrchr(text, "z") is None


def test_strchr_accepts_int_codes_modulo_256():
    text = "banana"
    assert strchr(text, ord("n")) == text.index("n")
    assert strchr(text, ord("n") + 256) == text.index("n")


def test_nul_finds_terminator():
    assert strchr("abc", 0) == len("abc")
    assert strrchr("abc", "\0") == len("abc")


@pytest.mark.parametrize(
    "first, second, n",
    [("abc", "abd", 3), ("abc", "abc", 5), ("ab", "abc", 3), ("", "x", 1)],
)
def test_strncmp_sign_matches_ordering(first, second, n):
    result = strncmp(first, second, n)
    a, b = first[:n], second[:n]
    assert (result > 0) == (a > b)
    assert (result < 0) == (a < b)
    assert (result == 0) == (a == b)


def test_strncmp_stops_after_n():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_is_antisymmetric():
    assert strncmp("abc", "abd", 3) == -strncmp("abd", "abc", 3)


def test_strnstr_limits_search():
    haystack = "lorem ipsum dolor"
    assert strnstr(haystack, "ipsum", len(haystack)) == haystack.index("ipsum")
    assert strnstr(haystack, "ipsum", 8) is None
    assert strnstr(haystack, "ipsum", 11) == haystack.index("ipsum")
    assert strnstr(haystack, "", 0) == 0
    assert strnstr(haystack, "nope", len(haystack)) is None


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("  keep  ", "") == "  keep  "


def test_substr():
    text = "hello"
    assert substr(text, 1, 3) == "ell"
    assert substr(text, 3, 100) == "lo"
    assert substr(text, 10, 2) == ""
    with pytest.raises(ValueError):
        substr(text, -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""


def test_strlcpy_truncates_and_reports_length():
    src = "abcdef"
    copied, length = strlcpy(src, 4)
    assert length == len(src)
    assert copied == src[:3]
    assert strlcpy(src, 100) == (src, len(src))
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcat_appends_within_size():
    assert strlcat("ab", "cd", 10) == ("abcd", 4)
    result, total = strlcat("ab", "cdef", 4)
    assert len(result) == 3
    assert total == len("ab") + len("cdef")
    assert result == "ab" + "cdef"[:1]


def test_strlcat_full_destination_is_unchanged():
    result, total = strlcat("abcd", "xy", 2)
    assert result == "abcd"
    assert total == 2 + len("xy")


def test_strmapi_uses_index():
    assert strmapi("abc", lambda i, c: c.upper() if i % 2 == 0 else c) == "AbC"
    assert strmapi("", lambda i, c: c) == ""


def test_striteri_modifies_in_place():
    chars = list("abcd")
    striteri(chars, lambda i, c: c.upper() if i >= 2 else None)
    assert chars == ["a", "b", "C", "D"]


def test_striteri_records_indices():
    seen = []
    chars = list("xyz")
    striteri(chars, lambda i, c: seen.append((i, c)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]
    assert chars == list("xyz")