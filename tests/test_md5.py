import hashlib

import pytest

from ftssl.block import pad_message
from ftssl.md5 import MD5_HASH_SIZE, md5, md5_handler

SAMPLES = [
    b"",
    b"a",
    b"abc",
    b"message digest",
    b"The quick brown fox jumps over the lazy dog",
    b"x" * 55,
    b"x" * 56,
    b"x" * 64,
    bytes(range(256)) * 5,
]


def test_empty_vector():
    assert md5(b"").hex() == "d41d8cd98f00b204e9800998ecf8427e"


@pytest.mark.parametrize("data", SAMPLES)
def test_matches_reference(data):
    assert md5(data) == hashlib.md5(data).digest()


@pytest.mark.parametrize("data", SAMPLES)
def test_digest_size(data):
    assert len(md5(data)) == MD5_HASH_SIZE


def test_handler_on_padded_blocks():
    data = b"hello\n"
    assert md5_handler(pad_message(data, "little")) == hashlib.md5(data).digest()


def test_handler_rejects_partial_block():
    with pytest.raises(ValueError):
        md5_handler(b"\x00" * 63)