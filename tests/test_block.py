import pytest

from ftssl.block import BLOCK_SIZE, format_blocks, pad_message


@pytest.mark.parametrize("size", [0, 1, 55, 56, 63, 64, 119, 120, 200])
@pytest.mark.parametrize("order", ["little", "big"])
def test_padding_invariants(size, order):
    data = bytes(i % 251 for i in range(size))
    padded = pad_message(data, order)
    assert len(padded) % BLOCK_SIZE == 0
    assert len(padded) - size >= 9
    assert len(padded) - size < 9 + BLOCK_SIZE
    assert padded[:size] == data
    assert padded[size] == 0x80
    assert not any(padded[size + 1:-8])
    assert int.from_bytes(padded[-8:], order) == size * 8


def test_block_boundaries():
    assert len(pad_message(b"a" * 55, "little")) == 64
    assert len(pad_message(b"a" * 56, "little")) == 128


def test_byteorders_differ_only_in_length_field():
    data = b"abc"
    little = pad_message(data, "little")
    big = pad_message(data, "big")
    assert little[:-8] == big[:-8]
    assert little[-8:] == big[-8:][::-1]


def test_invalid_byteorder():
    with pytest.raises(ValueError):
        pad_message(b"x", "middle")


def test_format_blocks_round_trip():
    padded = pad_message(b"hello world" * 7, "big")
    text = format_blocks(padded)
    lines = text.splitlines()
    assert lines[0] == f"Bloc nb: {len(padded) // BLOCK_SIZE}"
    parsed = bytes(int(tok, 16) for line in lines[1:] for tok in line.split())
    assert parsed == padded
    assert all(len(line.split()) == BLOCK_SIZE for line in lines[1:])


def test_format_blocks_rejects_partial_block():
    with pytest.raises(ValueError):
        format_blocks(b"\x00" * 10)