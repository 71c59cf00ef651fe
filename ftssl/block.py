"""Message padding into 64-byte blocks, as used by MD5 and SHA-256."""

from __future__ import annotations

MIN_PADDING_SIZE = 1
LEN_SIZE = 8
BLOCK_SIZE = 64

_BYTEORDERS = ("little", "big")


def pad_message(data: bytes, byteorder: str) -> bytes:
    """Pad ``data`` with 0x80, zeros and its bit length in ``byteorder``.

    The result is a whole number of 64-byte blocks.
    """
    if byteorder not in _BYTEORDERS:
        raise ValueError(f"byteorder must be 'little' or 'big', got {byteorder!r}")
    size = len(data)
    block_nb = (size + MIN_PADDING_SIZE + LEN_SIZE - 1) // BLOCK_SIZE + 1
    padded = bytearray(block_nb * BLOCK_SIZE)
    padded[:size] = data
    padded[size] = 0x80
    bit_length = (size * 8) & 0xFFFFFFFFFFFFFFFF
    padded[-LEN_SIZE:] = bit_length.to_bytes(LEN_SIZE, byteorder)
    return bytes(padded)


def format_blocks(padded: bytes) -> str:
    """Describe padded blocks: their count, then each block's bytes in hex on one line."""
    if len(padded) % BLOCK_SIZE:
        raise ValueError(f"length {len(padded)} is not a multiple of {BLOCK_SIZE}")
    count = len(padded) // BLOCK_SIZE
    lines = [f"Bloc nb: {count}"]
    for start in range(0, len(padded), BLOCK_SIZE):
        block = padded[start:start + BLOCK_SIZE]
        lines.append("".join(f"{byte:X} " for byte in block))
    return "\n".join(lines) + "\n"