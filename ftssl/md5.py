"""The MD5 message digest."""

from __future__ import annotations

import struct

from ftssl.bits import rotl32
from ftssl.block import BLOCK_SIZE, pad_message
from ftssl.log import debug

MD5_NAME = "md5"
MD5_HASH_SIZE = 16
MD5_BLOCK_ENDIAN = "little"

_MASK32 = 0xFFFFFFFF

_SHIFTS = (7, 12, 17, 22, 5, 9, 14, 20, 4, 11, 16, 23, 6, 10, 15, 21)

_K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)


def _round(j: int, b: int, c: int, d: int):
    """Return the mixing value and message word index for step ``j``."""
    if j < 16:
        return (b & c) | (~b & d), j
    if j < 32:
        return (b & d) | (c & ~d), (5 * j + 1) % 16
    if j < 48:
        return b ^ c ^ d, (3 * j + 5) % 16
    return c ^ (b | (~d & _MASK32)), (7 * j) % 16


def md5_handler(blocks: bytes) -> bytes:
    """Hash already padded 64-byte blocks and return the 16-byte digest."""
    debug("MD5 command executed\n")
    if len(blocks) % BLOCK_SIZE:
        raise ValueError(f"length {len(blocks)} is not a multiple of {BLOCK_SIZE}")
    h = list(_INITIAL)
    for start in range(0, len(blocks), BLOCK_SIZE):
        words = struct.unpack("<16I", blocks[start:start + BLOCK_SIZE])
        a, b, c, d = h
        for j in range(64):
            f, g = _round(j, b, c, d)
            shift = _SHIFTS[j % 4 + (j // 16) * 4]
            total = (a + (f & _MASK32) + _K[j] + words[g]) & _MASK32
            a, b, c, d = d, (b + rotl32(total, shift)) & _MASK32, b, c
        h = [(x + y) & _MASK32 for x, y in zip(h, (a, b, c, d))]
    return struct.pack("<4I", *h)


def md5(data: bytes) -> bytes:
    """Return the MD5 digest of ``data``."""
    return md5_handler(pad_message(data, MD5_BLOCK_ENDIAN))