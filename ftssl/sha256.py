"""The SHA-256 message digest."""

from __future__ import annotations

import struct

from ftssl.bits import rotr32
from ftssl.block import BLOCK_SIZE, pad_message
from ftssl.log import debug

SHA256_NAME = "sha256"
SHA256_HASH_SIZE = 32
SHA256_BLOCK_ENDIAN = "big"

_MASK32 = 0xFFFFFFFF

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_INITIAL = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _sigma0(x: int) -> int:
    return rotr32(x, 7) ^ rotr32(x, 18) ^ (x >> 3)


def _sigma1(x: int) -> int:
    return rotr32(x, 17) ^ rotr32(x, 19) ^ (x >> 10)


def _ep0(x: int) -> int:
    return rotr32(x, 2) ^ rotr32(x, 13) ^ rotr32(x, 22)


def _ep1(x: int) -> int:
    return rotr32(x, 6) ^ rotr32(x, 11) ^ rotr32(x, 25)


def _schedule(block: bytes) -> list:
    w = list(struct.unpack(">16I", block))
    for j in range(16, 64):
        w.append((_sigma1(w[j - 2]) + w[j - 7] + _sigma0(w[j - 15]) + w[j - 16]) & _MASK32)
    return w


def sha256_handler(blocks: bytes) -> bytes:
    """Hash already padded 64-byte blocks and return the 32-byte digest."""
    debug("SHA256 command executed\n")
    if len(blocks) % BLOCK_SIZE:
        raise ValueError(f"length {len(blocks)} is not a multiple of {BLOCK_SIZE}")
    h = list(_INITIAL)
    for start in range(0, len(blocks), BLOCK_SIZE):
        w = _schedule(blocks[start:start + BLOCK_SIZE])
        a, b, c, d, e, f, g, hh = h
        for k, word in zip(_K, w):
            choose = (e & f) ^ (~e & _MASK32 & g)
            majority = (a & b) ^ (a & c) ^ (b & c)
            t1 = (hh + _ep1(e) + choose + k + word) & _MASK32
            t2 = (_ep0(a) + majority) & _MASK32
            a, b, c, d, e, f, g, hh = (t1 + t2) & _MASK32, a, b, c, (d + t1) & _MASK32, e, f, g
        h = [(x + y) & _MASK32 for x, y in zip(h, (a, b, c, d, e, f, g, hh))]
    return struct.pack(">8I", *h)


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return sha256_handler(pad_message(data, SHA256_BLOCK_ENDIAN))