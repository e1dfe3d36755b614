"""
SHA-1 (FIPS 180-4, section 6.1).
"""

from __future__ import annotations

import struct
from typing import Sequence, Tuple

from ..encoding import BytesLike, bytes_to_hex
from .base import MASK_32, HashFunction, MerkleDamgardHash, rotl32


SHA1_BLOCK_SIZE = 64
SHA1_DIGEST_SIZE = 20


def _sha1_compress(state: Sequence[int], block) -> Tuple[int, ...]:
    w = list(struct.unpack(">16I", block))
    for i in range(16, 80):
        w.append(rotl32(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))

    a, b, c, d, e = state
    for i in range(80):
        if i < 20:
            f = (b & c) | (~b & d)
            k = 0x5A827999
        elif i < 40:
            f = b ^ c ^ d
            k = 0x6ED9EBA1
        elif i < 60:
            f = (b & c) | (b & d) | (c & d)
            k = 0x8F1BBCDC
        else:
            f = b ^ c ^ d
            k = 0xCA62C1D6
        temp = (rotl32(a, 5) + f + e + k + w[i]) & MASK_32
        e, d, c, b, a = d, c, rotl32(b, 30), a, temp

    return (
        (state[0] + a) & MASK_32,
        (state[1] + b) & MASK_32,
        (state[2] + c) & MASK_32,
        (state[3] + d) & MASK_32,
        (state[4] + e) & MASK_32,
    )


class Sha1(MerkleDamgardHash):
    name = "sha1"
    block_size = SHA1_BLOCK_SIZE
    digest_size = SHA1_DIGEST_SIZE
    length_size = 8
    byteorder = "big"
    word_format = "I"
    initial_state = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

    __slots__ = ()

    _compress = staticmethod(_sha1_compress)


def sha1(data: BytesLike = b"") -> bytes:
    return Sha1(data).digest()


def sha1_hex(data: BytesLike = b"") -> str:
    return bytes_to_hex(sha1(data))


SHA1 = HashFunction.from_engine(Sha1)
