"""
MD5 (RFC 1321).

Kept for interoperability with legacy checksums; MD5 is not collision
resistant and should not be used for new authentication schemes.
"""

from __future__ import annotations

import math
import struct
from typing import Sequence, Tuple

from ..encoding import BytesLike, bytes_to_hex
from .base import MASK_32, HashFunction, MerkleDamgardHash, rotl32


MD5_BLOCK_SIZE = 64
MD5_DIGEST_SIZE = 16

# K[i] = floor(abs(sin(i + 1)) * 2**32), RFC 1321 section 3.4
_K = tuple(int(abs(math.sin(i + 1)) * 2 ** 32) & MASK_32 for i in range(64))

_SHIFTS = (
    (7, 12, 17, 22) * 4
    + (5, 9, 14, 20) * 4
    + (4, 11, 16, 23) * 4
    + (6, 10, 15, 21) * 4
)


def _md5_compress(state: Sequence[int], block) -> Tuple[int, ...]:
    m = struct.unpack("<16I", block)
    a, b, c, d = state

    for i in range(64):
        if i < 16:
            f = (b & c) | (~b & d)
            g = i
        elif i < 32:
            f = (d & b) | (~d & c)
            g = (5 * i + 1) % 16
        elif i < 48:
            f = b ^ c ^ d
            g = (3 * i + 5) % 16
        else:
            f = c ^ (b | ~d)
            g = (7 * i) % 16
        f = (f + a + _K[i] + m[g]) & MASK_32
        a, d, c = d, c, b
        b = (b + rotl32(f, _SHIFTS[i])) & MASK_32

    return (
        (state[0] + a) & MASK_32,
        (state[1] + b) & MASK_32,
        (state[2] + c) & MASK_32,
        (state[3] + d) & MASK_32,
    )


class Md5(MerkleDamgardHash):
    name = "md5"
    block_size = MD5_BLOCK_SIZE
    digest_size = MD5_DIGEST_SIZE
    length_size = 8
    byteorder = "little"
    word_format = "I"
    initial_state = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

    __slots__ = ()

    _compress = staticmethod(_md5_compress)


def md5(data: BytesLike = b"") -> bytes:
    return Md5(data).digest()


def md5_hex(data: BytesLike = b"") -> str:
    return bytes_to_hex(md5(data))


MD5 = HashFunction.from_engine(Md5)
