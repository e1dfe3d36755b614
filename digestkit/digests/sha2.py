"""
SHA-2 family (FIPS 180-4, sections 5.3 and 6.2 - 6.7).

SHA-224 and SHA-256 share one 32-bit compression function; SHA-384,
SHA-512, SHA-512/224 and SHA-512/256 share one 64-bit compression function.
The truncated variants differ from their parent only in their initial state
and in how many state bytes are emitted.
"""

from __future__ import annotations

import struct
from typing import Sequence, Tuple

from ..encoding import BytesLike, bytes_to_hex
from .base import MASK_32, MASK_64, HashFunction, MerkleDamgardHash, rotr32, rotr64


SHA224_BLOCK_SIZE = 64
SHA224_DIGEST_SIZE = 28
SHA256_BLOCK_SIZE = 64
SHA256_DIGEST_SIZE = 32
SHA384_BLOCK_SIZE = 128
SHA384_DIGEST_SIZE = 48
SHA512_BLOCK_SIZE = 128
SHA512_DIGEST_SIZE = 64
SHA512_224_BLOCK_SIZE = 128
SHA512_224_DIGEST_SIZE = 28
SHA512_256_BLOCK_SIZE = 128
SHA512_256_DIGEST_SIZE = 32

# First 32 bits of the fractional parts of the cube roots of the first 64 primes
_K256 = (
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

# First 64 bits of the fractional parts of the cube roots of the first 80 primes
_K512 = (
    0x428A2F98D728AE22, 0x7137449123EF65CD, 0xB5C0FBCFEC4D3B2F, 0xE9B5DBA58189DBBC,
    0x3956C25BF348B538, 0x59F111F1B605D019, 0x923F82A4AF194F9B, 0xAB1C5ED5DA6D8118,
    0xD807AA98A3030242, 0x12835B0145706FBE, 0x243185BE4EE4B28C, 0x550C7DC3D5FFB4E2,
    0x72BE5D74F27B896F, 0x80DEB1FE3B1696B1, 0x9BDC06A725C71235, 0xC19BF174CF692694,
    0xE49B69C19EF14AD2, 0xEFBE4786384F25E3, 0x0FC19DC68B8CD5B5, 0x240CA1CC77AC9C65,
    0x2DE92C6F592B0275, 0x4A7484AA6EA6E483, 0x5CB0A9DCBD41FBD4, 0x76F988DA831153B5,
    0x983E5152EE66DFAB, 0xA831C66D2DB43210, 0xB00327C898FB213F, 0xBF597FC7BEEF0EE4,
    0xC6E00BF33DA88FC2, 0xD5A79147930AA725, 0x06CA6351E003826F, 0x142929670A0E6E70,
    0x27B70A8546D22FFC, 0x2E1B21385C26C926, 0x4D2C6DFC5AC42AED, 0x53380D139D95B3DF,
    0x650A73548BAF63DE, 0x766A0ABB3C77B2A8, 0x81C2C92E47EDAEE6, 0x92722C851482353B,
    0xA2BFE8A14CF10364, 0xA81A664BBC423001, 0xC24B8B70D0F89791, 0xC76C51A30654BE30,
    0xD192E819D6EF5218, 0xD69906245565A910, 0xF40E35855771202A, 0x106AA07032BBD1B8,
    0x19A4C116B8D2D0C8, 0x1E376C085141AB53, 0x2748774CDF8EEB99, 0x34B0BCB5E19B48A8,
    0x391C0CB3C5C95A63, 0x4ED8AA4AE3418ACB, 0x5B9CCA4F7763E373, 0x682E6FF3D6B2B8A3,
    0x748F82EE5DEFB2FC, 0x78A5636F43172F60, 0x84C87814A1F0AB72, 0x8CC702081A6439EC,
    0x90BEFFFA23631E28, 0xA4506CEBDE82BDE9, 0xBEF9A3F7B2C67915, 0xC67178F2E372532B,
    0xCA273ECEEA26619C, 0xD186B8C721C0C207, 0xEADA7DD6CDE0EB1E, 0xF57D4F7FEE6ED178,
    0x06F067AA72176FBA, 0x0A637DC5A2C898A6, 0x113F9804BEF90DAE, 0x1B710B35131C471B,
    0x28DB77F523047D84, 0x32CAAB7B40C72493, 0x3C9EBE0A15C9BEBC, 0x431D67C49C100D4C,
    0x4CC5D4BECB3E42B6, 0x597F299CFC657E2A, 0x5FCB6FAB3AD6FAEC, 0x6C44198C4A475817,
)


def _sha256_compress(state: Sequence[int], block) -> Tuple[int, ...]:
    w = list(struct.unpack(">16I", block))
    for i in range(16, 64):
        s0 = rotr32(w[i - 15], 7) ^ rotr32(w[i - 15], 18) ^ (w[i - 15] >> 3)
        s1 = rotr32(w[i - 2], 17) ^ rotr32(w[i - 2], 19) ^ (w[i - 2] >> 10)
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & MASK_32)

    a, b, c, d, e, f, g, h = state
    for i in range(64):
        s1 = rotr32(e, 6) ^ rotr32(e, 11) ^ rotr32(e, 25)
        ch = (e & f) ^ (~e & g)
        t1 = (h + s1 + ch + _K256[i] + w[i]) & MASK_32
        s0 = rotr32(a, 2) ^ rotr32(a, 13) ^ rotr32(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t2 = (s0 + maj) & MASK_32
        h, g, f, e, d, c, b, a = g, f, e, (d + t1) & MASK_32, c, b, a, (t1 + t2) & MASK_32

    return tuple((x + y) & MASK_32 for x, y in zip(state, (a, b, c, d, e, f, g, h)))


def _sha512_compress(state: Sequence[int], block) -> Tuple[int, ...]:
    w = list(struct.unpack(">16Q", block))
    for i in range(16, 80):
        s0 = rotr64(w[i - 15], 1) ^ rotr64(w[i - 15], 8) ^ (w[i - 15] >> 7)
        s1 = rotr64(w[i - 2], 19) ^ rotr64(w[i - 2], 61) ^ (w[i - 2] >> 6)
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & MASK_64)

    a, b, c, d, e, f, g, h = state
    for i in range(80):
        s1 = rotr64(e, 14) ^ rotr64(e, 18) ^ rotr64(e, 41)
        ch = (e & f) ^ (~e & g)
        t1 = (h + s1 + ch + _K512[i] + w[i]) & MASK_64
        s0 = rotr64(a, 28) ^ rotr64(a, 34) ^ rotr64(a, 39)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t2 = (s0 + maj) & MASK_64
        h, g, f, e, d, c, b, a = g, f, e, (d + t1) & MASK_64, c, b, a, (t1 + t2) & MASK_64

    return tuple((x + y) & MASK_64 for x, y in zip(state, (a, b, c, d, e, f, g, h)))


class _Sha256Family(MerkleDamgardHash):
    block_size = 64
    length_size = 8
    byteorder = "big"
    word_format = "I"

    __slots__ = ()

    _compress = staticmethod(_sha256_compress)


class _Sha512Family(MerkleDamgardHash):
    block_size = 128
    length_size = 16
    byteorder = "big"
    word_format = "Q"

    __slots__ = ()

    _compress = staticmethod(_sha512_compress)


class Sha224(_Sha256Family):
    name = "sha224"
    digest_size = SHA224_DIGEST_SIZE
    initial_state = (
        0xC1059ED8, 0x367CD507, 0x3070DD17, 0xF70E5939,
        0xFFC00B31, 0x68581511, 0x64F98FA7, 0xBEFA4FA4,
    )
    __slots__ = ()


class Sha256(_Sha256Family):
    name = "sha256"
    digest_size = SHA256_DIGEST_SIZE
    initial_state = (
        0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
        0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
    )
    __slots__ = ()


class Sha384(_Sha512Family):
    name = "sha384"
    digest_size = SHA384_DIGEST_SIZE
    initial_state = (
        0xCBBB9D5DC1059ED8, 0x629A292A367CD507, 0x9159015A3070DD17, 0x152FECD8F70E5939,
        0x67332667FFC00B31, 0x8EB44A8768581511, 0xDB0C2E0D64F98FA7, 0x47B5481DBEFA4FA4,
    )
    __slots__ = ()


class Sha512(_Sha512Family):
    name = "sha512"
    digest_size = SHA512_DIGEST_SIZE
    initial_state = (
        0x6A09E667F3BCC908, 0xBB67AE8584CAA73B, 0x3C6EF372FE94F82B, 0xA54FF53A5F1D36F1,
        0x510E527FADE682D1, 0x9B05688C2B3E6C1F, 0x1F83D9ABFB41BD6B, 0x5BE0CD19137E2179,
    )
    __slots__ = ()


class Sha512_224(_Sha512Family):
    name = "sha512_224"
    digest_size = SHA512_224_DIGEST_SIZE
    initial_state = (
        0x8C3D37C819544DA2, 0x73E1996689DCD4D6, 0x1DFAB7AE32FF9C82, 0x679DD514582F9FCF,
        0x0F6D2B697BD44DA8, 0x77E36F7304C48942, 0x3F9D85A86A1D36C8, 0x1112E6AD91D692A1,
    )
    __slots__ = ()


class Sha512_256(_Sha512Family):
    name = "sha512_256"
    digest_size = SHA512_256_DIGEST_SIZE
    initial_state = (
        0x22312194FC2BF72C, 0x9F555FA3C84C64C2, 0x2393B86B6F53B151, 0x963877195940EABD,
        0x96283EE2A88EFFE3, 0xBE5E1E2553863992, 0x2B0199FC2C85B8AA, 0x0EB72DDC81C52CA2,
    )
    __slots__ = ()


def sha224(data: BytesLike = b"") -> bytes:
    return Sha224(data).digest()


def sha224_hex(data: BytesLike = b"") -> str:
    return bytes_to_hex(sha224(data))


def sha256(data: BytesLike = b"") -> bytes:
    return Sha256(data).digest()


def sha256_hex(data: BytesLike = b"") -> str:
    return bytes_to_hex(sha256(data))


def sha384(data: BytesLike = b"") -> bytes:
    return Sha384(data).digest()


def sha384_hex(data: BytesLike = b"") -> str:
    return bytes_to_hex(sha384(data))


def sha512(data: BytesLike = b"") -> bytes:
    return Sha512(data).digest()


def sha512_hex(data: BytesLike = b"") -> str:
    return bytes_to_hex(sha512(data))


def sha512_224(data: BytesLike = b"") -> bytes:
    return Sha512_224(data).digest()


def sha512_224_hex(data: BytesLike = b"") -> str:
    return bytes_to_hex(sha512_224(data))


def sha512_256(data: BytesLike = b"") -> bytes:
    return Sha512_256(data).digest()


def sha512_256_hex(data: BytesLike = b"") -> str:
    return bytes_to_hex(sha512_256(data))


SHA224 = HashFunction.from_engine(Sha224)
SHA256 = HashFunction.from_engine(Sha256)
SHA384 = HashFunction.from_engine(Sha384)
SHA512 = HashFunction.from_engine(Sha512)
SHA512_224 = HashFunction.from_engine(Sha512_224)
SHA512_256 = HashFunction.from_engine(Sha512_256)
