from __future__ import annotations

import logging
from typing import Callable

from ..digests.base import HashFunction
from ..encoding import BytesLike, bytes_to_hex, to_bytes, xor_bytes
from ..errors import InvalidParameter
from ..log_context import log_operation
from .hmac_construction import make_hmac


logger = logging.getLogger(__name__)

Prf = Callable[[bytes, bytes], bytes]


def _block(prf: Prf, password: bytes, salt: bytes, iterations: int, index: int) -> bytes:
    # T_i = U_1 ^ U_2 ^ ... ^ U_c, with U_1 = PRF(P, S || INT(i))
    u = prf(password, salt + index.to_bytes(4, "big"))
    t = u
    for _ in range(iterations - 1):
        u = prf(password, u)
        t = xor_bytes(t, u)
    return t


def pbkdf2(
    prf: Prf,
    h_len: int,
    password: BytesLike,
    salt: BytesLike,
    iterations: int,
    dk_len: int,
) -> bytes:
    """
    PBKDF2 (RFC 8018, section 5.2).

    prf:        keyed pseudorandom function prf(key, data) -> bytes, usually make_hmac(...)
    h_len:      output length of prf, in BITS
    iterations: iteration count c, at least 1
    dk_len:     derived key length, in BYTES

    The blocks T_1..T_l are concatenated and truncated to exactly dk_len bytes.
    """
    if iterations <= 0:
        raise InvalidParameter("iterations_must_be_positive")
    if h_len <= 0:
        raise InvalidParameter("h_len_must_be_positive")
    if dk_len <= 0:
        raise InvalidParameter("dk_len_must_be_positive")
    if dk_len * 8 > 0xFFFFFFFF * h_len:
        raise InvalidParameter("dk_len_too_large")

    password_b = to_bytes(password)
    salt_b = to_bytes(salt)

    blocks = (dk_len * 8 + h_len - 1) // h_len
    log_operation(
        logger,
        "pbkdf2",
        prf=getattr(prf, "__name__", "prf"),
        h_len=h_len,
        iterations=iterations,
        dk_len=dk_len,
        blocks=blocks,
        salt=salt_b,
    )

    out = bytearray()
    for i in range(1, blocks + 1):
        out += _block(prf, password_b, salt_b, iterations, i)

    if len(out) < dk_len:
        raise InvalidParameter(f"prf_output_shorter_than_h_len:{len(out)}<{dk_len}")
    return bytes(out[:dk_len])


def pbkdf2_hex(
    prf: Prf,
    h_len: int,
    password: BytesLike,
    salt: BytesLike,
    iterations: int,
    dk_len: int,
) -> str:
    return bytes_to_hex(pbkdf2(prf, h_len, password, salt, iterations, dk_len))


def pbkdf2_hmac(
    hash_fn: HashFunction,
    password: BytesLike,
    salt: BytesLike,
    iterations: int,
    dk_len: int,
) -> bytes:
    """
    PBKDF2 with HMAC over the given hash function as the PRF.
    """
    return pbkdf2(make_hmac(hash_fn), 8 * hash_fn.digest_size, password, salt, iterations, dk_len)
