from __future__ import annotations

import logging
from typing import Callable

from ..digests.base import HashFunction
from ..encoding import BytesLike, bytes_to_hex, to_bytes
from ..log_context import log_operation


logger = logging.getLogger(__name__)

_IPAD = 0x36
_OPAD = 0x5C

_TRANS_36 = bytes((x ^ _IPAD) for x in range(256))
_TRANS_5C = bytes((x ^ _OPAD) for x in range(256))


def normalize_key(hash_fn: HashFunction, key: bytes) -> bytes:
    """
    RFC 2104 key preparation: keys strictly longer than the block size are
    hashed first, then the key is zero-padded and cut to exactly the block
    size, so a digest wider than the block is truncated.
    """
    block_size = hash_fn.block_size
    if len(key) > block_size:
        key = hash_fn(key)
    return (key + bytes(block_size))[:block_size]


def _hmac(hash_fn: HashFunction, key: bytes, message: bytes) -> bytes:
    k = normalize_key(hash_fn, key)
    inner = hash_fn(k.translate(_TRANS_36) + message)
    return hash_fn(k.translate(_TRANS_5C) + inner)


def hmac_digest(hash_fn: HashFunction, key: BytesLike, message: BytesLike) -> bytes:
    """
    Compute HMAC(key, message) = H((K ^ opad) || H((K ^ ipad) || message)).
    """
    key_b = to_bytes(key)
    message_b = to_bytes(message)
    log_operation(
        logger,
        "hmac",
        algorithm=hash_fn.name,
        block_size=hash_fn.block_size,
        key=key_b,
        message=message_b,
    )
    return _hmac(hash_fn, key_b, message_b)


def hmac_hex(hash_fn: HashFunction, key: BytesLike, message: BytesLike) -> str:
    return bytes_to_hex(hmac_digest(hash_fn, key, message))


def make_hmac(hash_fn: HashFunction) -> Callable[[BytesLike, BytesLike], bytes]:
    """
    Bind HMAC to one hash function, e.g. as the PRF for PBKDF2.

    The returned PRF does not log; PBKDF2 calls it once per iteration
    and logs a single line itself.
    """

    def prf(key: BytesLike, message: BytesLike) -> bytes:
        return _hmac(hash_fn, to_bytes(key), to_bytes(message))

    prf.__name__ = f"hmac_{hash_fn.name}"
    return prf
