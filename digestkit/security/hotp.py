"""
HOTP: HMAC-based one-time passwords (RFC 4226).

The numeric value is only an intermediate; hotp() returns the code already
rendered as a zero-padded string of exactly `digits` characters, so leading
zeros are never lost.
"""

from __future__ import annotations

import logging

from ..digests.base import HashFunction
from ..encoding import BytesLike, render_otp, to_bytes
from ..errors import InvalidParameter
from ..log_context import log_operation
from .hmac_construction import hmac_digest


logger = logging.getLogger(__name__)

MAX_COUNTER = 0xFFFFFFFFFFFFFFFF

# Dynamic truncation reads 4 bytes at an offset of up to 15: bytes 15..18.
MIN_DIGEST_SIZE = 15 + 4


def counter_to_bytes(counter: int) -> bytes:
    """8-byte big-endian moving factor."""
    if counter < 0 or counter > MAX_COUNTER:
        raise InvalidParameter("counter_out_of_range")
    return int(counter).to_bytes(8, "big", signed=False)


def dynamic_truncate(mac: bytes) -> int:
    """
    RFC 4226 section 5.3: offset = low nibble of the last byte; take 4 bytes
    from there, big-endian, with the top bit cleared.
    """
    offset = mac[-1] & 0x0F
    if offset + 4 > len(mac):
        raise InvalidParameter("digest_too_short_for_dynamic_truncation")
    return (
        (mac[offset] & 0x7F) << 24
        | mac[offset + 1] << 16
        | mac[offset + 2] << 8
        | mac[offset + 3]
    )


def _check_params(hash_fn: HashFunction, digits: int) -> None:
    if digits <= 0:
        raise InvalidParameter("digits_must_be_positive")
    if hash_fn.digest_size < MIN_DIGEST_SIZE:
        raise InvalidParameter(f"digest_too_short_for_dynamic_truncation:{hash_fn.name}")


def hotp_value(hash_fn: HashFunction, secret: BytesLike, counter: int, digits: int = 6) -> int:
    """
    Numeric HOTP value in [0, 10**digits).
    """
    _check_params(hash_fn, digits)
    counter_b = counter_to_bytes(counter)
    secret_b = to_bytes(secret)
    log_operation(logger, "hotp", algorithm=hash_fn.name, digits=digits, secret=secret_b)

    mac = hmac_digest(hash_fn, secret_b, counter_b)
    return dynamic_truncate(mac) % (10 ** digits)


def hotp(hash_fn: HashFunction, secret: BytesLike, counter: int, digits: int = 6) -> str:
    return render_otp(hotp_value(hash_fn, secret, counter, digits), digits)
