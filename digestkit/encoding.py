from __future__ import annotations

from typing import Union

from .errors import InvalidParameter


BytesLike = Union[bytes, bytearray, memoryview, str]


def to_bytes(data: BytesLike) -> bytes:
    """
    Normalize caller input to bytes.
    Text is taken as its raw UTF-8 encoding, never decoded as hex.
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("utf-8")
    raise TypeError(f"expected bytes or str, got {type(data).__name__}")


def bytes_to_hex(data: bytes) -> str:
    return bytes(data).hex()


def hex_to_bytes(text: str) -> bytes:
    s = (text or "").strip().lower()
    try:
        return bytes.fromhex(s)
    except ValueError:
        raise InvalidParameter("invalid_hex_string")


def xor_bytes(a: bytes, b: bytes) -> bytes:
    if len(a) != len(b):
        raise InvalidParameter("xor_length_mismatch")
    return bytes(x ^ y for x, y in zip(a, b))


def render_otp(value: int, digits: int) -> str:
    """
    Render a one-time password as exactly `digits` decimal characters.
    82 with digits=6 -> "000082".
    """
    if digits <= 0:
        raise InvalidParameter("digits_must_be_positive")
    if value < 0 or value >= 10 ** digits:
        raise InvalidParameter(f"otp_value_out_of_range:{value}")
    return str(value).zfill(digits)
