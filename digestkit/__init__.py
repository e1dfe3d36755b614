"""
digestkit - message digests and the constructions built on them.

Modules:
    digests:  MD5, SHA-1 and SHA-2 engines, the HashFunction capability
    security: HMAC, PBKDF2, HOTP and TOTP, generic over any HashFunction
    encoding: byte / text / hex conversion and OTP rendering
    config:   YAML settings for the command line

Example:
    >>> from digestkit import SHA1, hmac_hex, hotp
    >>> hmac_hex(SHA1, b"", b"")
    'fbdb1d1b18aa6c08324b7d64b71fb76370690e1d'
    >>> hotp(SHA1, b"12345678901234567890", 0)
    '755224'
"""

__version__ = "0.1.0"

from .errors import ConfigError, DigestkitError, InvalidParameter
from .encoding import bytes_to_hex, hex_to_bytes, render_otp, to_bytes
from .digests import (
    MD5,
    SHA1,
    SHA224,
    SHA256,
    SHA384,
    SHA512,
    SHA512_224,
    SHA512_256,
    HashFunction,
    available_algorithms,
    get_hash_function,
    new_hash,
)
from .security import (
    hmac_digest,
    hmac_hex,
    hotp,
    make_hmac,
    pbkdf2,
    pbkdf2_hex,
    pbkdf2_hmac,
    totp,
    totp_now,
)

__all__ = [
    "ConfigError",
    "DigestkitError",
    "InvalidParameter",
    "bytes_to_hex",
    "hex_to_bytes",
    "render_otp",
    "to_bytes",
    "MD5",
    "SHA1",
    "SHA224",
    "SHA256",
    "SHA384",
    "SHA512",
    "SHA512_224",
    "SHA512_256",
    "HashFunction",
    "available_algorithms",
    "get_hash_function",
    "new_hash",
    "hmac_digest",
    "hmac_hex",
    "hotp",
    "make_hmac",
    "pbkdf2",
    "pbkdf2_hex",
    "pbkdf2_hmac",
    "totp",
    "totp_now",
]
