"""
Constructions built on any HashFunction.

This package centralizes:
- HMAC (RFC 2104), generic over the hash function and its block size
- PBKDF2 (RFC 8018), generic over the keyed PRF
- HOTP (RFC 4226) and TOTP (RFC 6238) one-time passwords

None of these compare values. To verify a MAC or OTP supplied by a peer,
use hmac.compare_digest() on the computed and received values.
"""

from .hmac_construction import hmac_digest, hmac_hex, make_hmac, normalize_key
from .pbkdf2 import pbkdf2, pbkdf2_hex, pbkdf2_hmac
from .hotp import counter_to_bytes, dynamic_truncate, hotp, hotp_value
from .totp import time_counter, totp, totp_now, totp_value
