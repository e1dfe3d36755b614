"""
Tests for the generic HMAC construction.

Tests:
- RFC 2202 (HMAC-MD5, HMAC-SHA1) and RFC 4231 (HMAC-SHA2) vectors
- Key normalization at the block-size boundary
- Structure of the construction with a synthetic hash function
- Cross-check against the standard library hmac module
"""

import hashlib
import hmac as std_hmac
import logging

import pytest

from digestkit.digests import MD5, SHA1, SHA224, SHA256, SHA384, SHA512, HashFunction, sha256
from digestkit.security import hmac_digest, hmac_hex, make_hmac, normalize_key, pbkdf2_hmac


QUICK_FOX = b"The quick brown fox jumps over the lazy dog"


class TestHmacVectors:
    def test_empty_key_and_message(self):
        assert hmac_hex(SHA1, b"", b"") == "fbdb1d1b18aa6c08324b7d64b71fb76370690e1d"
        assert hmac_digest(SHA1, "", "") == bytes.fromhex("fbdb1d1b18aa6c08324b7d64b71fb76370690e1d")

    def test_wikipedia_vectors(self):
        assert hmac_hex(SHA1, b"key", QUICK_FOX) == "de7c9b85b8b78aa6bc8a7a36f70a90701c9db4d9"
        assert hmac_hex(MD5, b"key", QUICK_FOX) == "80070713463e7749b90c2dc24911e275"
        assert hmac_hex(SHA256, b"key", QUICK_FOX) == (
            "f7bc83f430538424b13298e6aa6fb143ef4d59a14946175997479dbc2d1a3cd8"
        )

    def test_long_key(self):
        key = b"lksadfjlkasfldjksajdflkasdjlfkasdjlfkasdjlfksajlkdfjalksdfjlksadfjlksad;fjlksadjflkasdjlfk"
        assert hmac_hex(SHA1, key, QUICK_FOX) == "6a0fbb14e3dbe792d585935f6ff82e51ce70e1e7"

    def test_rfc2202(self):
        assert hmac_hex(SHA1, b"\x0b" * 20, b"Hi There") == "b617318655057264e28bc0b6fb378c8ef146be00"
        assert hmac_hex(SHA1, b"Jefe", b"what do ya want for nothing?") == (
            "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79"
        )
        assert hmac_hex(
            SHA1, b"\xaa" * 80, b"Test Using Larger Than Block-Size Key - Hash Key First"
        ) == "aa4ae5e15272d00e95705637ce8a3b55ed402112"
        assert hmac_hex(MD5, b"Jefe", b"what do ya want for nothing?") == "750c783e6ab0b503eaa86e310a5db738"

    def test_rfc4231_case2(self):
        key, msg = b"Jefe", b"what do ya want for nothing?"
        assert hmac_hex(SHA256, key, msg) == (
            "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
        )
        assert hmac_hex(SHA384, key, msg) == (
            "af45d2e376484031617f78d2b58a6b1b9c7ef464f5a01b47e42ec3736322445e"
            "8e2240ca5e69e2c78b3239ecfab21649"
        )
        assert hmac_hex(SHA512, key, msg) == (
            "164b7a7bfcf819e2e395fbe73b56e0a387bd64222e831fd610270cd7ea250554"
            "9758bf75c05a994a6d034f65f8f0e6fdcaeab1a34d4a6b4b636e070a38bce737"
        )

    def test_rfc4231_case6_key_larger_than_block(self):
        assert hmac_hex(
            SHA256, b"\xaa" * 131, b"Test Using Larger Than Block-Size Key - Hash Key First"
        ) == "60e431591ee0b67f0d8a26aacbf5b77f8e0bc6213728c5140546040f0ee37f54"

    def test_output_length_equals_digest_size(self):
        for hf in (MD5, SHA1, SHA224, SHA256, SHA384, SHA512):
            assert len(hmac_digest(hf, b"k", b"m")) == hf.digest_size


class TestKeyNormalization:
    """Keys are hashed only when strictly longer than the block size."""

    @pytest.mark.parametrize("hf", [SHA1, SHA256, SHA512])
    def test_block_size_boundary(self, hf):
        bs = hf.block_size
        below = bytes(range(1, bs))
        exact = bytes((i % 251) + 1 for i in range(bs))
        above = bytes((i % 251) + 1 for i in range(bs + 1))
        msg = b"boundary"

        # Below: zero padding is implicit
        assert hmac_digest(hf, below, msg) == hmac_digest(hf, below + b"\x00", msg)
        assert len(normalize_key(hf, below)) == bs

        # Exact: used as-is, not hashed
        assert normalize_key(hf, exact) == exact
        assert hmac_digest(hf, exact, msg) != hmac_digest(hf, hf(exact), msg)

        # Above: replaced by its digest
        assert normalize_key(hf, above) == hf(above) + bytes(bs - hf.digest_size)
        assert hmac_digest(hf, above, msg) == hmac_digest(hf, hf(above), msg)

    @pytest.mark.parametrize("name,hf", [("sha1", SHA1), ("sha256", SHA256), ("sha512", SHA512)])
    def test_matches_stdlib(self, name, hf):
        for key_len in (0, 1, hf.block_size - 1, hf.block_size, hf.block_size + 1, 200):
            key = bytes((i * 13) & 0xFF for i in range(key_len))
            msg = b"payload-" + bytes([key_len & 0xFF])
            expected = std_hmac.new(key, msg, getattr(hashlib, name)).digest()
            assert hmac_digest(hf, key, msg) == expected


class TestGenericConstruction:
    def test_synthetic_hash_function(self):
        calls = []

        def recording(data):
            calls.append(data)
            return sha256(data)[:4]

        hf = HashFunction(name="rec", compute=recording, block_size=8, digest_size=4)
        out = hmac_digest(hf, b"\x01\x02", b"msg")

        k = b"\x01\x02" + b"\x00" * 6
        inner_input = bytes(b ^ 0x36 for b in k) + b"msg"
        assert calls[0] == inner_input
        assert calls[1] == bytes(b ^ 0x5C for b in k) + sha256(inner_input)[:4]
        assert out == sha256(calls[1])[:4]

    def test_digest_wider_than_block(self):
        hf = HashFunction(name="wide", compute=sha256, block_size=8, digest_size=32)
        key = b"123456789"

        k = normalize_key(hf, key)
        assert k == sha256(key)[:8]

        inner = sha256(bytes(b ^ 0x36 for b in k) + b"msg")
        expected = sha256(bytes(b ^ 0x5C for b in k) + inner)
        assert hmac_digest(hf, key, b"msg") == expected

    def test_short_key_with_wide_digest_is_padded(self):
        hf = HashFunction(name="wide", compute=sha256, block_size=8, digest_size=32)
        assert normalize_key(hf, b"abc") == b"abc" + bytes(5)

    def test_make_hmac(self):
        prf = make_hmac(SHA1)
        assert prf(b"", b"") == hmac_digest(SHA1, b"", b"")
        assert prf.__name__ == "hmac_sha1"


class TestLogging:
    def test_secrets_not_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="digestkit"):
            hmac_digest(SHA256, b"very-secret-key", b"hello")
        text = caplog.text
        assert "very-secret-key" not in text
        assert '"key_len":15' in text
        assert '"algorithm":"sha256"' in text

    def test_pbkdf2_logs_once_not_per_iteration(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="digestkit"):
            pbkdf2_hmac(SHA1, b"password", b"salt", 50, 40)
        ops = [r.getMessage() for r in caplog.records]
        assert len(ops) == 1
        assert '"op":"pbkdf2"' in ops[0]
        assert '"iterations":50' in ops[0]
