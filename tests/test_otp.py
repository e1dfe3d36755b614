"""
Tests for HOTP (RFC 4226) and TOTP (RFC 6238).
"""

import time

import pytest

from digestkit.digests import MD5, SHA1, SHA256, SHA512, HashFunction, sha256
from digestkit.errors import InvalidParameter
from digestkit.security import (
    counter_to_bytes,
    dynamic_truncate,
    hmac_digest,
    hotp,
    hotp_value,
    time_counter,
    totp,
    totp_now,
    totp_value,
)


SECRET_SHA1 = b"12345678901234567890"
SECRET_SHA256 = b"12345678901234567890123456789012"
SECRET_SHA512 = b"1234567890123456789012345678901234567890123456789012345678901234"


class TestHotp:
    @pytest.mark.parametrize(
        "counter,expected",
        [
            (0, "755224"),
            (1, "287082"),
            (2, "359152"),
            (3, "969429"),
            (4, "338314"),
            (5, "254676"),
            (6, "287922"),
            (7, "162583"),
            (8, "399871"),
            (9, "520489"),
        ],
    )
    def test_rfc4226_appendix_d(self, counter, expected):
        assert hotp(SHA1, SECRET_SHA1, counter, 6) == expected
        assert hotp_value(SHA1, SECRET_SHA1, counter, 6) == int(expected)

    def test_secret_as_text(self):
        assert hotp(SHA1, "12345678901234567890", 0) == "755224"

    def test_rfc4226_dynamic_truncation_example(self):
        mac = bytes.fromhex("1f8698690e02ca16618550ef7f19da8e945b555a")
        assert dynamic_truncate(mac) == 0x50EF7F19
        assert dynamic_truncate(mac) % 10 ** 6 == 872921

    def test_counter_encoding(self):
        assert counter_to_bytes(0) == b"\x00" * 8
        assert counter_to_bytes(1) == b"\x00" * 7 + b"\x01"
        assert counter_to_bytes(2 ** 64 - 1) == b"\xff" * 8

    def test_range_and_padding(self):
        for digits in (1, 4, 6, 8):
            for counter in range(60):
                code = hotp(SHA1, SECRET_SHA1, counter, digits)
                assert len(code) == digits
                assert code.isdigit()
                assert 0 <= int(code) < 10 ** digits

    def test_leading_zeros_preserved(self):
        # Some counter in the first few hundred yields a code with a leading zero
        codes = [hotp(SHA1, SECRET_SHA1, c, 6) for c in range(300)]
        assert any(code.startswith("0") for code in codes)
        assert all(len(code) == 6 for code in codes)

    def test_digits_zero_rejected(self):
        with pytest.raises(InvalidParameter, match="digits_must_be_positive"):
            hotp(SHA1, SECRET_SHA1, 0, 0)

    @pytest.mark.parametrize("counter", [-1, 2 ** 64])
    def test_counter_out_of_range(self, counter):
        with pytest.raises(InvalidParameter, match="counter_out_of_range"):
            hotp(SHA1, SECRET_SHA1, counter, 6)

    def test_short_digest_rejected(self):
        with pytest.raises(InvalidParameter, match="digest_too_short_for_dynamic_truncation"):
            hotp(MD5, SECRET_SHA1, 0, 6)

    def test_nineteen_byte_digest_is_enough(self):
        hf = HashFunction(name="n19", compute=lambda d: sha256(d)[:19], block_size=64, digest_size=19)
        mac = hmac_digest(hf, SECRET_SHA1, counter_to_bytes(7))
        assert hotp_value(hf, SECRET_SHA1, 7, 8) == dynamic_truncate(mac) % 10 ** 8

    def test_eighteen_byte_digest_rejected(self):
        hf = HashFunction(name="n18", compute=lambda d: sha256(d)[:18], block_size=64, digest_size=18)
        with pytest.raises(InvalidParameter, match="digest_too_short_for_dynamic_truncation:n18"):
            hotp(hf, SECRET_SHA1, 0, 6)


TOTP_VECTORS = [
    (59, "94287082", "46119246", "90693936"),
    (1111111109, "07081804", "68084774", "25091201"),
    (1111111111, "14050471", "67062674", "99943326"),
    (1234567890, "89005924", "91819424", "93441116"),
    (2000000000, "69279037", "90698825", "38618901"),
    (20000000000, "65353130", "77737706", "47863826"),
]


class TestTotp:
    @pytest.mark.parametrize("t,sha1_code,sha256_code,sha512_code", TOTP_VECTORS)
    def test_rfc6238_appendix_b(self, t, sha1_code, sha256_code, sha512_code):
        assert totp(SHA1, SECRET_SHA1, t, 0, 30, 8) == sha1_code
        assert totp(SHA256, SECRET_SHA256, t, 0, 30, 8) == sha256_code
        assert totp(SHA512, SECRET_SHA512, t, 0, 30, 8) == sha512_code

    def test_leading_zero_vector(self):
        assert totp(SHA1, SECRET_SHA1, 1111111109, 0, 30, 8) == "07081804"
        assert totp_value(SHA1, SECRET_SHA1, 1111111109, 0, 30, 8) == 7081804

    def test_delegates_to_hotp(self):
        assert totp(SHA1, SECRET_SHA1, 59, 0, 30, 6) == hotp(SHA1, SECRET_SHA1, 1, 6)

    @pytest.mark.parametrize("base,step,k", [(0, 30, 1), (100, 30, 5), (7, 60, 3), (0, 1, 10)])
    def test_constant_within_step_and_changes_at_boundary(self, base, step, k):
        start = base + k * step
        end = base + (k + 1) * step
        for t in range(start, end):
            assert time_counter(t, base, step) == k
            assert totp(SHA1, SECRET_SHA1, t, base, step) == hotp(SHA1, SECRET_SHA1, k)
        assert time_counter(end, base, step) == k + 1
        assert time_counter(start - 1, base, step) == k - 1

    def test_step_zero_rejected(self):
        with pytest.raises(InvalidParameter, match="step_must_be_positive"):
            totp(SHA1, SECRET_SHA1, 59, 0, 0, 8)

    def test_time_before_base_rejected(self):
        with pytest.raises(InvalidParameter, match="time_before_base"):
            totp(SHA1, SECRET_SHA1, 10, 20, 30, 8)

    def test_digits_zero_rejected(self):
        with pytest.raises(InvalidParameter, match="digits_must_be_positive"):
            totp(SHA1, SECRET_SHA1, 59, 0, 30, 0)

    def test_totp_now_with_clock(self):
        assert totp_now(SHA1, SECRET_SHA1, digits=8, clock=lambda: 59.9) == "94287082"

    def test_totp_now_uses_wall_clock(self, monkeypatch):
        monkeypatch.setattr(time, "time", lambda: 1111111111.5)
        assert totp_now(SHA1, SECRET_SHA1, digits=8) == "14050471"
