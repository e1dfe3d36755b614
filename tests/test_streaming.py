"""
Tests for incremental (block-by-block) hashing.
"""

import pytest

from digestkit.digests import Md5, Sha1, Sha256, Sha384, Sha512, md5, new_hash, sha1, sha256, sha512


class TestIncrementalFeeding:
    """update() in pieces must equal one-shot hashing."""

    @pytest.mark.parametrize("piece", [1, 3, 63, 64, 65, 127, 128, 129, 997])
    def test_pieces_match_one_shot(self, piece):
        data = bytes(range(256)) * 5
        for engine, one_shot in ((Md5, md5), (Sha1, sha1), (Sha256, sha256), (Sha512, sha512)):
            h = engine()
            for i in range(0, len(data), piece):
                h.update(data[i : i + piece])
            assert h.digest() == one_shot(data)

    def test_million_a_streamed(self, million_a):
        h = Sha1()
        view = memoryview(million_a)
        for i in range(0, len(million_a), 997):
            h.update(view[i : i + 997])
        assert h.hexdigest() == "34aa973cd4c4daa4f61eeb2bdbad27316534016f"

    def test_buffer_never_exceeds_one_block(self):
        h = Sha384()
        for n in (1, 50, 127, 128, 300):
            h.update(b"z" * n)
            assert len(h._buffer) < h.block_size

    def test_empty_update_is_noop(self):
        h = Sha256()
        h.update(b"")
        assert h.digest() == sha256(b"")


class TestDigestObject:
    """hashlib-like object behavior."""

    def test_digest_does_not_finalize(self):
        h = Sha1(b"ab")
        first = h.digest()
        h.update(b"c")
        assert first == sha1(b"ab")
        assert h.digest() == sha1(b"abc")

    def test_copy_is_independent(self):
        h = Sha256(b"prefix-")
        c = h.copy()
        h.update(b"one")
        c.update(b"two")
        assert h.digest() == sha256(b"prefix-one")
        assert c.digest() == sha256(b"prefix-two")

    def test_update_returns_none_like_hashlib(self):
        h = Sha256()
        assert h.update(b"abc") is None
        assert h.digest() == sha256(b"abc")

    def test_attributes(self):
        h = Sha512()
        assert h.name == "sha512"
        assert h.block_size == 128
        assert h.digest_size == 64

    def test_new_hash_by_name(self):
        h = new_hash("SHA-256", b"abc")
        assert h.hexdigest() == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    def test_accepts_bytearray_and_str(self):
        assert Md5(bytearray(b"abc")).digest() == md5(b"abc")
        assert Md5("abc").digest() == md5(b"abc")
