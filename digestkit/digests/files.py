from __future__ import annotations

import hmac
import os

from ..errors import InvalidParameter
from . import new_hash


def digest_file_hex(path: str, algorithm: str = "sha256", chunk_size: int = 8192) -> str:
    if chunk_size <= 0:
        raise InvalidParameter("chunk_size_must_be_positive")
    h = new_hash(algorithm)
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            h.update(chunk)
    return h.hexdigest()


def verify_file_digest(path: str, expected_hex: str, algorithm: str = "sha256") -> bool:
    """
    Returns True if the file exists and matches the expected hex digest.
    """
    if not path or not os.path.exists(path) or not os.path.isfile(path):
        return False
    h = new_hash(algorithm)
    expected = (expected_hex or "").strip().lower()
    if len(expected) != 2 * h.digest_size:
        return False
    actual = digest_file_hex(path, algorithm)
    return hmac.compare_digest(actual, expected)
