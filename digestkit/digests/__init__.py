"""
Digest engines.

Each algorithm is available three ways:
- one-shot functions returning bytes or lowercase hex (sha256, sha256_hex)
- incremental hashlib-style objects (h = Sha256(); h.update(...); h.digest())
- a HashFunction capability (SHA256) for HMAC / PBKDF2 / HOTP / TOTP

get_hash_function() resolves the capability by name for configuration
files and the command line.
"""

from typing import Dict, List, Type

from ..errors import InvalidParameter
from .base import HashFunction, MerkleDamgardHash
from .md5 import MD5, MD5_BLOCK_SIZE, MD5_DIGEST_SIZE, Md5, md5, md5_hex
from .sha1 import SHA1, SHA1_BLOCK_SIZE, SHA1_DIGEST_SIZE, Sha1, sha1, sha1_hex
from .sha2 import (
    SHA224,
    SHA224_BLOCK_SIZE,
    SHA224_DIGEST_SIZE,
    SHA256,
    SHA256_BLOCK_SIZE,
    SHA256_DIGEST_SIZE,
    SHA384,
    SHA384_BLOCK_SIZE,
    SHA384_DIGEST_SIZE,
    SHA512,
    SHA512_BLOCK_SIZE,
    SHA512_DIGEST_SIZE,
    SHA512_224,
    SHA512_224_BLOCK_SIZE,
    SHA512_224_DIGEST_SIZE,
    SHA512_256,
    SHA512_256_BLOCK_SIZE,
    SHA512_256_DIGEST_SIZE,
    Sha224,
    Sha256,
    Sha384,
    Sha512,
    Sha512_224,
    Sha512_256,
    sha224,
    sha224_hex,
    sha256,
    sha256_hex,
    sha384,
    sha384_hex,
    sha512,
    sha512_hex,
    sha512_224,
    sha512_224_hex,
    sha512_256,
    sha512_256_hex,
)


_HASH_FUNCTIONS: Dict[str, HashFunction] = {
    hf.name: hf for hf in (MD5, SHA1, SHA224, SHA256, SHA384, SHA512, SHA512_224, SHA512_256)
}

_ENGINES: Dict[str, Type[MerkleDamgardHash]] = {
    e.name: e for e in (Md5, Sha1, Sha224, Sha256, Sha384, Sha512, Sha512_224, Sha512_256)
}


def _canonical_name(name: str) -> str:
    # "SHA-512/256", "sha512-256", "SHA512_256" -> "sha512_256"
    s = (name or "").strip().lower()
    s = s.replace("-", "").replace("/", "_")
    if s.startswith("sha512") and len(s) > 6 and s[6] != "_":
        s = "sha512_" + s[6:]
    return s


def available_algorithms() -> List[str]:
    return list(_HASH_FUNCTIONS)


def get_hash_function(name: str) -> HashFunction:
    key = _canonical_name(name)
    try:
        return _HASH_FUNCTIONS[key]
    except KeyError:
        raise InvalidParameter(f"unknown_hash_algorithm:{name}")


def new_hash(name: str, data=None) -> MerkleDamgardHash:
    """Incremental engine by name, like hashlib.new()."""
    key = _canonical_name(name)
    try:
        engine = _ENGINES[key]
    except KeyError:
        raise InvalidParameter(f"unknown_hash_algorithm:{name}")
    return engine(data)


__all__ = [
    "HashFunction",
    "MerkleDamgardHash",
    "available_algorithms",
    "get_hash_function",
    "new_hash",
    "MD5", "MD5_BLOCK_SIZE", "MD5_DIGEST_SIZE", "Md5", "md5", "md5_hex",
    "SHA1", "SHA1_BLOCK_SIZE", "SHA1_DIGEST_SIZE", "Sha1", "sha1", "sha1_hex",
    "SHA224", "SHA224_BLOCK_SIZE", "SHA224_DIGEST_SIZE", "Sha224", "sha224", "sha224_hex",
    "SHA256", "SHA256_BLOCK_SIZE", "SHA256_DIGEST_SIZE", "Sha256", "sha256", "sha256_hex",
    "SHA384", "SHA384_BLOCK_SIZE", "SHA384_DIGEST_SIZE", "Sha384", "sha384", "sha384_hex",
    "SHA512", "SHA512_BLOCK_SIZE", "SHA512_DIGEST_SIZE", "Sha512", "sha512", "sha512_hex",
    "SHA512_224", "SHA512_224_BLOCK_SIZE", "SHA512_224_DIGEST_SIZE", "Sha512_224",
    "sha512_224", "sha512_224_hex",
    "SHA512_256", "SHA512_256_BLOCK_SIZE", "SHA512_256_DIGEST_SIZE", "Sha512_256",
    "sha512_256", "sha512_256_hex",
]
