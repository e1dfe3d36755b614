"""
Shared machinery for the digest engines.

Every engine in this package is a Merkle-Damgard construction: the message is
padded, split into fixed-size blocks, and each block is folded into a running
state by the algorithm's compression function. MerkleDamgardHash implements
the buffering, padding and serialization once; subclasses only provide their
constants and a compression function.

HashFunction is the capability the composition layer (HMAC, PBKDF2, HOTP,
TOTP) depends on: a digest callable paired with its block and output sizes.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Type

from ..encoding import BytesLike, bytes_to_hex, to_bytes
from ..errors import InvalidParameter


MASK_32 = 0xFFFFFFFF
MASK_64 = 0xFFFFFFFFFFFFFFFF


def rotl32(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & MASK_32


def rotr32(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & MASK_32


def rotr64(x: int, n: int) -> int:
    return ((x >> n) | (x << (64 - n))) & MASK_64


class MerkleDamgardHash:
    """
    Incremental hash object with a hashlib-like surface.

    Only one partial block is retained between update() calls, so arbitrarily
    large inputs can be fed in pieces without holding them in memory.

    Subclasses set:
      name, block_size, digest_size
      length_size: width of the trailing bit-length field, in bytes
      byteorder:   "big" or "little", for both words and the length field
      word_format: struct code of one state word ("I" or "Q")
      initial_state: the algorithm's IV
    and implement _compress(state, block) -> new state.
    """

    name = ""
    block_size = 0
    digest_size = 0
    length_size = 8
    byteorder = "big"
    word_format = "I"
    initial_state: Tuple[int, ...] = ()

    __slots__ = ("_state", "_buffer", "_length")

    def __init__(self, data: Optional[BytesLike] = None) -> None:
        self._state: Tuple[int, ...] = tuple(self.initial_state)
        self._buffer = b""
        self._length = 0
        if data is not None:
            self.update(data)

    @staticmethod
    def _compress(state: Sequence[int], block) -> Tuple[int, ...]:
        raise NotImplementedError

    def update(self, data: BytesLike) -> None:
        data = to_bytes(data)
        if not data:
            return
        self._length += len(data)

        bs = self.block_size
        view = memoryview(data)
        state = self._state

        if self._buffer:
            need = bs - len(self._buffer)
            if len(view) < need:
                self._buffer += bytes(view)
                return
            state = self._compress(state, self._buffer + bytes(view[:need]))
            view = view[need:]

        full = len(view) - len(view) % bs
        for offset in range(0, full, bs):
            state = self._compress(state, view[offset : offset + bs])

        self._state = state
        self._buffer = bytes(view[full:])

    def _padding(self) -> bytes:
        bs = self.block_size
        ls = self.length_size
        bit_length = (self._length * 8) & ((1 << (8 * ls)) - 1)
        zeros = (bs - ls - 1 - self._length) % bs
        return b"\x80" + b"\x00" * zeros + bit_length.to_bytes(ls, self.byteorder)

    def digest(self) -> bytes:
        # Finalize on a local copy of the state; the object stays usable.
        tail = self._buffer + self._padding()
        state = self._state
        bs = self.block_size
        for offset in range(0, len(tail), bs):
            state = self._compress(state, tail[offset : offset + bs])

        order = "<" if self.byteorder == "little" else ">"
        fmt = f"{order}{len(state)}{self.word_format}"
        return struct.pack(fmt, *state)[: self.digest_size]

    def hexdigest(self) -> str:
        return bytes_to_hex(self.digest())

    def copy(self) -> "MerkleDamgardHash":
        other = self.__class__.__new__(self.__class__)
        other._state = self._state
        other._buffer = self._buffer
        other._length = self._length
        return other


@dataclass(frozen=True)
class HashFunction:
    """
    A digest function together with the sizes the composition layer needs.

    compute maps a message to a fixed-length digest. block_size is the HMAC
    key-normalization boundary; digest_size is the output length. Both are in
    bytes and are supplied alongside the callable because they cannot be
    recovered from it.
    """

    name: str
    compute: Callable[[bytes], bytes]
    block_size: int
    digest_size: int

    def __post_init__(self) -> None:
        if self.block_size <= 0:
            raise InvalidParameter("block_size_must_be_positive")
        if self.digest_size <= 0:
            raise InvalidParameter("digest_size_must_be_positive")

    def __call__(self, data: BytesLike) -> bytes:
        return self.compute(to_bytes(data))

    def hex(self, data: BytesLike) -> str:
        return bytes_to_hex(self(data))

    @classmethod
    def from_engine(cls, engine: Type[MerkleDamgardHash]) -> "HashFunction":
        return cls(
            name=engine.name,
            compute=lambda data: engine(data).digest(),
            block_size=engine.block_size,
            digest_size=engine.digest_size,
        )
