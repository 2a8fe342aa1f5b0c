from __future__ import annotations

import struct

from .mixing import (
    BLOCK_SIZE,
    ZERO_BLOCK,
    decode_block,
    encode_words,
    finalize,
    overlay,
    permute,
)

_MASK_32 = 0xFFFFFFFF
_MASK_64 = 0xFFFFFFFFFFFFFFFF

# block image, s0..s3, seed, total, pending length
_STATE = struct.Struct("<32s4QQQB")

DIGEST_SIZE = 32
STATE_SIZE = _STATE.size


class StateError(ValueError):
    """Raised when a serialized Pengyhash256 state cannot be imported."""


class StateLengthError(StateError):
    """The snapshot is shorter than the fixed state layout."""


class StateCorruptError(StateError):
    """The snapshot encodes a pending length no engine can reach."""


def _check_bytes(data, what: str = "data") -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes-like")
    return bytes(data)


def _check_seed(seed: int, mask: int) -> int:
    if not isinstance(seed, int) or isinstance(seed, bool):
        raise TypeError("seed must be an int")
    if seed < 0 or seed > mask:
        raise ValueError(f"seed must be in range [0, {mask:#x}]")
    return seed


def pengyhash(data: bytes, seed: int = 0) -> int:
    """
    Compute the original, non-incremental pengyhash of a complete buffer.

    Args:
        data: Bytes-like buffer to hash
        seed: Unsigned 32-bit seed, mixed in on every finalization round

    Returns:
        The 64-bit digest as an int

    Raises:
        TypeError: If data is not bytes-like
        ValueError: If seed does not fit in 32 bits
    """
    raw = _check_bytes(data)
    seed = _check_seed(seed, _MASK_32)

    s = (0, 0, 0, len(raw) & _MASK_64)
    last = ZERO_BLOCK

    limit = len(raw) - (len(raw) % BLOCK_SIZE)
    for idx in range(0, limit, BLOCK_SIZE):
        s = permute(s, decode_block(raw, idx))
    if limit:
        last = raw[limit - BLOCK_SIZE:limit]

    b = decode_block(overlay(last, raw[limit:]))
    s = finalize(s, b, seed)
    return sum(s) & _MASK_64


class Pengyhash256:
    """
    Incremental, seeded pengyhash variant with a 256-bit digest.

    The interface mirrors hashlib-style objects. Input may arrive in chunks of
    any size; the digest only depends on the concatenated bytes. The internal
    state can be exported to an 81-byte snapshot and restored later.
    """

    name = "pengyhash256"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, seed: int = 0):
        self._seed = _check_seed(seed, _MASK_64)
        self.reset()

    @property
    def seed(self) -> int:
        return self._seed

    def reset(self) -> None:
        self._s = (0, 0, 0, self._seed)
        self._total = 0
        self._last = ZERO_BLOCK
        self._tail = bytearray()

    def copy(self) -> "Pengyhash256":
        dup = self.__class__.__new__(self.__class__)
        dup._seed = self._seed
        dup._s = self._s
        dup._total = self._total
        dup._last = self._last
        dup._tail = bytearray(self._tail)
        return dup

    def write(self, data: bytes) -> int:
        """Absorb ``data`` and return the number of bytes consumed."""
        raw = _check_bytes(data)
        self._total = (self._total + len(raw)) & _MASK_64

        offset = 0
        if self._tail:
            offset = min(BLOCK_SIZE - len(self._tail), len(raw))
            self._tail += raw[:offset]
            if len(self._tail) == BLOCK_SIZE:
                self._absorb(bytes(self._tail))
                self._tail = bytearray()

        limit = len(raw) - ((len(raw) - offset) % BLOCK_SIZE)
        for idx in range(offset, limit, BLOCK_SIZE):
            self._absorb(raw[idx:idx + BLOCK_SIZE])

        # Non-empty only when no pending tail is left over from above.
        self._tail += raw[limit:]
        return len(raw)

    def update(self, data: bytes) -> "Pengyhash256":
        self.write(data)
        return self

    def digest(self) -> bytes:
        return encode_words(self._finalize())

    def hexdigest(self) -> str:
        return self.digest().hex()

    def intdigest(self) -> int:
        return int.from_bytes(self.digest(), byteorder="little", signed=False)

    def export_state(self) -> bytes:
        """
        Serialize the engine state to a fixed 81-byte snapshot.

        Layout (little-endian): 32-byte block image, four state words, seed,
        total length, pending length. The block image is the pending tail
        written over the last absorbed block.
        """
        return _STATE.pack(
            overlay(self._last, self._tail),
            *self._s,
            self._seed,
            self._total,
            len(self._tail),
        )

    def import_state(self, data: bytes) -> None:
        """
        Replace this engine's state with a snapshot from ``export_state``.

        Bytes past the fixed layout are ignored. On failure the engine is left
        untouched.

        Raises:
            TypeError: If data is not bytes-like
            StateLengthError: If data is shorter than the state layout
            StateCorruptError: If the pending length is 32 or more
        """
        raw = _check_bytes(data, "state")
        if len(raw) < STATE_SIZE:
            raise StateLengthError(
                f"state must be at least {STATE_SIZE} bytes, got {len(raw)}"
            )

        block, s0, s1, s2, s3, seed, total, pending = _STATE.unpack_from(raw)
        if pending >= BLOCK_SIZE:
            raise StateCorruptError(f"invalid pending length {pending}")

        self._seed = seed
        self._s = (s0, s1, s2, s3)
        self._total = total
        self._last = block
        self._tail = bytearray(block[:pending])

    @classmethod
    def from_state(cls, data: bytes) -> "Pengyhash256":
        """Construct an engine directly from an exported snapshot."""
        h = cls.__new__(cls)
        h.import_state(data)
        return h

    # Internal helpers -------------------------------------------------
    def _absorb(self, block: bytes) -> None:
        self._s = permute(self._s, decode_block(block))
        self._last = block

    def _finalize(self):
        b = decode_block(overlay(self._last, self._tail))
        return finalize(self._s, b, self._total)


def pengyhash256(seed: int = 0) -> Pengyhash256:
    """Convenience constructor matching hashlib-style usage."""
    return Pengyhash256(seed)


__all__ = [
    "DIGEST_SIZE",
    "STATE_SIZE",
    "Pengyhash256",
    "StateCorruptError",
    "StateError",
    "StateLengthError",
    "pengyhash",
    "pengyhash256",
]
