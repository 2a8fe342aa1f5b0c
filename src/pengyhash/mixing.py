from __future__ import annotations

import struct
from typing import Sequence, Tuple

_MASK_64 = 0xFFFFFFFFFFFFFFFF
_BLOCK = struct.Struct("<4Q")

BLOCK_SIZE = 32
FINAL_ROUNDS = 6

Words = Tuple[int, int, int, int]

ZERO_BLOCK = bytes(BLOCK_SIZE)


def rotl(x: int, b: int) -> int:
    """Rotate left for 64-bit values."""
    return ((x << b) | (x >> (64 - b))) & _MASK_64


def permute(s: Sequence[int], b: Sequence[int], extra: int = 0) -> Words:
    """
    Run one round of the pengyhash mixing function.

    Each step reads the words already updated by the steps before it. During
    absorption ``extra`` is zero; finalization adds the total length (or the
    32-bit seed of the one-shot hash) into the ``s1`` update on every round.

    Args:
        s: Four accumulator words
        b: Four input words, decoded from a 32-byte block
        extra: Scalar added to ``s1`` during finalization

    Returns:
        The updated accumulator words as a tuple
    """
    s0, s1, s2, s3 = s
    b0, b1, b2, b3 = b

    s0 = (s0 + s1 + b3) & _MASK_64
    s1 = (s0 + rotl(s1, 14) + extra) & _MASK_64
    s2 = (s2 + s3 + b2) & _MASK_64
    s3 = (s2 + rotl(s3, 23)) & _MASK_64
    s0 = (s0 + s3 + b1) & _MASK_64
    s3 = s0 ^ rotl(s3, 16)
    s2 = (s2 + s1 + b0) & _MASK_64
    s1 = s2 ^ rotl(s1, 40)

    return s0, s1, s2, s3


def finalize(s: Sequence[int], b: Sequence[int], extra: int) -> Words:
    """Apply the finalization rounds to a copy of ``s`` against a fixed block."""
    out = tuple(s)
    for _ in range(FINAL_ROUNDS):
        out = permute(out, b, extra)
    return out  # type: ignore[return-value]


def decode_block(buf, offset: int = 0) -> Words:
    return _BLOCK.unpack_from(buf, offset)  # type: ignore[return-value]


def encode_words(words: Sequence[int]) -> bytes:
    return _BLOCK.pack(*words)


def overlay(base: bytes, tail: bytes) -> bytes:
    """
    Build the virtual final block.

    The trailing bytes that never formed a full block are written over the
    byte image of the last absorbed block, so positions past the tail keep
    that block's content instead of zero padding.
    """
    if len(base) != BLOCK_SIZE:
        raise ValueError(f"base block must be exactly {BLOCK_SIZE} bytes")
    if len(tail) >= BLOCK_SIZE:
        raise ValueError(f"tail must be shorter than {BLOCK_SIZE} bytes")
    return bytes(tail) + bytes(base[len(tail):])


__all__ = [
    "BLOCK_SIZE",
    "FINAL_ROUNDS",
    "ZERO_BLOCK",
    "decode_block",
    "encode_words",
    "finalize",
    "overlay",
    "permute",
    "rotl",
]
