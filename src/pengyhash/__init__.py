"""
Non-cryptographic pengyhash: a one-shot 64-bit hash and an incremental,
resumable 256-bit variant.
"""

from .pengyhash import (
    DIGEST_SIZE,
    STATE_SIZE,
    Pengyhash256,
    StateCorruptError,
    StateError,
    StateLengthError,
    pengyhash,
    pengyhash256,
)

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
