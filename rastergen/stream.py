"""
rastergen/stream.py
Deterministic hash-based number stream

CRITICAL: Do NOT use Python's built-in hash() - it's salted per-process.
Every value must be reproducible across runs and platforms, so the running
state is a SHA-256 object fed with fixed little-endian words.

This is not a statistical or cryptographic generator. It exists so a render
with a given seed always comes out the same.
"""

import hashlib

import numpy as np

from .config import FLOAT_WIDTHS, INTEGER_WIDTHS, STREAM_CONFIG

U32_MASK = (1 << 32) - 1
U64_MAX = (1 << 64) - 1

_F32_BELOW_ONE = float(np.nextafter(np.float32(1.0), np.float32(0.0)))
_F64_BELOW_ONE = float(np.nextafter(1.0, 0.0))


def stable_u32(*parts) -> int:
    """
    Generate a stable 32-bit unsigned integer from arbitrary parts.

    Uses SHA-256 truncated to 4 bytes for cross-platform determinism.

    Example:
        stable_u32("seed", "sunset") -> consistent value across runs
    """
    s = "|".join(str(p) for p in parts).encode("utf-8")
    return int.from_bytes(hashlib.sha256(s).digest()[:4], "big")


class HashStream:
    """
    Seeded stream of integers and floats.

    Each draw mixes ``STREAM_CONFIG.mix_constant`` into the running hash and
    reads the digest, so two identical calls in a row give different values.
    Narrower integers are truncations of the same 64-bit draw.
    """

    def __init__(self, seed: int = 0):
        self._hasher = hashlib.sha256()
        self.seed(seed)

    @classmethod
    def seeded(cls, seed: int) -> "HashStream":
        return cls(seed)

    def seed(self, value: int) -> None:
        """Reset state; the seed is taken modulo 2**32."""
        self._hasher = hashlib.sha256()
        self._write_word(int(value) & U32_MASK, STREAM_CONFIG.seed_bytes)

    def _write_word(self, value: int, nbytes: int) -> None:
        self._hasher.update(value.to_bytes(nbytes, "little"))

    def _draw(self) -> int:
        self._write_word(STREAM_CONFIG.mix_constant, STREAM_CONFIG.word_bytes)
        # digest() leaves the hash object usable, so state keeps accumulating
        digest = self._hasher.digest()
        return int.from_bytes(digest[:STREAM_CONFIG.draw_bytes], "little")

    def next_integer(self, width: int = 64) -> int:
        """
        Draw an unsigned integer of ``width`` bits.

        Args:
            width: One of 8, 16, 32, 64

        Raises:
            ValueError: If width is not supported
        """
        if width not in INTEGER_WIDTHS:
            raise ValueError(f"Unsupported integer width: {width}")
        return self._draw() & ((1 << width) - 1)

    def next_float(self, width: int = 64) -> float:
        """
        Draw a float in [0, 1).

        The 64-bit draw is divided by the u64 maximum. Width 32 rounds the
        result to float32 precision.
        """
        if width not in FLOAT_WIDTHS:
            raise ValueError(f"Unsupported float width: {width}")
        value = self._draw() / U64_MAX
        if width == 32:
            value = float(np.float32(value))
            return min(value, _F32_BELOW_ONE)
        return min(value, _F64_BELOW_ONE)

    def next_u8(self) -> int:
        return self.next_integer(8)

    def next_u16(self) -> int:
        return self.next_integer(16)

    def next_u32(self) -> int:
        return self.next_integer(32)

    def next_u64(self) -> int:
        return self.next_integer(64)

    def next_f32(self) -> float:
        return self.next_float(32)

    def next_f64(self) -> float:
        return self.next_float(64)
