"""Xorshift128 pseudo random number generator."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF


@dataclass
class PseudoRand:
    """32-bit xorshift generator with four words of state."""

    x: int = 123456789
    y: int = 362436069
    z: int = 521288629
    w: int = 88675123

    def set_seed(self, x, y, z, w):
        """Replace the whole state."""
        self.x = x & _MASK32
        self.y = y & _MASK32
        self.z = z & _MASK32
        self.w = w & _MASK32

    def rand(self):
        """Advance the state and return the next 32-bit value."""
        t = (self.x ^ (self.x << 11)) & _MASK32
        self.x, self.y, self.z = self.y, self.z, self.w
        self.w = (self.w ^ (self.w >> 19)) ^ (t ^ (t >> 8))
        return self.w

    def __iter__(self):
        while True:
            yield self.rand()