"""Monochrome images stored with eight vertically packed dots per byte."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MonoImage:
    """A packed monochrome image with an optional packed alpha mask.

    Byte ``x + (y // 8) * width`` holds dot (x, y) in bit ``y % 8``.
    In the alpha mask a set bit is opaque and a clear bit transparent.
    """

    width: int
    height: int
    data: bytes
    alpha: bytes | None = None
    draw_offset_x: int = 0
    draw_offset_y: int = 0

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError("image size must not be negative")
        needed = self.buffer_size()
        if len(self.data) < needed:
            raise ValueError(f"image data needs {needed} bytes, got {len(self.data)}")
        if self.alpha is not None and len(self.alpha) < needed:
            raise ValueError(f"alpha data needs {needed} bytes, got {len(self.alpha)}")

    @property
    def pixels(self):
        return self.width * self.height

    @property
    def has_alpha(self):
        return self.alpha is not None

    def _bit(self, plane, x, y):
        return (plane[x + (y // 8) * self.width] >> (y % 8)) & 0x01

    def get_dot(self, x, y):
        """Return 1 where the dot at (x, y) is set, else 0."""
        return self._bit(self.data, x, y)

    def get_dot_alpha(self, x, y):
        """Return 1 where the dot at (x, y) is opaque, else 0."""
        if self.alpha is None:
            raise ValueError("image has no alpha mask")
        return self._bit(self.alpha, x, y)

    def buffer_height(self):
        """Height rounded up to whole bytes of eight rows."""
        return ((self.height + 7) // 8) * 8

    def buffer_size(self):
        """Number of bytes one packed plane of this image takes."""
        return (self.width * self.buffer_height()) // 8