"""Panel geometry, colours and the single-panel monochrome screen."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum

CV_HEIGHT = 128
"""Height of one panel in pixels."""
CV_WIDTH = 32
"""Width of one panel in pixels."""
CV_MARGIN = 39
"""Blank gap between neighbouring panels in pixels."""
CV_PIXELS = CV_HEIGHT * CV_WIDTH
CV_ONE_FRAME_BYTES = CV_PIXELS // 8
CV_DISPLAYS = 16
CV_FRAME_BYTES = CV_ONE_FRAME_BYTES * CV_DISPLAYS
CV_DISTANCE = CV_WIDTH + CV_MARGIN
CV_V_WIDTH = CV_DISTANCE * CV_DISPLAYS
CV_V_PIXELS = CV_V_WIDTH * CV_HEIGHT


class Color(IntEnum):
    """Pixel colour of a monochrome panel."""

    BLACK = 0
    WHITE = 1


class ScreenBase(ABC):
    """A drawable surface addressed by (x, y) dots."""

    width = 0
    height = 0
    pixels = 0
    clear_color = Color.BLACK

    def clear(self, color=None):
        """Fill every dot with *color*, or with the clear colour when omitted."""
        fill = self.clear_color if color is None else color
        for y in range(self.height):
            for x in range(self.width):
                self.set_dot(x, y, fill)

    @abstractmethod
    def set_dot(self, x, y, color):
        """Set the dot at (x, y) to *color*."""

    @abstractmethod
    def get_dot(self, x, y):
        """Return the colour of the dot at (x, y)."""


class MonoScreen(ScreenBase):
    """One panel whose frame is stored as bytes of eight vertically packed dots.

    Dots are addressed with 0 <= x < CV_WIDTH and 0 <= y < CV_HEIGHT; the
    frame is stored rotated, so y picks the byte column and x the bit row.
    """

    width = CV_WIDTH
    height = CV_HEIGHT
    pixels = CV_PIXELS

    def __init__(self, buffer=None):
        self.buffer = bytearray(CV_ONE_FRAME_BYTES) if buffer is None else buffer

    @property
    def buffer(self):
        """The writable frame memory of this panel."""
        return self._buffer

    @buffer.setter
    def buffer(self, buffer):
        if len(buffer) < CV_ONE_FRAME_BYTES:
            raise ValueError(
                f"frame buffer needs {CV_ONE_FRAME_BYTES} bytes, got {len(buffer)}"
            )
        self._buffer = buffer

    def clear(self, color=None):
        """Fill the whole frame with *color* (black by default)."""
        fill = self.clear_color if color is None else color
        value = 0xFF if fill == Color.WHITE else 0x00
        self._buffer[:CV_ONE_FRAME_BYTES] = bytes([value]) * CV_ONE_FRAME_BYTES

    def _locate(self, x, y):
        if not (0 <= x < CV_WIDTH and 0 <= y < CV_HEIGHT):
            raise IndexError(f"dot ({x}, {y}) is outside the panel")
        return y + ((x >> 3) << 7), x & 7

    def set_dot(self, x, y, color):
        index, bit = self._locate(x, y)
        if color == Color.WHITE:
            self._buffer[index] |= 1 << bit
        else:
            self._buffer[index] &= ~(1 << bit) & 0xFF

    def get_dot(self, x, y):
        index, bit = self._locate(x, y)
        return Color((self._buffer[index] >> bit) & 0x01)