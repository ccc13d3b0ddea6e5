"""A ring of panels seen as one wrapping virtual screen."""

from __future__ import annotations

from .screen import (
    CV_DISPLAYS,
    CV_DISTANCE,
    CV_FRAME_BYTES,
    CV_HEIGHT,
    CV_MARGIN,
    CV_ONE_FRAME_BYTES,
    CV_V_PIXELS,
    CV_V_WIDTH,
    CV_WIDTH,
    Color,
    MonoScreen,
    ScreenBase,
)


class CyclicMonoScreen(ScreenBase):
    """All panels of the ring, including the blank margins between them.

    The x axis wraps every CV_V_WIDTH dots; dots that fall into a margin
    are dropped on write and read back as black.
    """

    width = CV_V_WIDTH
    height = CV_HEIGHT
    pixels = CV_V_PIXELS

    def __init__(self):
        self.screens = [MonoScreen() for _ in range(CV_DISPLAYS)]

    def attach_buffer(self, buffer):
        """Make the panels draw into consecutive slices of *buffer*."""
        view = memoryview(buffer)
        if view.nbytes < CV_FRAME_BYTES:
            raise ValueError(f"frame buffer needs {CV_FRAME_BYTES} bytes, got {view.nbytes}")
        for index, screen in enumerate(self.screens):
            start = index * CV_ONE_FRAME_BYTES
            screen.buffer = view[start:start + CV_ONE_FRAME_BYTES]

    def mono_screen(self, index):
        """Return the panel at *index*."""
        return self.screens[index]

    def clear(self, color=None):
        for screen in self.screens:
            screen.clear(color)

    def _locate(self, x, y):
        if not 0 <= y < CV_HEIGHT:
            return None
        position = (-x - (CV_MARGIN + 1)) % CV_V_WIDTH
        index, panel_x = divmod(position, CV_DISTANCE)
        if panel_x >= CV_WIDTH:
            return None
        return self.screens[index], panel_x

    def set_dot(self, x, y, color):
        target = self._locate(x, y)
        if target is not None:
            screen, panel_x = target
            screen.set_dot(panel_x, y, color)

    def get_dot(self, x, y):
        target = self._locate(x, y)
        if target is None:
            return Color.BLACK
        screen, panel_x = target
        return screen.get_dot(panel_x, y)