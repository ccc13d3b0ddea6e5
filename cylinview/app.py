"""Animation application that renders frames onto the ring of panels."""

from __future__ import annotations

import math
import random

from .cyclic_screen import CyclicMonoScreen
from .drawer import CyclicMonoDrawer
from .rand import PseudoRand
from .screen import CV_HEIGHT, CV_V_WIDTH
from .snow import Snow
from .timer import IntervalTimer

GRAINS = 100
"""Number of snow grains kept by the application."""

AUTO_MODE_INTERVAL_MS = 10 * 1000
"""Default interval of the automatic render mode change."""


def angle_to_xpos(angle):
    """Map a rotation angle in radians to a horizontal ring position."""
    return int((angle / (2 * math.pi)) * CV_V_WIDTH)


class App:
    """Keeps the render state and draws one frame per ``render`` call.

    *frames* is the sequence of images played by render mode 0; *clock*
    returns the current time in milliseconds for the mode change timer.
    """

    def __init__(self, frames=(), clock=None):
        self.frames = list(frames)
        self.mode = 0
        self.max_render_mode = 5
        self.auto_mode_change = True
        self.mode_timer = IntervalTimer(AUTO_MODE_INTERVAL_MS, clock)
        self.angle = 0.0

        self.rand = PseudoRand()
        self.rand.set_seed(*(random.getrandbits(32) for _ in range(4)))
        self.snow = Snow(self.get_rand, GRAINS)

        self.screen = CyclicMonoScreen()
        self.drawer = CyclicMonoDrawer(self.screen)
        self._frame_no = 0
        self._renderers = {0: self._render_mode_0}

    def init(self):
        """Start with the automatic mode change switched off."""
        self.set_auto_mode_change(False, AUTO_MODE_INTERVAL_MS)

    def loop(self, time_us, angle):
        """Record the current angle and advance the mode when the timer fires."""
        self.angle = angle
        if self.mode_timer.check() and self.auto_mode_change:
            self.mode += 1
            if self.mode > self.max_render_mode:
                self.mode = 0

    def render(self, buffer):
        """Draw the current mode into *buffer*, which holds every panel's frame."""
        self.screen.attach_buffer(buffer)
        renderer = self._renderers.get(self.mode)
        if renderer is not None:
            renderer()

    def set_auto_mode_change(self, enable, interval_ms):
        """Enable or disable cycling through modes every *interval_ms*."""
        self.auto_mode_change = enable
        self.mode_timer.interval_ms = interval_ms

    def set_mode(self, mode):
        """Select the render mode."""
        self.mode = mode

    def set_angle(self, angle):
        """Set the rotation angle in radians."""
        self.angle = angle

    def get_rand(self):
        """Return the next 32-bit number of the application's generator."""
        return self.rand.rand()

    def _render_mode_0(self):
        if not self.frames:
            return
        xpos = angle_to_xpos(self.angle)
        image = self.frames[self._frame_no]
        self.drawer.draw_image(-xpos, CV_HEIGHT // 2, image, offset=True)
        self._frame_no = (self._frame_no + 1) % len(self.frames)