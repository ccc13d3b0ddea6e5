"""Millisecond interval timer."""

from __future__ import annotations

import time

_MASK32 = 0xFFFFFFFF


def _millis():
    return time.monotonic_ns() // 1_000_000


class IntervalTimer:
    """Reports once each time at least ``interval_ms`` has passed.

    *clock* returns the current time in milliseconds; elapsed time is
    taken modulo 2**32 so a wrapping millisecond counter works too.
    """

    def __init__(self, interval_ms=0, clock=None):
        self.interval_ms = interval_ms
        self._clock = _millis if clock is None else clock
        self.reset()

    def reset(self):
        """Start measuring from now."""
        self._previous = self._clock()

    def check(self):
        """Return True, and restart, if the interval has elapsed."""
        now = self._clock()
        if ((now - self._previous) & _MASK32) >= self.interval_ms:
            self._previous = now
            return True
        return False