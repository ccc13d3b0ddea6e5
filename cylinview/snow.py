"""Falling snow particles."""

from __future__ import annotations

from dataclasses import dataclass

from .screen import CV_HEIGHT, CV_V_WIDTH


@dataclass
class Grain:
    """One snow grain; it starts on the ground so it is respawned at once."""

    x: int = 0
    y: int = CV_HEIGHT


class Snow:
    """A set of grains that drift sideways while falling.

    *rand* is a callable returning unsigned 32-bit random numbers.
    """

    def __init__(self, rand, count=100):
        self.rand = rand
        self.grains = [Grain() for _ in range(count)]
        self.fall_speed = 1
        self.shake_range = 3
        self.shake_offset = -1

    def __iter__(self):
        return iter(self.grains)

    def __len__(self):
        return len(self.grains)

    def step(self):
        """Move every grain one frame; grounded grains restart above the top."""
        for grain in self.grains:
            if grain.y >= CV_HEIGHT:
                value = self.rand()
                grain.x = ((value >> 16) & 0xFFFF) % CV_V_WIDTH
                grain.y = -((value & 0xFFFF) % CV_HEIGHT)
            else:
                grain.x += (self.rand() % self.shake_range) + self.shake_offset
                grain.y += self.fall_speed