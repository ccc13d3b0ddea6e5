"""Magnetic angle encoder read by PWM pulse width or over SPI."""

from __future__ import annotations

import math
from dataclasses import dataclass

REG_ANGLE = 0x3FFF
"""Register holding the 14-bit angle."""

_MASK32 = 0xFFFFFFFF
_DATA_MASK = 0x3FFF
_READ_FLAG = 1 << 14
_PARITY_BIT = 15


def calc_parity(value):
    """Return 1 if the low 16 bits of *value* hold an odd number of ones."""
    return bin(value & 0xFFFF).count("1") & 0x1


def _command_word(regaddr, read):
    word = ((_READ_FLAG if read else 0) | regaddr) & 0xFFFF
    return word | (calc_parity(word) << _PARITY_BIT)


def build_command(regaddr, read=True):
    """Return the two command bytes (most significant first) for *regaddr*."""
    return _command_word(regaddr, read).to_bytes(2, "big")


@dataclass
class PwmEncoder:
    """Angle from the high time of the encoder's PWM output.

    Feed every level change of the PWM pin to ``on_edge``; the high time
    ending at a falling edge is the current measurement.
    """

    min_us: int = 4
    max_us: int = 904
    previous_us: int = 0
    pulse_us: int = 0
    pulse_start_us: int = 0

    def on_edge(self, level, time_us):
        """Record a pin change to *level* at *time_us* microseconds."""
        if not level:
            self.pulse_us = (time_us - self.previous_us) & _MASK32
            self.pulse_start_us = self.previous_us
        self.previous_us = time_us

    def angle(self):
        """Return the angle in radians, 0 <= angle < 2*pi."""
        length = min(max(self.pulse_us, self.min_us), self.max_us)
        span = self.max_us - self.min_us + 1
        return (length - self.min_us) / span * (2.0 * math.pi)

    def raw_data(self):
        """Return the last measured high time in microseconds."""
        return self.pulse_us


class SpiEncoder:
    """Encoder registers read and written over SPI.

    *transfer* performs one chip-selected exchange: it is called with the
    bytes to send and returns as many bytes as it received.
    """

    def __init__(self, transfer):
        self._transfer = transfer
        self.angle_offset = 0

    def _response(self):
        received = self._transfer(bytes(2))
        return int.from_bytes(bytes(received[:2]), "big") & _DATA_MASK

    def read(self, regaddr):
        """Return the 14-bit content of register *regaddr*."""
        self._transfer(build_command(regaddr, read=True))
        return self._response()

    def write(self, regaddr, data):
        """Write *data* to register *regaddr* and return the 14-bit reply."""
        command = _command_word(regaddr, read=False)
        self._transfer(command.to_bytes(2, "big"))
        word = (data & _DATA_MASK) | (calc_parity(command) << _PARITY_BIT)
        self._transfer(word.to_bytes(2, "big"))
        return self._response()

    def read_angle(self):
        """Return the raw 14-bit angle register."""
        return self.read(REG_ANGLE)

    def raw_data(self):
        """Return the angle count with the offset applied."""
        return (self.read_angle() + self.angle_offset) % _DATA_MASK

    def angle(self):
        """Return the angle in radians with the offset applied."""
        return self.raw_data() / 0x4000 * (2.0 * math.pi)

    def set_angle_offset(self, offset):
        """Set the count added to every angle reading."""
        self.angle_offset = offset & 0xFFFF