"""H-bridge DC motor control through two PWM inputs."""

from __future__ import annotations

IN1 = 1
"""Identifier of the first bridge input."""
IN2 = 2
"""Identifier of the second bridge input."""

BRAKE_DUTY = 255
"""Duty written to both inputs to brake the motor."""


class Motor:
    """Drives a two-input H-bridge motor driver.

    *write_pwm* is called as ``write_pwm(input, duty)`` with *input* one of
    IN1 or IN2 and *duty* the PWM value to put on that input.
    """

    def __init__(self, write_pwm):
        self._write_pwm = write_pwm
        self._decay_duty = 0

    def _drive(self, in1, in2):
        self._write_pwm(IN1, in1)
        self._write_pwm(IN2, in2)

    def set_power(self, power):
        """Run forward for positive *power*, backward for negative, coast at zero."""
        if power > 0:
            self._drive(power, self._decay_duty)
        elif power < 0:
            self._drive(self._decay_duty, -power)
        else:
            self._drive(self._decay_duty, self._decay_duty)

    def set_brake(self, brake):
        """Short both inputs high to brake, or release them both."""
        duty = BRAKE_DUTY if brake else 0
        self._drive(duty, duty)

    def set_decay_mode(self, slow):
        """Choose the level of the idle input: 1 for slow decay, 0 for fast."""
        self._decay_duty = 1 if slow else 0