"""Line-oriented command parser for a serial console."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

MAX_COMMAND_LEN = 256
"""Longest line kept; reaching it discards the line."""
MAX_PARAMS_NUM = 16
"""Number of parameters kept after the command word."""
ONE_PARAM_LEN = MAX_COMMAND_LEN // (MAX_PARAMS_NUM + 1)
"""Storage per word; a word keeps at most ONE_PARAM_LEN - 1 characters."""

_SEPARATORS = re.compile("[ \0\n]+")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_UINT_PREFIX = re.compile(r"\s*([+-]?)(\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)
_UINT64_MAX = (1 << 64) - 1


class SerialCmd:
    """Collects characters into lines and splits each line into words.

    *serial* is any object whose ``read(1)`` returns one byte, or an empty
    bytes object when nothing is waiting.
    """

    def __init__(self, serial=None):
        self.serial = serial
        self.cmd = ""
        self.params = [""] * MAX_PARAMS_NUM
        self._line = []

    def _clear_line(self):
        self._line = []

    def feed(self, char):
        """Take one character; return True when it completes a command line."""
        if char == "\n":
            words = [
                word[: ONE_PARAM_LEN - 1]
                for word in _SEPARATORS.split("".join(self._line))
                if word
            ]
            words += [""] * (MAX_PARAMS_NUM + 1 - len(words))
            self.cmd = words[0]
            self.params = words[1 : MAX_PARAMS_NUM + 1]
            self._clear_line()
            return True
        self._line.append(char)
        if len(self._line) >= MAX_COMMAND_LEN:
            logger.warning("SerialCmd: command buffer overflow")
            self._clear_line()
        return False

    def loop(self):
        """Read at most one character from the serial port and feed it."""
        if self.serial is None:
            return False
        data = self.serial.read(1)
        if not data:
            return False
        return self.feed(data[:1].decode("latin-1"))

    def param(self, index):
        """Return the parameter at *index* ("" when it was not given)."""
        return self.params[index]

    def check_cmd(self, cmd):
        """Return True if the last command word equals *cmd*."""
        return self.cmd == cmd

    def check_param(self, index, param):
        """Return True if the parameter at *index* equals *param*."""
        return self.param(index) == param


def string_to_int(text):
    """Parse a leading decimal integer as a signed 32-bit value; 0 if none."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return 0
    value = int(match.group(1)) & 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def string_to_char(text):
    """Parse a leading decimal integer and keep its low byte."""
    return string_to_int(text) & 0xFF


def string_to_float(text):
    """Parse a leading floating point number; 0.0 if none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(1))


def string_to_uint64(text):
    """Parse a decimal unsigned 64-bit value; 0 if none or out of range."""
    match = _UINT_PREFIX.match(text)
    if match is None:
        return 0
    sign, digits = match.groups()
    value = int(digits)
    if value > _UINT64_MAX:
        return 0
    if sign == "-":
        value = (-value) & _UINT64_MAX
    return value


def string_hex_to_uint(text):
    """Parse hexadecimal digits into an unsigned 32-bit value.

    Characters that are not hex digits contribute their low four bits.
    """
    value = 0
    for char in text:
        code = ord(char)
        if "0" <= char <= "9":
            nibble = code - ord("0")
        elif "a" <= char <= "f":
            nibble = code - ord("a") + 10
        elif "A" <= char <= "F":
            nibble = code - ord("A") + 10
        else:
            nibble = code
        value = ((value << 4) | (nibble & 0xF)) & 0xFFFFFFFF
    return value