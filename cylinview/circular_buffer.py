"""Ring of equally sized slots inside one byte buffer."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

MAX_NUM = 2
"""Largest number of slots supported."""


class CircularBuffer:
    """Hands out write and read slots of a shared buffer in turn.

    A slot becomes readable after ``next_write`` and writable again after
    ``next_read``.
    """

    def __init__(self):
        self._buffer = None
        self._num = 0
        self._offset = 0
        self.reset()

    def set_buffer(self, buffer, num):
        """Use *buffer* split into *num* slots and start over."""
        if num < 1:
            raise ValueError("a circular buffer needs at least one slot")
        if num > MAX_NUM:
            logger.warning("Invalid supported buffer num %d, using %d", num, MAX_NUM)
            num = MAX_NUM
        view = memoryview(buffer).cast("B")
        if len(view) % num:
            logger.warning("The buffer size is not an integer multiple of the num")
        self._buffer = view
        self._num = num
        self._offset = len(view) // num
        self.reset()

    def reset(self):
        """Mark every slot empty and rewind both positions."""
        self._wr = 0
        self._rd = 0
        self._full = [False] * MAX_NUM
        self._wr_pos = 0
        self._rd_pos = 0

    def _require_buffer(self):
        if self._buffer is None:
            raise RuntimeError("no buffer has been set")

    def write_ready(self):
        """Return True if the current write slot is free."""
        return not self._full[self._wr]

    def read_ready(self):
        """Return True if the current read slot holds data."""
        return self._full[self._rd]

    def _slot(self, pos):
        self._require_buffer()
        return self._buffer[pos : pos + self._offset]

    def write_buffer(self):
        """Return a writable view of the current write slot."""
        return self._slot(self._wr_pos)

    def read_buffer(self):
        """Return a view of the current read slot."""
        return self._slot(self._rd_pos)

    def _advance(self, pos):
        pos += self._offset
        return 0 if pos >= len(self._buffer) else pos

    def next_write(self):
        """Mark the write slot full and move to the next one."""
        self._require_buffer()
        self._full[self._wr] = True
        self._wr = (self._wr + 1) % self._num
        self._wr_pos = self._advance(self._wr_pos)

    def next_read(self):
        """Mark the read slot empty and move to the next one."""
        self._require_buffer()
        self._full[self._rd] = False
        self._rd = (self._rd + 1) % self._num
        self._rd_pos = self._advance(self._rd_pos)