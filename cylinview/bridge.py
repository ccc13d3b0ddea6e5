"""Controller side of the SPI to I2C bridge protocol."""

from __future__ import annotations

import logging
from enum import IntEnum

logger = logging.getLogger(__name__)

SIB_CHANNELS = 2
"""Number of bridge channels driven in parallel."""

SYNC1 = 0xAA
SYNC2 = 0x55
TXDATA_VALID_FLAG = 0x80
RSP_DATA_BUSY = 1 << 1
RSP_DATA_PING = 1 << 2
RSP_DATA_ERROR = 1 << 3

_CRC16_POLYNOMIAL = 0x1021


class Command(IntEnum):
    """Command codes understood by the bridge."""

    NONE = 0x00
    GET_STATUS = 0x01
    START_FRAME = 0x02
    SET_DATA = 0x03
    PING = 0x04
    OB_LED_ON = 0x05
    OB_LED_OFF = 0x06
    SET_ID_DIR0 = 0x07
    SET_ID_DIR1 = 0x08
    HARD_RESET = 0xFE


def _build_table():
    table = []
    for i in range(256):
        crc = i << 8
        for _ in range(8):
            crc = ((crc << 1) ^ _CRC16_POLYNOMIAL) if crc & 0x8000 else (crc << 1)
            crc &= 0xFFFF
        table.append(crc)
    return tuple(table)


_CRC16_TABLE = _build_table()


def crc16(data, crc=0xFFFF):
    """CRC-16 with polynomial 0x1021, continuing from *crc*."""
    for byte in data:
        crc = ((crc << 8) ^ _CRC16_TABLE[((crc >> 8) ^ byte) & 0xFF]) & 0xFFFF
    return crc


def _header(cmd, opt1, opt2):
    opt1 &= 0xFF
    opt2 &= 0xFF
    return bytes([SYNC1, SYNC2, cmd & 0xFF, opt1, opt2, ~opt1 & 0xFF, ~opt2 & 0xFF])


def build_command(cmd, opt1=0x55, opt2=0x55):
    """Return the 9-byte command packet: header and little-endian CRC."""
    header = _header(cmd, opt1, opt2)
    return header + crc16(header).to_bytes(2, "little")


class SpiI2cBridge:
    """Sends commands and frame data to the bridge over SPI.

    *transport* provides ``transfer(channel, data) -> bytes`` (a full-duplex
    exchange returning as many bytes as were sent), ``transfer_async(channel,
    data)`` and ``finish_async(channel)``.
    """

    ready_retries = 0xFFFFF
    response_retries = 0x20

    def __init__(self, transport):
        self.transport = transport

    def send_command(self, channel, cmd, opt1=0x55, opt2=0x55):
        """Send one command packet on *channel*."""
        self.transport.transfer(channel, build_command(cmd, opt1, opt2))

    def receive_response(self, channel):
        """Poll for a response byte with the valid flag set; 0 if none came."""
        for _ in range(self.response_retries):
            data = self.transport.transfer(channel, bytes([Command.NONE]))[0]
            if data & TXDATA_VALID_FLAG:
                return data
        logger.error("SPI failed to receive data %d", channel)
        return 0

    def wait_ready(self, channel):
        """Poll the status until the bridge is not busy; False on timeout."""
        for _ in range(self.ready_retries):
            self.send_command(channel, Command.GET_STATUS)
            if not self.receive_response(channel) & RSP_DATA_BUSY:
                return True
        return False

    def send_ping(self, channel):
        """Return True if the bridge answers a ping."""
        self.send_command(channel, Command.PING)
        return (self.receive_response(channel) & 0x7F) == RSP_DATA_PING

    def send_set_led(self, channel, on):
        """Switch the on-board LED of the bridge."""
        self.send_command(channel, Command.OB_LED_ON if on else Command.OB_LED_OFF)

    def send_set_id_direction(self, channel, direction):
        """Select the ID direction of the bridge."""
        self.send_command(channel, Command.SET_ID_DIR0 if direction else Command.SET_ID_DIR1)

    def send_hard_reset(self, channel):
        """Ask the bridge to reset itself."""
        self.send_command(channel, Command.HARD_RESET)

    def send_frame_data_parallel(self, buffer):
        """Send *buffer* split evenly over all channels at once.

        Returns False if a channel never became ready.
        """
        data = bytes(buffer)
        blocksize = (len(data) // SIB_CHANNELS) & 0xFFFF
        header = _header(Command.SET_DATA, blocksize & 0xFF, blocksize >> 8)
        blocks = [data[blocksize * ch : blocksize * (ch + 1)] for ch in range(SIB_CHANNELS)]

        base = crc16(header)
        checksums = [crc16(block, base) for block in blocks]

        channels = range(SIB_CHANNELS)
        if not all(self.wait_ready(ch) for ch in channels):
            return False
        for ch in channels:
            self.send_command(ch, Command.START_FRAME)
        for ch in channels:
            self.transport.transfer(ch, header)
        for ch, block in zip(channels, blocks):
            self.transport.transfer_async(ch, block)
        for ch in channels:
            self.transport.finish_async(ch)
        # The receiver needs padding before the checksum arrives.
        for ch in channels:
            self.transport.transfer(ch, bytes(32))
        for ch, checksum in zip(channels, checksums):
            self.transport.transfer(ch, checksum.to_bytes(2, "little"))
        return True