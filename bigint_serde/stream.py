# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Framed integer channel over a serial port.

Each value is postcard-encoded, COBS-framed and terminated with 0x00.
"""

import logging

import serial

from .cobs import frame, unframe
from .digits import IntegerLike
from .formats import postcard
from .integer import Integer
from .serde import SerdeError

logger = logging.getLogger(__name__)


class StreamError(SerdeError):
    """Base exception for stream errors."""
    pass


class StreamTimeoutError(StreamError):
    """Timeout waiting for a frame."""
    pass


class IntegerStream:
    """
    Send and receive Integers over a serial port.

    Any pyserial URL works, including "loop://" for a local loopback.
    Can be used as a context manager:
        with IntegerStream("/dev/ttyACM0") as s:
            s.send(12345)
            value = s.receive()
    """

    def __init__(
        self,
        port: str,
        baudrate: int = 115200,
        timeout: float = 5.0,
    ):
        """
        Open the serial port.

        Args:
            port: Serial port path or pyserial URL (e.g., "/dev/ttyACM0")
            baudrate: Baud rate (default 115200)
            timeout: Read timeout in seconds (default 5.0)
        """
        self._ser = serial.serial_for_url(port, baudrate, timeout=timeout)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        """Close the serial connection."""
        if self._ser and self._ser.is_open:
            self._ser.close()

    @property
    def port(self) -> str:
        """Return the serial port name."""
        return self._ser.port

    def _send(self, data: bytes):
        self._ser.write(data)
        self._ser.flush()

    def _receive(self) -> bytes:
        """Receive bytes until 0x00 delimiter."""
        result = bytearray()
        while True:
            byte = self._ser.read(1)
            if not byte:
                raise StreamTimeoutError("Timeout waiting for frame")
            result.append(byte[0])
            if byte[0] == 0:
                break
        return bytes(result)

    def send(self, value: IntegerLike) -> None:
        """
        Send one value.

        Args:
            value: Non-negative Integer, mpz or int

        Raises:
            ValueError: If value is negative
        """
        if not isinstance(value, Integer):
            value = Integer(value)
        data = frame(postcard.dumps(value))
        logger.debug("Sending frame of %d bytes", len(data))
        self._send(data)

    def receive(self) -> Integer:
        """
        Receive one value.

        Returns:
            Decoded Integer

        Raises:
            StreamTimeoutError: If no complete frame arrives in time
            FormatError: If the frame does not hold a valid value
        """
        data = self._receive()
        logger.debug("Received frame of %d bytes", len(data))
        return postcard.loads(unframe(data))
