"""Serial transport for the controller firmware.

The controller is a microcontroller (e.g. a Raspberry Pi Pico) exposing a
USB CDC serial port. This module only moves bytes: it opens the port, writes,
flushes and closes. Command framing lives in SwitchController.
"""
from __future__ import annotations

import logging
from typing import Optional

import serial

from ..errors import TransportIOError, TransportOpenError
from .base import Transport

logger = logging.getLogger(__name__)

DEFAULT_BAUDRATE = 115200
READ_TIMEOUT = 1.0  # seconds, only bounds reads


class SerialTransport(Transport):
    """Transport backed by a pyserial port.

    Example:
        >>> transport = SerialTransport.open("/dev/ttyACM0")
        >>> transport.write(b"PRESS a\\n")
        >>> transport.flush()
        >>> transport.close()
    """

    def __init__(self, port: serial.Serial):
        """Wrap an already opened pyserial port.

        Args:
            port: Open pyserial port; this transport takes ownership of it
        """
        self._serial: Optional[serial.Serial] = port

    @classmethod
    def open(cls,
             path: str,
             baudrate: int = DEFAULT_BAUDRATE,
             timeout: float = READ_TIMEOUT) -> SerialTransport:
        """Open a serial port.

        Args:
            path: Serial port path (e.g. '/dev/ttyACM0', 'COM3')
            baudrate: Serial baud rate (default 115200)
            timeout: Read timeout in seconds (default 1.0)

        Returns:
            Open SerialTransport

        Raises:
            TransportOpenError: if the port cannot be opened
        """
        try:
            port = serial.Serial(
                port=path,
                baudrate=baudrate,
                timeout=timeout,
            )
        except (serial.SerialException, ValueError, OSError) as e:
            logger.error(f"Failed to open {path}: {e}")
            raise TransportOpenError(f"Failed to open {path}: {e}") from e

        logger.info(f"Opened {path} @ {baudrate} baud")
        return cls(port)

    @property
    def port(self) -> Optional[str]:
        """Port path, or None once closed."""
        if self._serial is None:
            return None
        return self._serial.port

    def is_open(self) -> bool:
        return self._serial is not None and self._serial.is_open

    def write(self, data: bytes) -> None:
        port = self._require_open()
        try:
            port.write(data)
        except (serial.SerialException, OSError) as e:
            logger.error(f"Write error: {e}")
            raise TransportIOError(f"Write failed: {e}") from e

    def flush(self) -> None:
        port = self._require_open()
        try:
            port.flush()
        except (serial.SerialException, OSError) as e:
            logger.error(f"Flush error: {e}")
            raise TransportIOError(f"Flush failed: {e}") from e

    def close(self) -> None:
        if self._serial is None:
            return

        port, self._serial = self._serial, None
        try:
            port.close()
        except (serial.SerialException, OSError) as e:
            logger.error(f"Error closing serial port: {e}")
        logger.info(f"Closed {port.port}")

    def _require_open(self) -> serial.Serial:
        if not self.is_open():
            raise TransportIOError("Serial port is not open")
        return self._serial
