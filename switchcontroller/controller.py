"""Command session for a Switch controller emulator.

SwitchController owns one transport and turns each call into exactly one
newline-terminated command line. Calls are synchronous: a call returns once
its line has been written and flushed, and lines reach the wire in call
order.
"""
from __future__ import annotations

import logging
from typing import Iterable

from .buttons import Button, Stick
from .models import (
    Command,
    ControllerState,
    PressCommand,
    HoldCommand,
    ReleaseCommand,
    StickCommand,
    StateCommand,
    SleepCommand,
)
from .protocol import ProtocolSerializer, LINE_TERMINATOR
from .transport import Transport, SerialTransport, DEFAULT_BAUDRATE, READ_TIMEOUT

logger = logging.getLogger(__name__)


class SwitchController:
    """A connection to a controller emulator device.

    The session is the only writer on its transport. It is not thread-safe;
    callers sharing one session across threads must lock around it.

    Example:
        >>> with SwitchController.open("/dev/ttyACM0") as ctrl:
        ...     ctrl.hold([Button.ZR])
        ...     ctrl.sleep(0.1)
        ...     ctrl.press([Button.A])
        ...     ctrl.release([Button.ZR])
    """

    def __init__(self, transport: Transport):
        """Create a session over an already opened transport.

        Args:
            transport: Open transport; the session takes ownership of it
        """
        self._transport = transport

    @classmethod
    def open(cls, path: str, baud_rate: int = DEFAULT_BAUDRATE) -> SwitchController:
        """Open a serial connection to the device at ``path``.

        Args:
            path: Serial port path (e.g. '/dev/ttyACM0')
            baud_rate: Serial baud rate (default 115200)

        Raises:
            TransportOpenError: if the port cannot be opened
        """
        transport = SerialTransport.open(path, baudrate=baud_rate, timeout=READ_TIMEOUT)
        return cls(transport)

    @property
    def transport(self) -> Transport:
        return self._transport

    def press(self, buttons: Iterable[Button]) -> None:
        """Press and immediately release one or more buttons."""
        self.send_command(PressCommand(buttons))

    def hold(self, buttons: Iterable[Button]) -> None:
        """Hold one or more buttons down until explicitly released."""
        self.send_command(HoldCommand(buttons))

    def release(self, buttons: Iterable[Button]) -> None:
        """Release one or more currently held buttons."""
        self.send_command(ReleaseCommand(buttons))

    def stick(self, stick: Stick, horizontal: float, vertical: float) -> None:
        """Set an analog stick position. Values range from -1.0 to 1.0."""
        self.send_command(StickCommand(stick, horizontal, vertical))

    def state(self, state: ControllerState) -> None:
        """Set the entire controller state in a single command."""
        self.send_command(StateCommand(state))

    def sleep(self, seconds: float) -> None:
        """Pause command processing on the device.

        Does not block the host beyond the write itself.
        """
        self.send_command(SleepCommand(seconds))

    def send_command(self, command: Command) -> None:
        """Serialize a command object and send it.

        Raises:
            ValueError: if the command type is unknown
            TransportIOError: if the write or flush fails
        """
        self._send(ProtocolSerializer.serialize_command(command))

    def close(self) -> None:
        """Close the underlying transport."""
        self._transport.close()

    def __enter__(self) -> SwitchController:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _send(self, cmd: str) -> None:
        """Send a raw command string as one terminated line.

        Transport errors propagate unchanged; nothing is retried or buffered.
        """
        logger.debug(f"TX: {cmd}")
        self._transport.write((cmd + LINE_TERMINATOR).encode("ascii"))
        self._transport.flush()
