"""Switch controller emulator client - line-oriented ASCII command protocol over serial."""

from .buttons import Button, Stick, BUTTON_ORDER, BUTTON_COUNT, bit_position, wire_name
from .formatting import format_number
from .models import (
    ControllerState,
    PressCommand,
    HoldCommand,
    ReleaseCommand,
    StickCommand,
    StateCommand,
    SleepCommand,
    Command,
)
from .controller import SwitchController
from .errors import SwitchControllerError, TransportOpenError, TransportIOError
from .transport import Transport, SerialTransport, MemoryTransport

__all__ = [
    "Button",
    "Stick",
    "BUTTON_ORDER",
    "BUTTON_COUNT",
    "bit_position",
    "wire_name",
    "format_number",
    "ControllerState",
    "PressCommand",
    "HoldCommand",
    "ReleaseCommand",
    "StickCommand",
    "StateCommand",
    "SleepCommand",
    "Command",
    "SwitchController",
    "SwitchControllerError",
    "TransportOpenError",
    "TransportIOError",
    "Transport",
    "SerialTransport",
    "MemoryTransport",
]
