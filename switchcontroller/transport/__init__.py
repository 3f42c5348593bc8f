"""Transport layer for controller communication."""

from .base import Transport
from .memory import MemoryTransport
from .serial import SerialTransport, DEFAULT_BAUDRATE, READ_TIMEOUT

__all__ = [
    "Transport",
    "MemoryTransport",
    "SerialTransport",
    "DEFAULT_BAUDRATE",
    "READ_TIMEOUT",
]
