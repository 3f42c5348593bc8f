"""Abstract base class for the transport layer.

A Transport is the byte sink a SwitchController writes command lines into.
Implementations can be a serial port, an in-memory buffer, or anything else
that can write bytes and flush them.
"""
from __future__ import annotations

from abc import ABC, abstractmethod


class Transport(ABC):
    """Abstract byte-stream transport.

    Transports are responsible for:
    1. Writing raw bytes to the device
    2. Flushing them out
    3. Releasing the underlying resource on close

    Transports do NOT know about commands or framing.
    """

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Write raw bytes.

        Raises:
            TransportIOError: if the write fails or the transport is closed
        """
        pass

    @abstractmethod
    def flush(self) -> None:
        """Block until all written bytes have been handed to the device.

        Raises:
            TransportIOError: if the flush fails or the transport is closed
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the underlying resource.

        Should be safe to call multiple times.
        """
        pass

    @abstractmethod
    def is_open(self) -> bool:
        """Check if the transport can still be written to."""
        pass

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager support - close on exit."""
        self.close()
