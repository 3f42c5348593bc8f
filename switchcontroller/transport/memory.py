"""In-memory transport.

Records every byte written to it. Useful for tests and for dry runs where
the command stream should be inspected instead of sent to hardware.
"""
from __future__ import annotations

import logging
import threading
from typing import List

from ..errors import TransportIOError
from .base import Transport

logger = logging.getLogger(__name__)


class MemoryTransport(Transport):
    """Thread-safe byte sink with FIFO line reads."""

    def __init__(self):
        self._buffer = bytearray()
        self._lock = threading.Lock()
        self._open = True
        self.write_count = 0
        self.flush_count = 0

    def write(self, data: bytes) -> None:
        with self._lock:
            if not self._open:
                raise TransportIOError("Memory transport is closed")
            self._buffer.extend(data)
            self.write_count += 1

    def flush(self) -> None:
        with self._lock:
            if not self._open:
                raise TransportIOError("Memory transport is closed")
            self.flush_count += 1

    def close(self) -> None:
        with self._lock:
            if self._open:
                logger.debug("Memory transport closed")
            self._open = False

    def is_open(self) -> bool:
        return self._open

    def getvalue(self) -> bytes:
        """Everything written since the last clear()."""
        with self._lock:
            return bytes(self._buffer)

    def lines(self) -> List[str]:
        """Written data decoded as lines, without terminators."""
        with self._lock:
            text = self._buffer.decode("ascii")
        return text.splitlines()

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
