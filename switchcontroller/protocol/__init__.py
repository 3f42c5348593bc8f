"""Protocol layer for the line-oriented controller command protocol."""

from .serializer import ProtocolSerializer, LINE_TERMINATOR

__all__ = [
    "ProtocolSerializer",
    "LINE_TERMINATOR",
]
