"""Core protocols for dependency injection."""

from smugwrap.core.protocols.sanitizer import Sanitizer
from smugwrap.core.protocols.transport import Body, Transport, TransportResponse

__all__ = [
    "Body",
    "Sanitizer",
    "Transport",
    "TransportResponse",
]
