"""Transport adapters."""

from smugwrap.adapters.transport.fake import FakeTransport, SentRequest
from smugwrap.adapters.transport.httpx_transport import HttpxTransport

__all__ = ["FakeTransport", "HttpxTransport", "SentRequest"]
