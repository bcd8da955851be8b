"""Fake transport for testing.

Serves queued responses in order and records every request it was given,
so tests can assert on signed headers and redirect hops without a network.
"""

import json
from dataclasses import dataclass, field
from typing import Mapping, Optional, Union

from smugwrap.core.protocols import Body, TransportResponse


@dataclass
class SentRequest:
    """One request as seen by the fake transport."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Body = None

    @property
    def authorization(self) -> str:
        return self.headers.get("Authorization", "")


class FakeTransport:
    """Test implementation of Transport.

    Usage:
        fake = FakeTransport()
        fake.queue_json({"Album": {"AlbumKey": "abc"}})
        client = SmugClient(transport=fake, ...)
        await client.albums_getInfo(AlbumKey="abc")

        assert fake.request_count == 1
        assert fake.requests[0].url.endswith("/album/abc")
    """

    def __init__(self, error: Optional[Exception] = None) -> None:
        """Initialize with no queued responses.

        Args:
            error: If set, raised by every ``send()`` call.
        """
        self._responses: list[TransportResponse] = []
        self.requests: list[SentRequest] = []
        self.error = error
        self.closed = False

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Body,
    ) -> TransportResponse:
        """Record the request and return the next queued response."""
        self.requests.append(SentRequest(method, url, dict(headers), body))
        if self.error is not None:
            raise self.error
        if not self._responses:
            raise AssertionError(f"FakeTransport has no response queued for {method} {url}")
        return self._responses.pop(0)

    async def aclose(self) -> None:
        self.closed = True

    # Test helpers

    def queue(self, response: TransportResponse) -> "FakeTransport":
        """Queue a response; returns self for chaining."""
        self._responses.append(response)
        return self

    def queue_json(
        self, body: Union[str, bytes, dict, list], status_code: int = 200
    ) -> "FakeTransport":
        """Queue a JSON response."""
        if not isinstance(body, (str, bytes)):
            body = json.dumps(body)
        return self.queue(
            TransportResponse(status_code, {"Content-Type": "application/json"}, body)
        )

    def queue_text(
        self, body: str, status_code: int = 200, content_type: str = "text/plain"
    ) -> "FakeTransport":
        """Queue a non-JSON response."""
        return self.queue(TransportResponse(status_code, {"Content-Type": content_type}, body))

    def queue_redirect(self, location: str, status_code: int = 302) -> "FakeTransport":
        """Queue a redirect to ``location``."""
        return self.queue(TransportResponse(status_code, {"Location": location}))

    @property
    def request_count(self) -> int:
        return len(self.requests)

    @property
    def pending(self) -> int:
        """Responses queued but not yet served."""
        return len(self._responses)

    def clear(self) -> None:
        """Reset all state."""
        self._responses.clear()
        self.requests.clear()
        self.error = None
