"""Transport protocol for sending signed HTTP requests.

The dispatcher never talks to an HTTP library directly. It hands a fully
signed request to a Transport and gets a TransportResponse back. Redirects
are NOT followed by the transport: the dispatcher must see every 3xx so it
can re-sign against the new location.

Usage:
    response = await transport.send("GET", url, headers, None)
    if response.status_code // 100 == 2:
        ...
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol, Union, runtime_checkable

Body = Union[bytes, str, None]


@dataclass(frozen=True)
class TransportResponse:
    """HTTP response as seen by the dispatcher.

    Header names are stored lowercased; use ``header()`` for lookups.
    """

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    url: str = ""

    def __post_init__(self) -> None:
        """Normalize header names and body type."""
        object.__setattr__(self, "headers", {k.lower(): v for k, v in self.headers.items()})
        if isinstance(self.body, str):
            object.__setattr__(self, "body", self.body.encode("utf-8"))

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower(), default)

    @property
    def content_type(self) -> str:
        """Primary content-type token, lowercased, parameters dropped."""
        raw = self.header("content-type") or ""
        return raw.split(";", 1)[0].strip().lower()

    @property
    def text(self) -> str:
        """Body decoded as UTF-8, invalid bytes replaced."""
        return self.body.decode("utf-8", errors="replace")


@runtime_checkable
class Transport(Protocol):
    """Protocol for the HTTP capability consumed by the dispatcher."""

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Body,
    ) -> TransportResponse:
        """Send one request without following redirects.

        Args:
            method: HTTP verb.
            url: Absolute URL.
            headers: Complete header set, including Authorization.
            body: Encoded request body or None.

        Returns:
            The response, whatever its status.

        Raises:
            TransportError: If no response could be obtained.
        """
        ...
