"""httpx-backed Transport.

Redirects are never followed here: the dispatcher needs to see every 3xx so
it can re-sign the request for the new location.
"""

from typing import Mapping, Optional

import httpx

from smugwrap.core.exceptions import TransportError
from smugwrap.core.protocols import Body, TransportResponse

DEFAULT_TIMEOUT_SECONDS = 60.0


class HttpxTransport:
    """Transport over an ``httpx.AsyncClient``.

    A client passed in is borrowed and left open by ``aclose()``; a client
    created here is owned and closed with the transport.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the transport.

        Args:
            client: Existing client to borrow. Must not follow redirects.
            timeout: Request timeout for an owned client, in seconds.
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(follow_redirects=False, timeout=timeout)

    @property
    def owns_client(self) -> bool:
        return self._owns_client

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Body,
    ) -> TransportResponse:
        """Send one request and return the raw response.

        Raises:
            TransportError: On an invalid URL, or on connection, timeout or
                protocol failures.
        """
        try:
            response = await self._client.request(
                method,
                url,
                headers=dict(headers),
                content=body,
                follow_redirects=False,
            )
        except httpx.InvalidURL as e:
            raise TransportError(f"Invalid request URL {url}: {e}") from e
        except httpx.TimeoutException as e:
            raise TransportError(f"Request to {url} timed out: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
            url=str(response.url),
        )

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
