"""Request dispatcher: sign, send, follow redirects, decode.

State machine:
    Start -> Signed -> Sent -> (Redirect -> Signed)* -> Decoded -> Done
with Failed reachable from every state.

The signature base string includes the endpoint URL, so every redirect hop
is signed again against the new location with a fresh nonce and timestamp.
"""

import json
from typing import Any, Callable, Mapping, Optional
from urllib.parse import urlencode, urljoin, urlsplit

from smugwrap.core.exceptions import RemoteError, TooManyRedirectsError
from smugwrap.core.logging import ContextualLogger
from smugwrap.core.logging import logger as default_logger
from smugwrap.core.protocols import Body, Transport, TransportResponse
from smugwrap.domains.dispatch.decoding import decode_response
from smugwrap.domains.oauth.signer import OAuth1Signer
from smugwrap.domains.routing.types import Payload, RequestSpec

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

DEFAULT_MAX_REDIRECTS = 5

HeaderBuilder = Callable[[str], dict[str, str]]


def host_of(url: str) -> str:
    """Host header value for ``url``."""
    return urlsplit(url).netloc


class RequestDispatcher:
    """Drives signer and transport for one request at a time.

    The dispatcher keeps no state between calls; the target URL, nonce and
    timestamp live in the local scope of ``dispatch()``.
    """

    def __init__(
        self,
        signer: OAuth1Signer,
        transport: Transport,
        *,
        content_type: str = "application/json",
        user_agent: str = "smugwrap",
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        logger: Optional[ContextualLogger] = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            signer: Produces Authorization headers.
            transport: Sends requests; must not follow redirects itself.
            content_type: Accept/Content-Type, and the type decoded as JSON.
            user_agent: User-Agent header value.
            max_redirects: Redirect hops followed before giving up.
            logger: Optional contextual logger.
        """
        self._signer = signer
        self._transport = transport
        self._content_type = content_type.lower()
        self._user_agent = user_agent
        self._max_redirects = max_redirects
        self._logger = logger or default_logger.with_prefix("dispatch: ")

    @property
    def user_agent(self) -> str:
        """User-Agent sent with every request."""
        return self._user_agent

    @property
    def content_type(self) -> str:
        """Configured JSON content type."""
        return self._content_type

    def default_headers(self, url: str) -> dict[str, str]:
        """Standard headers for a REST call to ``url``."""
        return {
            "Host": host_of(url),
            "Accept": self._content_type,
            "Content-Type": self._content_type,
            "User-Agent": self._user_agent,
        }

    def encode_body(self, payload: Payload) -> Body:
        """Encode a payload for the wire according to the content type."""
        if payload is None or isinstance(payload, (bytes, str)):
            return payload
        if self._content_type == FORM_CONTENT_TYPE and isinstance(payload, Mapping):
            return urlencode(payload, doseq=True)
        return json.dumps(payload)

    def signable_body_params(self, payload: Payload) -> Optional[Mapping[str, Any]]:
        """Body parameters that take part in the signature.

        Only form-encoded bodies are signed (RFC 5849 §3.4.1.3.1); JSON and
        raw bodies are opaque to OAuth.
        """
        if self._content_type == FORM_CONTENT_TYPE and isinstance(payload, Mapping):
            return payload
        return None

    async def dispatch(
        self,
        spec: RequestSpec,
        *,
        build_headers: Optional[HeaderBuilder] = None,
        sign_body: bool = True,
    ) -> Any:
        """Sign and send ``spec``, following redirects, and decode the result.

        Args:
            spec: The resolved request.
            build_headers: Builds non-auth headers for a target URL. Defaults
                to ``default_headers``.
            sign_body: Whether form body parameters join the signature.

        Returns:
            Parsed JSON for the configured JSON content type, text otherwise.

        Raises:
            ConfigurationError: If credentials are incomplete (before sending).
            TransportError: If the transport fails.
            RemoteError: On a non-2xx/3xx status or an embedded failure.
            TooManyRedirectsError: If the redirect bound is exceeded.
        """
        build_headers = build_headers or self.default_headers
        body = self.encode_body(spec.payload)
        body_params = self.signable_body_params(spec.payload) if sign_body else None
        call_logger = self._logger.with_context(
            legacy_method=spec.legacy_method.value if spec.legacy_method else "upload"
        )

        url = spec.url
        hops = 0
        while True:
            authorization = self._signer.sign(
                spec.method,
                url,
                body_params=body_params,
                requires_token=spec.requires_token,
                callback=spec.oauth_callback,
                verifier=spec.oauth_verifier,
            )
            headers = {**build_headers(url), "Authorization": authorization}

            call_logger.debug(f"{spec.method} {url} (hop {hops})")
            response = await self._transport.send(spec.method, url, headers, body)

            status_class = response.status_code // 100
            if status_class == 2:
                return decode_response(response, self._content_type)
            if status_class != 3:
                raise self._remote_error(response, spec.method, url, call_logger)

            location = response.header("location")
            if not location:
                raise RemoteError(
                    f"Redirect {response.status_code} without Location header",
                    status_code=response.status_code,
                    body=response.text,
                )
            next_url = urljoin(url, location)
            if hops >= self._max_redirects:
                raise TooManyRedirectsError(self._max_redirects, next_url)

            hops += 1
            call_logger.info(f"Following {response.status_code} redirect to {next_url}")
            url = next_url

    @staticmethod
    def _remote_error(
        response: TransportResponse, method: str, url: str, call_logger: ContextualLogger
    ) -> RemoteError:
        call_logger.warning(f"{method} {url} failed with HTTP {response.status_code}")
        return RemoteError(
            f"Bad return code ({response.status_code}) for: {url}",
            status_code=response.status_code,
            body=response.text,
        )
