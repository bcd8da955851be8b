"""OAuth 1.0a request signer.

Produces the ``Authorization`` header for a single request:
1. Build the protocol parameters (fresh nonce and timestamp every time)
2. Merge signable body and query parameters
3. Normalize, build the signature base string and sign it
4. Render the header

Reference: RFC 5849 - The OAuth 1.0 Protocol
"""

import base64
import hashlib
import hmac
import secrets
import time
from typing import Callable, Iterable, Mapping, Optional, Tuple

from smugwrap.core.config import SignatureMethod
from smugwrap.core.exceptions import ConfigurationError
from smugwrap.domains.oauth.encoding import normalize_parameters, percent_encode, split_base_url
from smugwrap.domains.oauth.types import Credentials


def _default_nonce() -> str:
    return secrets.token_urlsafe(32)


class OAuth1Signer:
    """Signs requests with a fixed set of credentials.

    The signer holds no per-request state: every ``sign()`` call draws its
    own nonce and timestamp, so one signer can be shared by concurrent calls.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        nonce_factory: Callable[[], str] = _default_nonce,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the signer.

        Args:
            credentials: Consumer and token credentials.
            nonce_factory: Source of per-request nonces.
            clock: Source of the current Unix time.
        """
        self._credentials = credentials
        self._nonce_factory = nonce_factory
        self._clock = clock

    @property
    def credentials(self) -> Credentials:
        """Credentials used for signing."""
        return self._credentials

    def _get_timestamp(self) -> str:
        """Get the current Unix timestamp as string."""
        return str(int(self._clock()))

    def build_oauth_params(
        self,
        *,
        requires_token: bool = True,
        callback: Optional[str] = None,
        verifier: Optional[str] = None,
    ) -> dict[str, str]:
        """Build the protocol parameter set, without the signature.

        Raises:
            ConfigurationError: If the consumer key is missing, or a token is
                required and none is configured.
        """
        creds = self._credentials
        if not creds.consumer_key:
            raise ConfigurationError("OAuth consumer key is not set")

        params = {
            "oauth_version": creds.oauth_version,
            "oauth_nonce": self._nonce_factory(),
            "oauth_timestamp": self._get_timestamp(),
            "oauth_consumer_key": creds.consumer_key,
            "oauth_signature_method": creds.signature_method.value,
        }

        if requires_token:
            if not creds.token_id:
                raise ConfigurationError(
                    "OAuth token is not set; an access token is required for this request"
                )
            params["oauth_token"] = creds.token_id
        else:
            params["oauth_callback"] = callback or "oob"

        if verifier:
            params["oauth_verifier"] = verifier

        return params

    def signing_key(self, *, requires_token: bool = True) -> str:
        """Build the signing key: enc(consumer_secret)&enc(token_secret).

        The request-token step has no token yet and signs with an empty token
        secret; every other request needs a non-empty one.

        Raises:
            ConfigurationError: If a required secret is missing.
        """
        creds = self._credentials
        if creds.consumer_secret is None or creds.consumer_secret == "":
            raise ConfigurationError(
                "OAuth consumer secret is not set. Set consumer_secret and try again."
            )
        token_secret = creds.token_secret or ""
        if requires_token and not token_secret:
            raise ConfigurationError(
                "OAuth token secret is not set. Set token_secret and try again."
            )
        return f"{percent_encode(creds.consumer_secret)}&{percent_encode(token_secret)}"

    def signature_base_string(
        self, method: str, url: str, params: Iterable[Tuple[str, str]]
    ) -> str:
        """Build the signature base string per RFC 5849.

        Format: HTTP_METHOD&enc(BASE_URL)&enc(NORMALIZED_PARAMS)
        Query parameters on ``url`` join ``params``.
        """
        base_url, query = split_base_url(url)
        normalized = normalize_parameters([*params, *query])
        return "&".join([method.upper(), percent_encode(base_url), percent_encode(normalized)])

    def compute_signature(self, base_string: str, key: str) -> str:
        """Sign the base string with the configured signature method."""
        if self._credentials.signature_method == SignatureMethod.PLAINTEXT:
            return key
        digest = hmac.new(key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha1).digest()
        return base64.b64encode(digest).decode("utf-8")

    def sign(
        self,
        method: str,
        url: str,
        *,
        body_params: Optional[Mapping[str, object]] = None,
        requires_token: bool = True,
        callback: Optional[str] = None,
        verifier: Optional[str] = None,
    ) -> str:
        """Produce the Authorization header for one request.

        Args:
            method: HTTP verb.
            url: Absolute request URL (the current target, after redirects).
            body_params: Form parameters that take part in the signature.
            requires_token: False only for the request-token step.
            callback: oauth_callback for the request-token step.
            verifier: oauth_verifier for the access-token step.

        Returns:
            Header value of the form ``OAuth k1="v1", k2="v2", ...``.

        Raises:
            ConfigurationError: If credentials are incomplete.
        """
        key = self.signing_key(requires_token=requires_token)
        oauth_params = self.build_oauth_params(
            requires_token=requires_token, callback=callback, verifier=verifier
        )

        signable = list(oauth_params.items())
        for name, value in (body_params or {}).items():
            if isinstance(value, (list, tuple)):
                signable.extend((str(name), str(item)) for item in value)
            else:
                signable.append((str(name), str(value)))

        base_string = self.signature_base_string(method, url, signable)
        oauth_params["oauth_signature"] = self.compute_signature(base_string, key)
        return self.build_authorization_header(oauth_params)

    @staticmethod
    def build_authorization_header(params: Mapping[str, str]) -> str:
        """Render OAuth parameters as an Authorization header, in insertion order.

        Format: OAuth oauth_version="1.0", oauth_nonce="...", ...
        """
        return "OAuth " + ", ".join(f'{k}="{percent_encode(v)}"' for k, v in params.items())
