"""Value types for the OAuth domain.

These live in a separate module to avoid circular imports between the
signer, the client facade and the protocol definitions.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from smugwrap.core.config import ClientSettings, SignatureMethod


class Credentials(BaseModel):
    """Client credentials, immutable for the lifetime of a client."""

    model_config = ConfigDict(frozen=True)

    consumer_key: Optional[str] = None
    consumer_secret: Optional[str] = None
    token_id: Optional[str] = None
    token_secret: Optional[str] = None
    signature_method: SignatureMethod = SignatureMethod.HMAC_SHA1
    oauth_version: str = "1.0"

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "Credentials":
        """Extract the credential subset of the client settings."""
        return cls(
            consumer_key=settings.consumer_key,
            consumer_secret=settings.consumer_secret,
            token_id=settings.token_id,
            token_secret=settings.token_secret,
            signature_method=settings.signature_method,
            oauth_version=settings.oauth_version,
        )

    def with_token(self, token_id: str, token_secret: str) -> "Credentials":
        """Return a copy carrying a different token pair."""
        return self.model_copy(update={"token_id": token_id, "token_secret": token_secret})


class OAuth1TokenResponse:
    """Response from an OAuth1 token endpoint."""

    def __init__(self, oauth_token: str, oauth_token_secret: str, **kwargs: str) -> None:
        """Initialize with token, secret, and any additional provider params."""
        self.oauth_token = oauth_token
        self.oauth_token_secret = oauth_token_secret
        self.additional_params = kwargs

    def __repr__(self) -> str:
        return f"OAuth1TokenResponse(oauth_token={self.oauth_token!r}, oauth_token_secret=***)"
