"""Client settings.

All defaults are defined here in the schema. Values can be supplied as
constructor options or through ``SMUGWRAP_``-prefixed environment variables:

    SMUGWRAP_CONSUMER_KEY=...
    SMUGWRAP_MAX_REDIRECTS=3
"""

from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from smugwrap import __version__
from smugwrap.core.config.enums import SignatureMethod
from smugwrap.core.exceptions import ConfigurationError
from smugwrap.core.logging import validate_log_level


class ClientSettings(BaseSettings):
    """Configuration for a SmugClient instance."""

    model_config = SettingsConfigDict(
        env_prefix="SMUGWRAP_",
        extra="ignore",
        frozen=True,
    )

    api_ver: str = Field("2.0", description="Sent as X-Smug-Version on uploads")
    app_name: Optional[str] = Field(None, description="Prepended to the User-Agent")
    content_type: str = Field("application/json", description="Accept/Content-Type value")
    signature_method: SignatureMethod = SignatureMethod.HMAC_SHA1
    oauth_version: str = "1.0"
    token_id: Optional[str] = None
    token_secret: Optional[str] = None
    consumer_key: Optional[str] = None
    consumer_secret: Optional[str] = None
    oauth_callback: str = "oob"

    api_base: str = "https://api.smugmug.com"
    upload_base: str = "https://upload.smugmug.com"
    max_redirects: int = Field(5, ge=0, description="Redirect hops followed per call")
    timeout_seconds: float = Field(60.0, gt=0)
    log_level: Optional[str] = Field(
        None, description="Level set on the smugwrap logger when a client is built"
    )

    @field_validator("api_base", "upload_base")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"Base URL must be absolute: {value}")
        return value.rstrip("/")

    @field_validator("content_type")
    @classmethod
    def _normalize_content_type(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: Optional[str]) -> Optional[str]:
        return validate_log_level(value) if value is not None else None

    @property
    def user_agent(self) -> str:
        """User-Agent header value."""
        if self.app_name:
            return f"{self.app_name} using smugwrap/{__version__}"
        return f"smugwrap/{__version__}"


def load_settings(**overrides: Any) -> ClientSettings:
    """Build settings from the environment plus explicit overrides.

    ``None`` overrides are ignored so callers can forward optional arguments.

    Raises:
        ConfigurationError: If a value fails validation.
    """
    options = {key: value for key, value in overrides.items() if value is not None}
    try:
        return ClientSettings(**options)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid client settings: {e}") from e
