"""smugwrap: async SmugMug API client with OAuth 1.0a signing."""

__version__ = "1.0.0"

from smugwrap.client import SmugClient  # noqa: E402
from smugwrap.core.config import (  # noqa: E402
    Access,
    ClientSettings,
    Permissions,
    SignatureMethod,
    load_settings,
)
from smugwrap.core.exceptions import (  # noqa: E402
    ConfigurationError,
    MissingArgumentError,
    RemoteError,
    SmugWrapException,
    TooManyRedirectsError,
    TransportError,
    UnsafeArgumentError,
    UnsupportedMethodError,
    UploadFileError,
)
from smugwrap.core.logging import configure_logging  # noqa: E402
from smugwrap.domains.oauth import OAuth1TokenResponse  # noqa: E402
from smugwrap.domains.routing import LegacyMethod  # noqa: E402

__all__ = [
    "Access",
    "ClientSettings",
    "ConfigurationError",
    "LegacyMethod",
    "MissingArgumentError",
    "OAuth1TokenResponse",
    "Permissions",
    "RemoteError",
    "SignatureMethod",
    "SmugClient",
    "SmugWrapException",
    "TooManyRedirectsError",
    "TransportError",
    "UnsafeArgumentError",
    "UnsupportedMethodError",
    "UploadFileError",
    "__version__",
    "configure_logging",
    "load_settings",
]
