"""Value types for the routing domain."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, Optional, Tuple, Union

if TYPE_CHECKING:
    from smugwrap.domains.routing.methods import LegacyMethod

Payload = Union[Mapping[str, Any], str, bytes, None]


@dataclass(frozen=True, slots=True)
class Route:
    """One row of the routing table."""

    verb: str
    template: str
    required: Tuple[str, ...]
    payload_arg: Optional[str] = None
    requires_token: bool = True


@dataclass(frozen=True, slots=True)
class Endpoints:
    """Base URLs the route templates expand against."""

    api_base: str = "https://api.smugmug.com"
    upload_base: str = "https://upload.smugmug.com"

    @property
    def access_base(self) -> str:
        """OAuth endpoints."""
        return f"{self.api_base}/services/oauth/1.0a"

    @property
    def base(self) -> str:
        """Versioned REST root."""
        return f"{self.api_base}/api/v2"

    @property
    def album_base(self) -> str:
        return f"{self.base}/album"

    @property
    def image_base(self) -> str:
        return f"{self.base}/image"

    @property
    def folder_base(self) -> str:
        return f"{self.base}/folder/user"

    def as_template_vars(self) -> dict[str, str]:
        """Placeholders available to every route template."""
        return {
            "access_base": self.access_base,
            "base": self.base,
            "album_base": self.album_base,
            "image_base": self.image_base,
            "folder_base": self.folder_base,
        }


@dataclass(frozen=True, slots=True)
class RequestSpec:
    """A resolved request, ready to be signed and dispatched."""

    method: str
    url: str
    payload: Payload = None
    requires_token: bool = True
    oauth_callback: Optional[str] = None
    oauth_verifier: Optional[str] = None
    legacy_method: Optional["LegacyMethod"] = None
