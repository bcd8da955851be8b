"""Configuration enums for type-safe settings.

These enums inherit from str so they compare equal to, and serialize as,
the literal values the service expects on the wire.
"""

from enum import Enum


class SignatureMethod(str, Enum):
    """OAuth 1.0a signature methods supported by the signer."""

    HMAC_SHA1 = "HMAC-SHA1"
    PLAINTEXT = "PLAINTEXT"


class Access(str, Enum):
    """Access level requested on the authorize page."""

    PUBLIC = "Public"
    FULL = "Full"


class Permissions(str, Enum):
    """Permissions requested on the authorize page."""

    READ = "Read"
    ADD = "Add"
    MODIFY = "Modify"
