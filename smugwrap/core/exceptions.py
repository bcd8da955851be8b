"""Shared exceptions module."""

from typing import Any, Optional, Sequence


class SmugWrapException(Exception):
    """Base exception for smugwrap.

    Every error carries a machine-readable ``kind``, a human readable
    ``message`` and an optional numeric ``code`` so callers can branch on
    structured details instead of parsing strings.
    """

    kind: str = "error"

    def __init__(self, message: str, code: Optional[int] = None):
        """Create a new SmugWrapException instance.

        Args:
        ----
            message (str): The error message.
            code (int, optional): Numeric error code, when one is known.

        """
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Structured representation of the error."""
        return {"kind": self.kind, "message": self.message, "code": self.code}


class UnsupportedMethodError(SmugWrapException):
    """Raised when a legacy method identifier is not part of the routing table."""

    kind = "unsupported_method"

    def __init__(self, method: str):
        """Create a new UnsupportedMethodError instance.

        Args:
        ----
            method (str): The legacy identifier that was requested.

        """
        self.method = method
        super().__init__(f"Unsupported legacy method: {method}")


class MissingArgumentError(SmugWrapException):
    """Raised when required named arguments are absent."""

    kind = "missing_argument"

    def __init__(self, method: str, missing: Sequence[str]):
        """Create a new MissingArgumentError instance.

        Args:
        ----
            method (str): The legacy identifier being resolved.
            missing (Sequence[str]): Names of the absent arguments.

        """
        self.method = method
        self.missing = tuple(missing)
        super().__init__(
            f"Required argument(s) for {method} are not set: {', '.join(self.missing)}"
        )


class UnsafeArgumentError(SmugWrapException):
    """Raised when the sanitizer rejects a user-supplied value."""

    kind = "unsafe_argument"


class ConfigurationError(SmugWrapException):
    """Raised when a secret, token or setting is missing or invalid."""

    kind = "configuration"


class UploadFileError(SmugWrapException, OSError):
    """Raised when the local file for an upload cannot be read.

    Also an ``OSError``, so callers handling file errors generically catch it.
    """

    kind = "io"

    def __init__(self, path: str, reason: str):
        """Create a new UploadFileError instance.

        Args:
        ----
            path (str): Path of the file that was requested.
            reason (str): Why the file could not be used.

        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read upload file {path}: {reason}")


class TransportError(SmugWrapException):
    """Raised when the transport fails before an HTTP response is received."""

    kind = "transport"


class RemoteError(SmugWrapException):
    """Raised when the service answers with a failure.

    Covers non-2xx/3xx statuses, malformed JSON bodies and JSON bodies that
    carry an embedded failure status.
    """

    kind = "remote"

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        """Create a new RemoteError instance.

        Args:
        ----
            message (str): The error message.
            status_code (int, optional): HTTP status of the failing response.
            code (int, optional): Error code embedded in the response body.
            body (str, optional): Raw response body.

        """
        self.status_code = status_code
        self.body = body
        super().__init__(message, code=code if code is not None else status_code)

    def to_dict(self) -> dict[str, Any]:
        """Structured representation including the HTTP status."""
        return {**super().to_dict(), "status_code": self.status_code}


class TooManyRedirectsError(SmugWrapException):
    """Raised when the redirect loop exceeds its hop bound."""

    kind = "too_many_redirects"

    def __init__(self, max_redirects: int, url: str):
        """Create a new TooManyRedirectsError instance.

        Args:
        ----
            max_redirects (int): The configured hop bound.
            url (str): The last redirect target that was not followed.

        """
        self.max_redirects = max_redirects
        self.url = url
        super().__init__(f"Exceeded {max_redirects} redirects (next location: {url})")
