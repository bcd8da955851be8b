"""Sanitizers for user-supplied path and OAuth arguments."""

import re
from typing import Any

from smugwrap.core.exceptions import UnsafeArgumentError

_TAG_RE = re.compile(r"<[^>]*>")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")


class TagStrippingSanitizer:
    """Default sanitizer.

    Strips markup tags and surrounding whitespace. Rejects None and values
    carrying control characters.
    """

    def sanitize(self, value: Any) -> str:
        """Return the cleaned string form of ``value``.

        Raises:
            UnsafeArgumentError: If the value cannot be made safe.
        """
        if value is None:
            raise UnsafeArgumentError("Argument value is None")
        text = str(value)
        if _CONTROL_RE.search(text):
            raise UnsafeArgumentError(f"Argument contains control characters: {text!r}")
        return _TAG_RE.sub("", text).strip()


class PassthroughSanitizer:
    """Sanitizer that only stringifies; for trusted input."""

    def sanitize(self, value: Any) -> str:
        if value is None:
            raise UnsafeArgumentError("Argument value is None")
        return str(value)
