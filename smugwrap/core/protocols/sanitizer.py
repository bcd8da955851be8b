"""Sanitizer protocol for user-supplied values."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Sanitizer(Protocol):
    """Protocol for cleaning values before they are placed in a URL or signature."""

    def sanitize(self, value: Any) -> str:
        """Return a safe string form of ``value``.

        Raises:
            UnsafeArgumentError: If the value cannot be made safe.
        """
        ...
