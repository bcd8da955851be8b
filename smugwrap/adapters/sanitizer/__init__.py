"""Sanitizer adapters."""

from smugwrap.adapters.sanitizer.default import PassthroughSanitizer, TagStrippingSanitizer

__all__ = ["PassthroughSanitizer", "TagStrippingSanitizer"]
