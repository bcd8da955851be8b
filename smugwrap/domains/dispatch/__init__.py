"""Signed request dispatch with redirect handling."""

from smugwrap.domains.dispatch.decoding import check_failure_status, decode_response
from smugwrap.domains.dispatch.dispatcher import (
    DEFAULT_MAX_REDIRECTS,
    FORM_CONTENT_TYPE,
    RequestDispatcher,
)

__all__ = [
    "DEFAULT_MAX_REDIRECTS",
    "FORM_CONTENT_TYPE",
    "RequestDispatcher",
    "check_failure_status",
    "decode_response",
]
