"""OAuth 1.0a signing domain."""

from smugwrap.domains.oauth.encoding import (
    natural_key,
    normalize_parameters,
    percent_encode,
    split_base_url,
)
from smugwrap.domains.oauth.flow import build_authorize_url, parse_token_response
from smugwrap.domains.oauth.signer import OAuth1Signer
from smugwrap.domains.oauth.types import Credentials, OAuth1TokenResponse

__all__ = [
    "Credentials",
    "OAuth1Signer",
    "OAuth1TokenResponse",
    "build_authorize_url",
    "natural_key",
    "normalize_parameters",
    "parse_token_response",
    "percent_encode",
    "split_base_url",
]
