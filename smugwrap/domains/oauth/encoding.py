"""Canonical encoding primitives for OAuth 1.0a (RFC 5849 §3.6, RFC 3986).

These helpers are pure functions shared by the signer, the router (path
segments) and the upload service (file names).
"""

import re
from typing import Any, Iterable, List, Tuple, Union
from urllib.parse import parse_qsl, quote, urlsplit, urlunsplit

_DIGITS = re.compile(r"(\d+)")

_DEFAULT_PORTS = {"http": 80, "https": 443}


def percent_encode(value: Any) -> str:
    """Percent-encode a value according to RFC 3986.

    Encodes all characters except unreserved: A-Z, a-z, 0-9, -, ., _, ~
    Non-string values are converted with ``str()``; text is encoded as UTF-8.
    """
    if isinstance(value, bytes):
        return quote(value, safe="~")
    return quote(str(value), safe="~")


def natural_key(value: str) -> List[Union[str, int]]:
    """Sort key implementing a natural, numeric-aware string comparison.

    Digit runs compare by numeric value ("p2" < "p10"), everything else by
    code point. Case-sensitive and locale-independent. Even positions of the
    key are always text and odd positions always integers, so keys of any two
    strings compare without type errors.
    """
    parts = _DIGITS.split(value)
    return [int(part) if index % 2 else part for index, part in enumerate(parts)]


def normalize_parameters(params: Iterable[Tuple[Any, Any]]) -> str:
    """Build the normalized parameter string.

    Every key and value is percent-encoded, pairs are ordered by natural
    comparison of the encoded key (stable, so duplicate keys keep their input
    order) and joined as ``key=value`` with ``&``.
    """
    encoded = [(percent_encode(k), percent_encode(v)) for k, v in params]
    encoded.sort(key=lambda pair: natural_key(pair[0]))
    return "&".join(f"{k}={v}" for k, v in encoded)


def split_base_url(url: str) -> Tuple[str, List[Tuple[str, str]]]:
    """Split a request URL into its base string URI and query parameters.

    Per RFC 5849 §3.4.1.2 the scheme and host are lowercased, default ports
    are dropped and the query and fragment are removed. The query parameters
    are returned separately so they can join the signed parameter set.
    """
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    host = (parts.hostname or "").lower()
    netloc = host
    if parts.port is not None and parts.port != _DEFAULT_PORTS.get(scheme):
        netloc = f"{host}:{parts.port}"
    path = parts.path or "/"
    base = urlunsplit((scheme, netloc, path, "", ""))
    query = parse_qsl(parts.query, keep_blank_values=True)
    return base, query
