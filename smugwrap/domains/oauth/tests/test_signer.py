"""Unit tests for OAuth1Signer.

Covers:
- sign() against an independently computed HMAC-SHA1 vector
- determinism with fixed nonce/clock, freshness without
- protocol parameter order and header rendering
- PLAINTEXT signatures
- request-token step (callback, empty token secret)
- ConfigurationError for incomplete credentials

Uses table-driven @dataclass cases wherever possible.
"""

import re
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import unquote

import pytest

from smugwrap.core.config import SignatureMethod
from smugwrap.core.exceptions import ConfigurationError
from smugwrap.domains.oauth.signer import OAuth1Signer
from smugwrap.domains.oauth.types import Credentials

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_HEADER_PARAM = re.compile(r'(\w+)="([^"]*)"')


def _creds(**overrides) -> Credentials:
    values = {
        "consumer_key": "ck",
        "consumer_secret": "cs",
        "token_id": "tok",
        "token_secret": "ts",
    }
    values.update(overrides)
    return Credentials(**values)


def _signer(creds: Optional[Credentials] = None, nonce: str = "nonce123", ts: int = 1700000000):
    return OAuth1Signer(creds or _creds(), nonce_factory=lambda: nonce, clock=lambda: ts)


def _header_params(header: str) -> list[tuple[str, str]]:
    assert header.startswith("OAuth ")
    return [(k, unquote(v)) for k, v in _HEADER_PARAM.findall(header)]


# ===========================================================================
# Known vectors
# ===========================================================================


def test_sign_matches_published_hmac_vector():
    """Photos example from the OAuth 1.0 protocol appendix (query params signed)."""
    creds = Credentials(
        consumer_key="dpf43f3p2l4k3l03",
        consumer_secret="kd94hf93k423kf44",
        token_id="nnch734d00sl2jdk",
        token_secret="pfkkdhi9sl3r4s00",
    )
    signer = _signer(creds, nonce="kllo9940pd9333jh", ts=1191242096)

    header = signer.sign("GET", "http://photos.example.net/photos?file=vacation.jpg&size=original")

    params = dict(_header_params(header))
    assert params["oauth_signature"] == "tR3+Ty81lMeYAr/Fid0kMTYa/WM="


def test_sign_matches_computed_vector():
    header = _signer().sign("GET", "https://api.example.com/api/v2/album/abc")
    params = dict(_header_params(header))
    # openssl dgst -sha1 -hmac 'cs&ts' over the base string
    assert params["oauth_signature"] == "bioQJ1QJaAsWUToDyxAxgZm02xI="


def test_request_token_signature_uses_empty_token_secret():
    signer = _signer(_creds(token_id=None, token_secret=None))
    header = signer.sign(
        "GET",
        "https://api.example.com/services/oauth/1.0a/getRequestToken",
        requires_token=False,
    )
    params = dict(_header_params(header))
    assert params["oauth_callback"] == "oob"
    assert "oauth_token" not in params
    assert params["oauth_signature"] == "k07+EPXqY3W30W0E69JIY7jzk/c="


# ===========================================================================
# Determinism and freshness
# ===========================================================================


def test_sign_is_deterministic_with_fixed_nonce_and_clock():
    url = "https://api.example.com/api/v2/image/xyz-0"
    assert _signer().sign("GET", url) == _signer().sign("GET", url)


def test_sign_draws_fresh_nonce_and_timestamp_per_call():
    nonces = iter(["n1", "n2"])
    times = iter([100, 200])
    signer = OAuth1Signer(
        _creds(), nonce_factory=lambda: next(nonces), clock=lambda: next(times)
    )
    first = dict(_header_params(signer.sign("GET", "https://h.example/a")))
    second = dict(_header_params(signer.sign("GET", "https://h.example/a")))

    assert (first["oauth_nonce"], first["oauth_timestamp"]) == ("n1", "100")
    assert (second["oauth_nonce"], second["oauth_timestamp"]) == ("n2", "200")
    assert first["oauth_signature"] != second["oauth_signature"]


def test_default_nonces_are_unique():
    signer = OAuth1Signer(_creds())
    nonces = {signer.build_oauth_params()["oauth_nonce"] for _ in range(100)}
    assert len(nonces) == 100


# ===========================================================================
# Parameter set and header rendering
# ===========================================================================


@dataclass
class OAuthParamsCase:
    desc: str
    requires_token: bool = True
    callback: Optional[str] = None
    verifier: Optional[str] = None
    expected_keys: list = field(default_factory=list)


OAUTH_PARAMS_CASES = [
    OAuthParamsCase(
        "token request",
        expected_keys=[
            "oauth_version",
            "oauth_nonce",
            "oauth_timestamp",
            "oauth_consumer_key",
            "oauth_signature_method",
            "oauth_token",
        ],
    ),
    OAuthParamsCase(
        "request-token step carries callback",
        requires_token=False,
        callback="https://app.example/cb",
        expected_keys=[
            "oauth_version",
            "oauth_nonce",
            "oauth_timestamp",
            "oauth_consumer_key",
            "oauth_signature_method",
            "oauth_callback",
        ],
    ),
    OAuthParamsCase(
        "access-token step carries verifier",
        verifier="123456",
        expected_keys=[
            "oauth_version",
            "oauth_nonce",
            "oauth_timestamp",
            "oauth_consumer_key",
            "oauth_signature_method",
            "oauth_token",
            "oauth_verifier",
        ],
    ),
]


@pytest.mark.parametrize("case", OAUTH_PARAMS_CASES, ids=lambda c: c.desc)
def test_header_parameter_order(case: OAuthParamsCase):
    header = _signer().sign(
        "GET",
        "https://h.example/x",
        requires_token=case.requires_token,
        callback=case.callback,
        verifier=case.verifier,
    )
    keys = [k for k, _ in _header_params(header)]
    assert keys == case.expected_keys + ["oauth_signature"]


def test_header_values_are_percent_encoded():
    header = OAuth1Signer.build_authorization_header(
        {"oauth_consumer_key": "a b", "oauth_signature": "x+y/z="}
    )
    assert header == 'OAuth oauth_consumer_key="a%20b", oauth_signature="x%2By%2Fz%3D"'


def test_callback_is_encoded_in_header():
    header = _signer().sign(
        "GET", "https://h.example/x", requires_token=False, callback="https://app.example/cb"
    )
    assert 'oauth_callback="https%3A%2F%2Fapp.example%2Fcb"' in header


def test_form_body_params_change_the_signature():
    signer = _signer()
    plain = dict(_header_params(signer.sign("POST", "https://h.example/x")))
    with_body = dict(
        _header_params(signer.sign("POST", "https://h.example/x", body_params={"Name": "a"}))
    )
    assert plain["oauth_signature"] != with_body["oauth_signature"]
    assert "Name" not in with_body


def test_signature_base_string_merges_query_and_uppercases_verb():
    base = _signer().signature_base_string(
        "get", "https://H.example/x?b=2", [("a", "1"), ("c", "3")]
    )
    assert base == "GET&https%3A%2F%2Fh.example%2Fx&a%3D1%26b%3D2%26c%3D3"


# ===========================================================================
# PLAINTEXT
# ===========================================================================


def test_plaintext_signature_is_the_signing_key():
    signer = _signer(_creds(signature_method=SignatureMethod.PLAINTEXT, consumer_secret="c&s"))
    params = dict(_header_params(signer.sign("GET", "https://h.example/x")))
    assert params["oauth_signature_method"] == "PLAINTEXT"
    assert params["oauth_signature"] == "c%26s&ts"


# ===========================================================================
# ConfigurationError (table-driven)
# ===========================================================================


@dataclass
class ConfigErrorCase:
    desc: str
    overrides: dict
    requires_token: bool = True
    match: str = ""


CONFIG_ERROR_CASES = [
    ConfigErrorCase("missing consumer secret", {"consumer_secret": None}, match="consumer secret"),
    ConfigErrorCase("empty consumer secret", {"consumer_secret": ""}, match="consumer secret"),
    ConfigErrorCase("missing token secret", {"token_secret": None}, match="token secret"),
    ConfigErrorCase("empty token secret", {"token_secret": ""}, match="token secret"),
    ConfigErrorCase("missing consumer key", {"consumer_key": None}, match="consumer key"),
    ConfigErrorCase("missing token id", {"token_id": None}, match="OAuth token"),
    ConfigErrorCase(
        "request-token step still needs consumer secret",
        {"consumer_secret": None, "token_secret": None},
        requires_token=False,
        match="consumer secret",
    ),
]


@pytest.mark.parametrize("case", CONFIG_ERROR_CASES, ids=lambda c: c.desc)
def test_incomplete_credentials_raise(case: ConfigErrorCase):
    signer = _signer(_creds(**case.overrides))
    with pytest.raises(ConfigurationError, match=case.match):
        signer.sign("GET", "https://h.example/x", requires_token=case.requires_token)


def test_empty_token_secret_only_allowed_without_token():
    signer = _signer(_creds(token_secret=""))
    assert signer.signing_key(requires_token=False) == "cs&"
    with pytest.raises(ConfigurationError, match="token secret"):
        signer.signing_key()
