"""Unit tests for the OAuth encoding primitives.

Covers:
- percent_encode (RFC 3986 unreserved set, UTF-8, non-string input)
- natural_key / normalize_parameters (numeric-aware, stable ordering)
- split_base_url (normalization, query extraction)
"""

import string
from dataclasses import dataclass, field

import pytest

from smugwrap.domains.oauth.encoding import (
    natural_key,
    normalize_parameters,
    percent_encode,
    split_base_url,
)

UNRESERVED = set(string.ascii_letters + string.digits + "-._~")


# ===========================================================================
# percent_encode (table-driven)
# ===========================================================================


@dataclass
class PercentEncodeCase:
    desc: str
    input_val: object
    expected: str


PERCENT_ENCODE_CASES = [
    PercentEncodeCase("plain ascii", "abc", "abc"),
    PercentEncodeCase("space is %20 not plus", "hello world", "hello%20world"),
    PercentEncodeCase("tilde unreserved", "~", "~"),
    PercentEncodeCase("plus sign", "a+b", "a%2Bb"),
    PercentEncodeCase("percent literal", "100%", "100%25"),
    PercentEncodeCase("slash", "foo/bar", "foo%2Fbar"),
    PercentEncodeCase("ampersand and equals", "a=1&b=2", "a%3D1%26b%3D2"),
    PercentEncodeCase("bang", "user!albums", "user%21albums"),
    PercentEncodeCase("unicode", "naïve", "na%C3%AFve"),
    PercentEncodeCase("empty string", "", ""),
    PercentEncodeCase("integer", 42, "42"),
    PercentEncodeCase("bytes", b"a b", "a%20b"),
]


@pytest.mark.parametrize("case", PERCENT_ENCODE_CASES, ids=lambda c: c.desc)
def test_percent_encode(case: PercentEncodeCase):
    assert percent_encode(case.input_val) == case.expected


def test_percent_encode_printable_ascii():
    """Only the unreserved set passes through; everything else is %XX uppercase."""
    for char in string.printable:
        encoded = percent_encode(char)
        if char in UNRESERVED:
            assert encoded == char
        else:
            assert encoded == f"%{ord(char):02X}"


# ===========================================================================
# natural_key / normalize_parameters
# ===========================================================================


def test_natural_key_orders_digit_runs_numerically():
    names = ["p10", "p2", "p1", "p"]
    assert sorted(names, key=natural_key) == ["p", "p1", "p2", "p10"]


def test_natural_key_is_case_sensitive():
    assert sorted(["b", "B", "a", "A"], key=natural_key) == ["A", "B", "a", "b"]


def test_natural_key_mixed_positions_compare():
    # Leading digits vs leading text must not raise TypeError
    assert sorted(["a1", "1a"], key=natural_key) == ["1a", "a1"]


@dataclass
class NormalizeCase:
    desc: str
    params: list = field(default_factory=list)
    expected: str = ""


NORMALIZE_CASES = [
    NormalizeCase("empty", [], ""),
    NormalizeCase("sorted by key", [("z", "1"), ("a", "2")], "a=2&z=1"),
    NormalizeCase("natural order", [("p10", "x"), ("p2", "y")], "p2=y&p10=x"),
    NormalizeCase("values encoded", [("q", "a b&c")], "q=a%20b%26c"),
    NormalizeCase("keys encoded", [("a b", "1")], "a%20b=1"),
    NormalizeCase(
        "duplicate keys keep input order",
        [("k", "2"), ("a", "0"), ("k", "1")],
        "a=0&k=2&k=1",
    ),
]


@pytest.mark.parametrize("case", NORMALIZE_CASES, ids=lambda c: c.desc)
def test_normalize_parameters(case: NormalizeCase):
    assert normalize_parameters(case.params) == case.expected


# ===========================================================================
# split_base_url (table-driven)
# ===========================================================================


@dataclass
class SplitCase:
    desc: str
    url: str
    expected_base: str
    expected_query: list = field(default_factory=list)


SPLIT_CASES = [
    SplitCase("plain", "https://api.example.com/api/v2", "https://api.example.com/api/v2"),
    SplitCase(
        "scheme and host lowercased",
        "HTTPS://API.Example.com/Path",
        "https://api.example.com/Path",
    ),
    SplitCase("default https port dropped", "https://h.example:443/x", "https://h.example/x"),
    SplitCase("default http port dropped", "http://h.example:80/x", "http://h.example/x"),
    SplitCase("custom port kept", "http://h.example:8080/x", "http://h.example:8080/x"),
    SplitCase(
        "query extracted",
        "https://h.example/x?b=2&a=&a=1",
        "https://h.example/x",
        [("b", "2"), ("a", ""), ("a", "1")],
    ),
    SplitCase("fragment dropped", "https://h.example/x#frag", "https://h.example/x"),
    SplitCase("empty path becomes slash", "https://h.example", "https://h.example/"),
]


@pytest.mark.parametrize("case", SPLIT_CASES, ids=lambda c: c.desc)
def test_split_base_url(case: SplitCase):
    base, query = split_base_url(case.url)
    assert base == case.expected_base
    assert query == case.expected_query
