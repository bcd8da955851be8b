"""Shared pytest setup for smugwrap.

Sits at the repository root so the suites under tests/unit and the domain
tests next to the code see the same fixtures and the asyncio plugin.
"""

import os

import pytest

# async tests everywhere need the plugin
pytest_plugins = ("pytest_asyncio",)


@pytest.fixture(autouse=True)
def _isolate_smugwrap_env(monkeypatch):
    """Keep SMUGWRAP_* variables from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.startswith("SMUGWRAP_"):
            monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_transport():
    """FakeTransport that records sent requests."""
    from smugwrap.adapters.transport.fake import FakeTransport

    return FakeTransport()


@pytest.fixture
def credentials_options():
    """Complete consumer + access token credentials as client options."""
    return {
        "consumer_key": "ck",
        "consumer_secret": "cs",
        "token_id": "tok",
        "token_secret": "ts",
    }
