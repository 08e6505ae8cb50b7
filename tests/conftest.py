"""Pytest fixtures for dc-delivery tests."""

import pytest

from core.config import AppSettings

_ENV_VARS = (
    "DC_DELIVERY_ACCOUNT",
    "DC_DELIVERY_LOCALE",
    "DC_DELIVERY_BASE_URL",
    "DC_DELIVERY_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the developer's env vars and .env files."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    """Settings for account `test`, no locale."""
    return AppSettings(account="test", _env_file=None)


@pytest.fixture
def settings_with_locale():
    return AppSettings(account="test", locale="en-GB", _env_file=None)


class StubTransport:
    """Records requested URLs and answers with a canned payload."""

    def __init__(self, payload):
        self.payload = payload
        self.urls = []

    async def get_json(self, url):
        self.urls.append(url)
        return self.payload


@pytest.fixture
def stub_transport():
    return StubTransport
