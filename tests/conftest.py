"""Shared fixtures for the batman_aide test suite."""

import pytest

from batman_aide.shared.config import ENV_DEFAULT_CHARSET, ENV_LOG_LEVEL, get_config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Run every test against a configuration freshly loaded from a clean environment."""
    monkeypatch.delenv(ENV_DEFAULT_CHARSET, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def default_charset_env(monkeypatch):
    """Configure a default charset through the environment."""

    def _set(name):
        monkeypatch.setenv(ENV_DEFAULT_CHARSET, name)
        get_config.cache_clear()

    return _set
