"""Pytest configuration and fixtures."""

import locale

import pytest

from display_app.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Drop DISPLAY_* variables and the cached settings around each test."""
    for name in ("DISPLAY_PLACEHOLDER", "DISPLAY_TIMEZONE", "DISPLAY_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_time_locale():
    """Put LC_TIME back after tests that switch the process locale."""
    saved = locale.setlocale(locale.LC_TIME)
    yield
    locale.setlocale(locale.LC_TIME, saved)


@pytest.fixture
def ny_settings():
    """Settings pinned to New York time so date output is deterministic."""
    return Settings(_env_file=None, timezone="America/New_York")
