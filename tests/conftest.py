"""Shared fixtures for the healthcheck-core test-suite."""
from __future__ import annotations

import time

import pytest

from healthcheck_core.config import default_settings
from healthcheck_core.testing.fixtures import fake_clock, step_clock  # noqa: F401


@pytest.fixture(autouse=True)
def fresh_env_settings():
    """Reload ``HEALTHCHECK_*`` settings for every test."""
    default_settings.cache_clear()
    yield
    default_settings.cache_clear()


@pytest.fixture
def local_zone(monkeypatch: pytest.MonkeyPatch):
    """Switch the process-local time zone via ``TZ`` for the duration of a test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()
