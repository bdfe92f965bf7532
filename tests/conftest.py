"""Pytest configuration shared by all suites.

Settings are cached process-wide, so every test starts from a clean cache and
an environment without QH_* overrides.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from query_helpers.config import get_settings

_SETTINGS_ENV_VARS = (
    "QH_LOG_LEVEL",
    "QH_LOG_TO_FILE",
    "QH_LOG_FILE_DIR",
    "QH_IDENTIFIER_DIALECT",
    "QH_PARAM_STYLE",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear QH_* overrides and the settings cache around each test."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch):
    """Set QH_* environment variables and reload settings."""

    def _apply(**values: str):
        for key, value in values.items():
            monkeypatch.setenv(key, value)
        get_settings.cache_clear()
        return get_settings()

    return _apply
