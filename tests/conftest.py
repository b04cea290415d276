"""Shared pytest configuration."""

import pytest

from derived_metrics.infrastructure.config import get_settings


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Settings are cached per process; tests that patch env need a fresh read."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
