"""Root conftest — shared test configuration."""

import os

import pytest

from immutable_ops.config import get_settings

# Ambient defaults for the test run
os.environ.setdefault("IMMUTABLE_OPS_LOG_LEVEL", "DEBUG")
os.environ.setdefault("IMMUTABLE_OPS_LOG_FORMAT", "json")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """get_settings is lru_cached — clear it so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
