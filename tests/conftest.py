"""Root conftest — shared test configuration and fixtures."""

import os

import pytest

from uln.config import get_settings

# Ensure a developer's .env or shell does not change logging under test
os.environ.setdefault("ULN_LOG_LEVEL", "WARNING")
os.environ.setdefault("ULN_LOG_FORMAT", "json")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """get_settings is lru_cached — clear around each test so monkeypatched env applies."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def valid_ulns() -> list[str]:
    """Known-good ULNs, including check digits 0 and 1."""
    return [
        "0000000042",
        "0000000034",
        "0000000018",
        "0000000301",
        "1000000000",
        "1000000019",
        "1234567899",
        "9999999998",
    ]
