"""Root conftest — shared test configuration."""

import os
from datetime import datetime, timezone

import pytest

from loyalty_wallet.config import get_settings

# Keep a developer's .env / shell from changing barcode geometry under test
for _key in list(os.environ):
    if _key.startswith("WALLET_"):
        del os.environ[_key]


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 5, 9, 30, tzinfo=timezone.utc)
