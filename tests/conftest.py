"""
Root Pytest Fixtures.

Shared fixtures available to all test types.
"""

from typing import Any

import pytest

from myracli.core import logging as logging_module
from myracli.core.config import get_app_config, get_settings


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear cached configuration so each test gets a fresh load."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    logging_module._logging_config = None
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()
    logging_module._logging_config = None


# =============================================================================
# Sample Records
# =============================================================================


@pytest.fixture
def cache_setting_record() -> dict[str, Any]:
    """A cache setting as returned by the remote API."""
    return {
        "id": 42,
        "created": "2024-03-01T10:00:00+01:00",
        "modified": "2024-03-02T11:30:00+01:00",
        "path": "/assets",
        "ttl": 3600,
        "notFoundTtl": 60,
        "type": "prefix",
        "enforce": False,
        "sort": 1,
    }


@pytest.fixture
def redirect_record() -> dict[str, Any]:
    """A redirect as returned by the remote API."""
    return {
        "id": 42,
        "created": "2024-03-01T10:00:00+01:00",
        "modified": "2024-03-02T11:30:00+01:00",
        "source": "/old",
        "destination": "https://example.com/new",
        "type": "permanent",
        "matchingType": "exact",
        "subDomainName": "www.example.com",
    }
