"""
Unit Test Fixtures.

Fixtures for unit tests - the remote API is always mocked.
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from myracli.api.endpoints import CacheSettingEndpoint, RedirectEndpoint


def _mock_endpoint(spec: type, resource: str) -> MagicMock:
    endpoint = MagicMock(spec=spec)
    endpoint.resource = resource
    endpoint.list = AsyncMock(return_value=[])
    endpoint.create = AsyncMock(return_value=[])
    endpoint.update = AsyncMock(return_value=[])
    endpoint.delete = AsyncMock(return_value=[])
    endpoint.client = MagicMock()
    endpoint.client.close = AsyncMock()
    return endpoint


@pytest.fixture
def mock_cache_setting_endpoint() -> MagicMock:
    """
    Mock cache setting endpoint.

    Usage:
        def test_list(mock_cache_setting_endpoint):
            mock_cache_setting_endpoint.list.return_value = [record]
    """
    return _mock_endpoint(CacheSettingEndpoint, "cacheSettings")


@pytest.fixture
def mock_redirect_endpoint() -> MagicMock:
    """Mock redirect endpoint."""
    return _mock_endpoint(RedirectEndpoint, "redirects")


class MockResponse:
    """Mock HTTP response for testing."""

    def __init__(
        self,
        status_code: int,
        json_data: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self._json_data = json_data or {}

    def json(self) -> dict[str, Any]:
        return self._json_data

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            request = httpx.Request("GET", "https://api.test/en/rapi")
            response = httpx.Response(self.status_code, request=request)
            raise httpx.HTTPStatusError(
                f"HTTP {self.status_code}", request=request, response=response,
            )


@pytest.fixture
def mock_response() -> type[MockResponse]:
    """Provide MockResponse class for creating mock HTTP responses."""
    return MockResponse
