"""Unit tests for resource endpoints."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from myracli.api.client import APIClient
from myracli.api.endpoints import AbstractEndpoint, CacheSettingEndpoint, RedirectEndpoint
from myracli.core.exceptions import ExternalServiceError
from myracli.schemas.options import MatchingType, RedirectType


@pytest.fixture
def api_client(mock_response) -> MagicMock:
    """APIClient whose request returns an empty list envelope."""
    client = MagicMock(spec=APIClient)
    client.request = AsyncMock(return_value=mock_response(200, {"error": False, "list": []}))
    return client


class TestUnwrap:
    """Tests for response envelope handling."""

    def test_list_envelope(self) -> None:
        records = AbstractEndpoint._unwrap({"error": False, "list": [{"id": 1}, {"id": 2}]})
        assert records == [{"id": 1}, {"id": 2}]

    def test_target_object_envelope(self) -> None:
        records = AbstractEndpoint._unwrap({"error": False, "targetObject": [{"id": 1}]})
        assert records == [{"id": 1}]

    def test_single_target_object(self) -> None:
        assert AbstractEndpoint._unwrap({"targetObject": {"id": 1}}) == [{"id": 1}]

    def test_empty_envelope(self) -> None:
        assert AbstractEndpoint._unwrap({}) == []

    def test_error_envelope_lists_violations(self) -> None:
        payload = {
            "error": True,
            "violationList": [
                {"propertyPath": "ttl", "message": "TTL too small"},
                {"propertyPath": "path", "message": "Path is invalid"},
            ],
        }

        with pytest.raises(ExternalServiceError) as exc_info:
            AbstractEndpoint._unwrap(payload)

        assert exc_info.value.violations == ["TTL too small", "Path is invalid"]
        assert "TTL too small; Path is invalid" == exc_info.value.message

    def test_error_envelope_without_violations(self) -> None:
        with pytest.raises(ExternalServiceError, match="reported an error"):
            AbstractEndpoint._unwrap({"error": True})


class TestCacheSettingEndpoint:
    """Tests for cache setting requests."""

    @pytest.mark.asyncio
    async def test_list(self, api_client, mock_response, cache_setting_record) -> None:
        api_client.request.return_value = mock_response(200, {"list": [cache_setting_record]})
        endpoint = CacheSettingEndpoint(api_client)

        records = await endpoint.list("example.com")

        assert records == [cache_setting_record]
        api_client.request.assert_awaited_once_with("GET", "/cacheSettings/example.com/1")

    @pytest.mark.asyncio
    async def test_list_strips_trailing_dot(self, api_client) -> None:
        await CacheSettingEndpoint(api_client).list("example.com.", page=3)
        api_client.request.assert_awaited_once_with("GET", "/cacheSettings/example.com/3")

    @pytest.mark.asyncio
    async def test_create(self, api_client) -> None:
        await CacheSettingEndpoint(api_client).create("example.com", "/", 1200, MatchingType.PREFIX)

        api_client.request.assert_awaited_once_with(
            "PUT",
            "/cacheSettings/example.com",
            json={"path": "/", "ttl": 1200, "type": "prefix"},
        )

    @pytest.mark.asyncio
    async def test_update_sends_id_and_modified(self, api_client) -> None:
        modified = datetime.fromisoformat("2024-03-02T11:30:00+01:00")

        await CacheSettingEndpoint(api_client).update("example.com", 42, modified, "/", 60, "exact")

        api_client.request.assert_awaited_once_with(
            "POST",
            "/cacheSettings/example.com",
            json={
                "id": 42,
                "modified": "2024-03-02T11:30:00+01:00",
                "path": "/",
                "ttl": 60,
                "type": "exact",
            },
        )

    @pytest.mark.asyncio
    async def test_delete(self, api_client) -> None:
        await CacheSettingEndpoint(api_client).delete("example.com", 42)

        api_client.request.assert_awaited_once_with(
            "DELETE", "/cacheSettings/example.com", json={"id": 42},
        )

    @pytest.mark.asyncio
    async def test_http_status_error_propagates(self, api_client, mock_response) -> None:
        api_client.request.return_value = mock_response(500)

        with pytest.raises(httpx.HTTPStatusError):
            await CacheSettingEndpoint(api_client).list("example.com")


class TestRedirectEndpoint:
    """Tests for redirect requests."""

    @pytest.mark.asyncio
    async def test_create(self, api_client) -> None:
        await RedirectEndpoint(api_client).create(
            "example.com", "/old", "https://example.com/new", RedirectType.PERMANENT, MatchingType.EXACT,
        )

        api_client.request.assert_awaited_once_with(
            "PUT",
            "/redirects/example.com",
            json={
                "source": "/old",
                "destination": "https://example.com/new",
                "type": "permanent",
                "matchingType": "exact",
                "expertMode": False,
            },
        )

    @pytest.mark.asyncio
    async def test_update(self, api_client, mock_response, redirect_record) -> None:
        api_client.request.return_value = mock_response(200, {"targetObject": [redirect_record]})
        modified = datetime.fromisoformat(redirect_record["modified"])

        records = await RedirectEndpoint(api_client).update(
            "example.com", 42, modified, "/old", "https://example.com/x", "redirect", "prefix",
        )

        assert records == [redirect_record]
        _, kwargs = api_client.request.call_args
        assert kwargs["json"]["id"] == 42
        assert kwargs["json"]["destination"] == "https://example.com/x"
        assert kwargs["json"]["matchingType"] == "prefix"

    @pytest.mark.asyncio
    async def test_illegal_enum_value_rejected(self, api_client) -> None:
        with pytest.raises(ValueError):
            await RedirectEndpoint(api_client).create("example.com", "/a", "/b", "temporary", "prefix")
        api_client.request.assert_not_awaited()


class TestMalformedResponses:
    """Tests for 2xx responses whose body is not a JSON object."""

    @pytest.mark.asyncio
    async def test_non_json_body(self, api_client) -> None:
        response = MagicMock(spec=httpx.Response)
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        api_client.request.return_value = response

        with pytest.raises(ExternalServiceError, match="non-JSON body for GET /cacheSettings/example.com/1"):
            await CacheSettingEndpoint(api_client).list("example.com")

    @pytest.mark.asyncio
    async def test_json_body_that_is_not_an_object(self, api_client) -> None:
        response = MagicMock(spec=httpx.Response)
        response.json.return_value = [{"id": 1}]
        api_client.request.return_value = response

        with pytest.raises(ExternalServiceError, match="unexpected list"):
            await RedirectEndpoint(api_client).list("example.com")
