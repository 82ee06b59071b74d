"""
HTTP Client for the remote API.

Provides an async HTTP client for the Myracloud web API.
Base URL and timeout come from application.yaml, credentials from
config/.env or the MYRA_* environment variables.
"""

from typing import Any

import httpx

from myracli.core.config import get_api_base_url, get_settings
from myracli.core.exceptions import AuthenticationError
from myracli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


class APIClient:
    """
    HTTP client for remote API communication.

    Features:
    - Base URL (with language segment) from application.yaml
    - Credentials from settings, sent on every request
    - Structured logging of requests/responses
    - httpx errors are logged and re-raised unchanged

    Usage:
        client = APIClient()
        response = await client.request("GET", "/cacheSettings/example.com/1")
        await client.close()
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        api_key: str | None = None,
        api_secret: str | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: API base URL. If None, built from config/settings/application.yaml.
            timeout: Request timeout in seconds. If None, read from application.yaml.
            api_key: API key. If None, read from settings.
            api_secret: API secret. If None, read from settings.
        """
        if base_url is None or timeout is None:
            config_base_url, config_timeout = get_api_base_url()
            base_url = base_url or config_base_url
            timeout = timeout if timeout is not None else config_timeout

        if api_key is None or api_secret is None:
            settings = get_settings()
            api_key = api_key if api_key is not None else settings.api_key
            api_secret = api_secret if api_secret is not None else settings.api_secret

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._api_key = api_key
        self._api_secret = api_secret
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if not self._api_key or not self._api_secret:
            raise AuthenticationError(
                "API credentials missing. Set MYRA_API_KEY and MYRA_API_SECRET "
                "in config/.env or the environment."
            )
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                auth=(self._api_key, self._api_secret),
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request to the remote API.

        Args:
            method: HTTP method (GET, PUT, POST, DELETE)
            path: API path relative to the base URL
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response

        Raises:
            httpx.HTTPError: On request failure
        """
        client = await self._get_client()

        log_with_source(logger, "api", "debug", "API request", method=method, path=path)

        try:
            response = await client.request(method, path, **kwargs)

            log_with_source(
                logger,
                "api",
                "debug",
                "API response",
                method=method,
                path=path,
                status_code=response.status_code,
            )

            return response

        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "api",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise
