"""
Resource Endpoints.

One endpoint class per remote resource type. Each exposes create, update,
list and delete, returns the affected records as field-name-keyed dicts,
and raises when the call fails:

- httpx.HTTPStatusError for non-2xx responses (propagated unchanged)
- ExternalServiceError when the API answers with error: true

Request layout (relative to the client base URL):
    GET    /{resource}/{fqdn}/{page}   list
    PUT    /{resource}/{fqdn}          create
    POST   /{resource}/{fqdn}          update (id + modified in body)
    DELETE /{resource}/{fqdn}          delete (id in body)
"""

from datetime import datetime
from typing import Any

from myracli.api.client import APIClient
from myracli.core.exceptions import ExternalServiceError
from myracli.core.logging import get_logger, log_with_source
from myracli.schemas.options import MatchingType, RedirectType

logger = get_logger(__name__)

Record = dict[str, Any]
RecordList = list[Record]


class AbstractEndpoint:
    """Shared request and envelope handling for resource endpoints."""

    resource: str = ""

    def __init__(self, client: APIClient) -> None:
        self.client = client

    def _path(self, fqdn: str, *parts: Any) -> str:
        segments = [self.resource, fqdn.rstrip("."), *(str(p) for p in parts)]
        return "/" + "/".join(segments)

    @staticmethod
    def _unwrap(payload: dict[str, Any]) -> RecordList:
        """Extract records from a response envelope or raise on API errors."""
        if payload.get("error"):
            violations = [
                v.get("message", str(v)) if isinstance(v, dict) else str(v)
                for v in payload.get("violationList") or []
            ]
            message = "; ".join(violations) if violations else "Remote API reported an error"
            raise ExternalServiceError(message, violations=violations)

        records = payload.get("targetObject")
        if records is None:
            records = payload.get("list", [])
        if isinstance(records, dict):
            records = [records]
        return list(records)

    async def _call(self, method: str, path: str, **kwargs: Any) -> RecordList:
        response = await self.client.request(method, path, **kwargs)
        response.raise_for_status()
        try:
            payload = response.json()
        except ValueError:
            raise ExternalServiceError(
                f"Remote API returned a non-JSON body for {method} {path}"
            ) from None
        if not isinstance(payload, dict):
            raise ExternalServiceError(
                f"Remote API returned an unexpected {type(payload).__name__} for {method} {path}"
            )
        records = self._unwrap(payload)
        log_with_source(
            logger,
            "api",
            "info",
            "Endpoint call completed",
            resource=self.resource,
            method=method,
            records=len(records),
        )
        return records

    async def list(self, fqdn: str, page: int = 1) -> RecordList:
        """List records of this resource for a domain."""
        return await self._call("GET", self._path(fqdn, page))

    async def delete(self, fqdn: str, record_id: int) -> RecordList:
        """Delete a record by id."""
        return await self._call("DELETE", self._path(fqdn), json={"id": record_id})

    async def _create(self, fqdn: str, body: dict[str, Any]) -> RecordList:
        return await self._call("PUT", self._path(fqdn), json=body)

    async def _update(
        self, fqdn: str, record_id: int, modified: datetime, body: dict[str, Any],
    ) -> RecordList:
        payload = {"id": record_id, "modified": modified.isoformat(), **body}
        return await self._call("POST", self._path(fqdn), json=payload)


class CacheSettingEndpoint(AbstractEndpoint):
    """Cache rules: path pattern, matching type and TTL."""

    resource = "cacheSettings"

    @staticmethod
    def _body(path: str, ttl: int, matching_type: MatchingType | str) -> dict[str, Any]:
        return {"path": path, "ttl": int(ttl), "type": MatchingType(matching_type).value}

    async def create(
        self, fqdn: str, path: str, ttl: int, matching_type: MatchingType | str,
    ) -> RecordList:
        return await self._create(fqdn, self._body(path, ttl, matching_type))

    async def update(
        self,
        fqdn: str,
        record_id: int,
        modified: datetime,
        path: str,
        ttl: int,
        matching_type: MatchingType | str,
    ) -> RecordList:
        return await self._update(
            fqdn, record_id, modified, self._body(path, ttl, matching_type),
        )


class RedirectEndpoint(AbstractEndpoint):
    """URL redirects: source pattern to destination URL."""

    resource = "redirects"

    @staticmethod
    def _body(
        source: str,
        destination: str,
        redirect_type: RedirectType | str,
        matching_type: MatchingType | str,
        expert_mode: bool,
    ) -> dict[str, Any]:
        return {
            "source": source,
            "destination": destination,
            "type": RedirectType(redirect_type).value,
            "matchingType": MatchingType(matching_type).value,
            "expertMode": expert_mode,
        }

    async def create(
        self,
        fqdn: str,
        source: str,
        destination: str,
        redirect_type: RedirectType | str,
        matching_type: MatchingType | str,
        expert_mode: bool = False,
    ) -> RecordList:
        return await self._create(
            fqdn, self._body(source, destination, redirect_type, matching_type, expert_mode),
        )

    async def update(
        self,
        fqdn: str,
        record_id: int,
        modified: datetime,
        source: str,
        destination: str,
        redirect_type: RedirectType | str,
        matching_type: MatchingType | str,
        expert_mode: bool = False,
    ) -> RecordList:
        return await self._update(
            fqdn,
            record_id,
            modified,
            self._body(source, destination, redirect_type, matching_type, expert_mode),
        )
