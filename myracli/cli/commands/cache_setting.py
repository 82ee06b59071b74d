"""
Cache Setting Commands.

List, create, update and delete the cache rules of a domain.
"""

from typing import Optional

import typer

from myracli.api.client import APIClient
from myracli.api.endpoints import CacheSettingEndpoint
from myracli.cli.commands.base import execute, find_by_id, last_modified, report_deleted, show_records
from myracli.cli.render import CACHE_SETTING_COLUMNS
from myracli.schemas.options import (
    MatchingType,
    Operation,
    require_id,
    validate_cache_setting_create,
    validate_cache_setting_update,
)


def get_endpoint() -> CacheSettingEndpoint:
    """Build the cache setting endpoint on a configured API client."""
    return CacheSettingEndpoint(APIClient())


def cache_setting(
    fqdn: str = typer.Argument(..., help="Domain the cache settings belong to"),
    operation: Operation = typer.Option(
        Operation.LIST, "--operation", "-o", help="Operation to perform",
    ),
    record_id: Optional[int] = typer.Option(
        None, "--id", help="Id of the entry to update or delete",
    ),
    path: Optional[str] = typer.Option(None, "--path", "-p", help="Path to match against"),
    ttl: Optional[int] = typer.Option(None, "--ttl", min=0, help="Time to live in seconds"),
    matching_type: Optional[MatchingType] = typer.Option(
        None, "--type", help="Type of match", case_sensitive=False,
    ),
) -> None:
    """
    CacheSetting allows you to define/modify Cache rules.

    Only passing fqdn without additional options will display all known settings.

    Examples:
        myracli cache-setting example.com
        myracli cache-setting example.com -o create --path / --ttl 1200 --type prefix
        myracli cache-setting example.com -o update --id 42 --ttl 600
        myracli cache-setting example.com -o delete --id 42
    """

    async def _list(endpoint: CacheSettingEndpoint) -> None:
        show_records(await endpoint.list(fqdn), CACHE_SETTING_COLUMNS, title=f"Cache settings of {fqdn}")

    async def _create(endpoint: CacheSettingEndpoint) -> None:
        options = validate_cache_setting_create(path, ttl, matching_type)
        records = await endpoint.create(fqdn, options.path, options.ttl, options.type)
        show_records(records, CACHE_SETTING_COLUMNS)

    async def _update(endpoint: CacheSettingEndpoint) -> None:
        existing = await find_by_id(endpoint, fqdn, require_id(record_id))
        options = validate_cache_setting_update(
            record_id, existing, path=path, ttl=ttl, type=matching_type,
        )
        records = await endpoint.update(
            fqdn, options.id, last_modified(existing), options.path, options.ttl, options.type,
        )
        show_records(records, CACHE_SETTING_COLUMNS)

    async def _delete(endpoint: CacheSettingEndpoint) -> None:
        records = await endpoint.delete(fqdn, require_id(record_id))
        report_deleted(fqdn, record_id, records, CACHE_SETTING_COLUMNS)

    handlers = {
        Operation.LIST: _list,
        Operation.CREATE: _create,
        Operation.UPDATE: _update,
        Operation.DELETE: _delete,
    }
    execute(get_endpoint, handlers[operation], command=f"cache-setting {operation.value}")
