"""
Redirect Commands.

List, create, update and delete the URL redirects of a domain.
"""

from typing import Optional

import typer

from myracli.api.client import APIClient
from myracli.api.endpoints import RedirectEndpoint
from myracli.cli.commands.base import execute, find_by_id, last_modified, report_deleted, show_records
from myracli.cli.render import REDIRECT_COLUMNS
from myracli.schemas.options import (
    MatchingType,
    Operation,
    RedirectType,
    require_id,
    validate_redirect_create,
    validate_redirect_update,
)


def get_endpoint() -> RedirectEndpoint:
    """Build the redirect endpoint on a configured API client."""
    return RedirectEndpoint(APIClient())


def redirect(
    fqdn: str = typer.Argument(..., help="Domain the redirects belong to"),
    operation: Operation = typer.Option(
        Operation.LIST, "--operation", "-o", help="Operation to perform",
    ),
    record_id: Optional[int] = typer.Option(
        None, "--id", help="Id of the entry to update or delete",
    ),
    source: Optional[str] = typer.Option(None, "--source", help="Source path pattern"),
    dest: Optional[str] = typer.Option(None, "--dest", help="Destination URL"),
    redirect_type: Optional[RedirectType] = typer.Option(
        None, "--type", help="Type of redirect", case_sensitive=False,
    ),
    matching_type: Optional[MatchingType] = typer.Option(
        None, "--matchtype", help="Type of substring matching", case_sensitive=False,
    ),
) -> None:
    """
    Redirect commands allow you to edit Url Redirects.

    Only passing fqdn without additional options will list all Redirect entries.

    Examples:
        myracli redirect example.com
        myracli redirect example.com -o create --source /old --dest https://example.com/new --type permanent --matchtype exact
        myracli redirect example.com -o update --id 42 --dest https://example.com/other
        myracli redirect example.com -o delete --id 42
    """

    async def _list(endpoint: RedirectEndpoint) -> None:
        show_records(await endpoint.list(fqdn), REDIRECT_COLUMNS, title=f"Redirects of {fqdn}")

    async def _create(endpoint: RedirectEndpoint) -> None:
        options = validate_redirect_create(source, dest, redirect_type, matching_type)
        records = await endpoint.create(
            fqdn, options.source, options.dest, options.type, options.matchtype,
        )
        show_records(records, REDIRECT_COLUMNS)

    async def _update(endpoint: RedirectEndpoint) -> None:
        existing = await find_by_id(endpoint, fqdn, require_id(record_id))
        options = validate_redirect_update(
            record_id,
            existing,
            source=source,
            dest=dest,
            type=redirect_type,
            matchtype=matching_type,
        )
        records = await endpoint.update(
            fqdn,
            options.id,
            last_modified(existing),
            options.source,
            options.dest,
            options.type,
            options.matchtype,
        )
        show_records(records, REDIRECT_COLUMNS)

    async def _delete(endpoint: RedirectEndpoint) -> None:
        records = await endpoint.delete(fqdn, require_id(record_id))
        report_deleted(fqdn, record_id, records, REDIRECT_COLUMNS)

    handlers = {
        Operation.LIST: _list,
        Operation.CREATE: _create,
        Operation.UPDATE: _update,
        Operation.DELETE: _delete,
    }
    execute(get_endpoint, handlers[operation], command=f"redirect {operation.value}")
