"""
Shared CRUD Command Plumbing.

Every resource command follows the same shape: pick one operation,
validate options, make at most two endpoint calls, render the result.
This module holds the pieces they share: record lookup by id, the
modification timestamp used for optimistic concurrency, result display
and the error boundary that turns failures into exit code 1.
"""

import asyncio
from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from myracli.api.endpoints import AbstractEndpoint, RecordList
from myracli.cli.render import Column, render_table
from myracli.core.exceptions import ApplicationError, ExternalServiceError, NotFoundError
from myracli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)
console = Console()
err_console = Console(stderr=True)


async def find_by_id(endpoint: AbstractEndpoint, fqdn: str, record_id: int) -> dict[str, Any]:
    """Fetch the stored record with the given id or raise NotFoundError."""
    for record in await endpoint.list(fqdn):
        if str(record.get("id")) == str(record_id):
            return record
    raise NotFoundError(f"No {endpoint.resource} entry with id {record_id} found for {fqdn}")


def last_modified(record: dict[str, Any]) -> datetime:
    """Parse the modification timestamp of a stored record."""
    modified = record.get("modified")
    if not modified:
        raise ExternalServiceError(
            f"Record {record.get('id')} carries no modification timestamp"
        )
    try:
        return datetime.fromisoformat(modified)
    except ValueError:
        raise ExternalServiceError(
            f"Record {record.get('id')} has an unreadable modification timestamp: {modified}"
        ) from None


def show_records(records: RecordList, columns: tuple[Column, ...], title: str | None = None) -> None:
    """Render endpoint results as a table."""
    render_table(records, columns, console, title=title)


def report_deleted(fqdn: str, record_id: int, records: RecordList, columns: tuple[Column, ...]) -> None:
    console.print(f"[green]Deleted entry {record_id} of {fqdn}[/green]")
    if records:
        show_records(records, columns)


def execute(
    endpoint_factory: Callable[[], AbstractEndpoint],
    handler: Callable[[AbstractEndpoint], Awaitable[None]],
    command: str,
) -> None:
    """
    Run one operation against an endpoint and map failures to exit code 1.

    The endpoint is built here so configuration errors are reported like
    any other failure. Its HTTP client is closed whether or not the call
    succeeds. Errors are not retried.
    """
    try:
        endpoint = endpoint_factory()
    except (FileNotFoundError, ValueError) as e:
        log_with_source(logger, "cli", "error", "Configuration invalid", command=command, error=str(e))
        err_console.print(f"[red]Error loading configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    async def _main() -> None:
        try:
            await handler(endpoint)
        finally:
            await endpoint.client.close()

    try:
        asyncio.run(_main())

    except ApplicationError as e:
        log_with_source(logger, "cli", "warning", "Command failed", command=command, code=e.code)
        err_console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(1)

    except httpx.HTTPStatusError as e:
        log_with_source(
            logger, "cli", "error", "Remote API error",
            command=command, status_code=e.response.status_code,
        )
        err_console.print(f"[red]Error: API responded with {e.response.status_code}[/red]")
        raise typer.Exit(1)

    except httpx.HTTPError as e:
        log_with_source(logger, "cli", "error", "Remote API unreachable", command=command, error=str(e))
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
