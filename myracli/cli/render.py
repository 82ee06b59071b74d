"""
Table Rendering.

Maps resource records onto a fixed column schema and prints them as a
rich table. Records are shown in the order the API returned them.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, NamedTuple

from rich.console import Console
from rich.table import Table


class Column(NamedTuple):
    header: str
    field: str
    placeholder: Any = ""


def _enforce(value: Any) -> int:
    return 1 if value else 0


CACHE_SETTING_COLUMNS: tuple[Column, ...] = (
    Column("Id", "id"),
    Column("Created", "created"),
    Column("Modified", "modified"),
    Column("Path", "path"),
    Column("ttl", "ttl"),
    Column("not found ttl", "notFoundTtl"),
    Column("Type", "type"),
    Column("Enforce", "enforce", 0),
    Column("Sort", "sort"),
)

REDIRECT_COLUMNS: tuple[Column, ...] = (
    Column("Id", "id"),
    Column("Created", "created"),
    Column("Modified", "modified"),
    Column("Source", "source"),
    Column("Destination", "destination"),
    Column("Type", "type"),
    Column("Subdomain", "subDomainName"),
    Column("MatchType", "matchingType"),
)

# Line width for output that is not a terminal.
_UNBOUNDED_WIDTH = 10_000

# Per-field value transforms applied after the placeholder.
_FORMATTERS: dict[str, Callable[[Any], Any]] = {
    "enforce": _enforce,
}


def build_rows(
    records: Iterable[Mapping[str, Any]],
    columns: tuple[Column, ...],
) -> list[list[str]]:
    """Extract the column values of every record as strings."""
    rows = []
    for record in records:
        row = []
        for column in columns:
            value = record.get(column.field)
            if value is None:
                value = column.placeholder
            formatter = _FORMATTERS.get(column.field)
            if formatter is not None:
                value = formatter(value)
            row.append(str(value))
        rows.append(row)
    return rows


def build_table(
    records: Iterable[Mapping[str, Any]],
    columns: tuple[Column, ...],
    title: str | None = None,
) -> Table:
    """Build a rich Table with one row per record."""
    table = Table(title=title, show_header=True)
    for column in columns:
        table.add_column(
            column.header,
            style="cyan" if column.field == "id" else None,
            overflow="fold",
        )
    for row in build_rows(records, columns):
        table.add_row(*row)
    return table


def render_table(
    records: Iterable[Mapping[str, Any]],
    columns: tuple[Column, ...],
    console: Console,
    title: str | None = None,
) -> None:
    """
    Render records to the console.

    Terminal output folds long values inside their cell. Piped or captured
    output is not width-bound, so every value stays whole on its row.
    """
    table = build_table(records, columns, title=title)
    if not console.is_terminal:
        console = Console(file=console.file, width=_UNBOUNDED_WIDTH)
    console.print(table)
