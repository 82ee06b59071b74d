#!/usr/bin/env python3
"""
Myracloud CLI.

Command-line client for the Myracloud web API.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    myracli --help                                        # Show help

    # Cache settings
    myracli cache-setting example.com                     # List all cache settings
    myracli cache-setting example.com -o create --path / --ttl 1200 --type prefix
    myracli cache-setting example.com -o update --id 42 --ttl 600
    myracli cache-setting example.com -o delete --id 42

    # Redirects
    myracli redirect example.com                          # List all redirects
    myracli redirect example.com -o create --source /old --dest https://example.com/new \
        --type permanent --matchtype exact
    myracli redirect example.com -o update --id 42 --dest https://example.com/other
    myracli redirect example.com -o delete --id 42

    # System info
    myracli system info                                   # Show app info
    myracli system config                                 # Show configuration
    myracli system version                                # Show version

Options:
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
    --help            Show help message
"""

import typer
from rich.console import Console

from myracli.cli.commands import cache_setting, redirect, system_app
from myracli.core.config import validate_project_root
from myracli.core.logging import setup_logging

app = typer.Typer(
    name="myracli",
    help="Myracloud CLI - Manage cache settings and redirects of your domains.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.command(name="cache-setting")(cache_setting)
app.command(name="redirect")(redirect)
app.add_typer(system_app, name="system")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Myracloud CLI.

    Manage cache settings and redirects through the Myracloud web API.
    """
    validate_project_root()

    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging()


if __name__ == "__main__":
    app()
