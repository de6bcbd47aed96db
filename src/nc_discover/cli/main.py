"""
Main CLI entry point for nc-discover.

Provides the `ncdiscover` command with subcommands for:
- discover: Retrieve the operational state of a device
- catalog: Show the subtrees a discovery run queries
- version: Show version information
- info: Show configuration
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.logging import RichHandler

from nc_discover import __version__
from nc_discover.cli.commands import catalog, discover
from nc_discover.core.config import get_settings, load_settings
from nc_discover.core.exceptions import ConfigurationError

# Main CLI app
app = typer.Typer(
    name="ncdiscover",
    help="NETCONF operational state discovery",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Log and status output goes to stderr so reports on stdout stay parseable
console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"ncdiscover version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            envvar="NCD_DEBUG",
            help="Enable debug output",
        ),
    ] = False,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to YAML settings file",
        ),
    ] = None,
) -> None:
    """
    ncdiscover - NETCONF operational state discovery.

    Retrieves a device's <state> tree one subtree at a time,
    tolerating per-subtree failures.
    """
    if config_file:
        try:
            settings = load_settings(config_file)
        except ConfigurationError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(1) from None
    else:
        settings = get_settings()

    if debug:
        settings.debug = True

    # Configure logging
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=settings.debug, rich_tracebacks=True)],
    )
    if not settings.debug:
        logging.getLogger("ncclient").setLevel(logging.WARNING)


app.command("discover", help="Discover the operational state of a device")(
    discover.discover_command
)
app.command("catalog", help="Show the schema catalog used for discovery")(catalog.catalog_command)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]ncdiscover[/bold] version {__version__}")
    console.print("NETCONF operational state discovery")


@app.command()
def info() -> None:
    """Show configuration and environment info."""
    settings = get_settings()

    console.print("\n[bold]Configuration:[/bold]")
    console.print(f"  Default family: {settings.default_family}")
    console.print(f"  Debug mode: {settings.debug}")
    console.print(f"  Log level: {settings.log_level}")

    console.print("\n[bold]NETCONF:[/bold]")
    console.print(f"  Port: {settings.port}")
    console.print(f"  Command timeout: {settings.command_timeout}s")
    console.print(f"  Session timeout: {settings.session_timeout}s")
    console.print(f"  Host key verification: {settings.hostkey_verify}")


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
