"""
Catalog inspection command.

Lists the subtrees a discovery run would query for a device family
and release, optionally with the exact filter payloads.
"""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from nc_discover.core.config import get_settings
from nc_discover.core.exceptions import ConfigurationError
from nc_discover.discovery.catalog import EXCLUDED_ROUTER_CHILDREN
from nc_discover.discovery.families import get_family
from nc_discover.discovery.filters import build_filter

console = Console()


def catalog_command(
    device_type: Annotated[
        Optional[str],
        typer.Option("--type", "-type", "-t", help="Device family (default: nokia)"),
    ] = None,
    release: Annotated[
        Optional[int],
        typer.Option("--release", "-r", help="Major OS release (default catalog if omitted)"),
    ] = None,
    show_filters: Annotated[
        bool,
        typer.Option("--filters", "-f", help="Print the filter payload of each subtree"),
    ] = False,
) -> None:
    """
    Show the schema catalog used for discovery.

    Example:
        ncdiscover catalog --release 21 --filters
    """
    try:
        profile = get_family(device_type or get_settings().default_family)
        catalog = profile.catalog_for(release)
    except ConfigurationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    if show_filters:
        for descriptor in catalog:
            console.print(f"[bold]{descriptor.name}[/bold]")
            payload = build_filter(descriptor, profile.state_namespace)
            console.print(payload, markup=False, soft_wrap=True)
        return

    table = Table(title=f"{profile.display_name} catalog {catalog.name}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Subtree", style="cyan")
    table.add_column("Namespace")
    for index, descriptor in enumerate(catalog, start=1):
        table.add_row(str(index), descriptor.name, descriptor.namespace)

    console.print(table)
    console.print(f"{len(catalog)} subtrees")
    console.print(f"[dim]Never queried: router/{', router/'.join(EXCLUDED_ROUTER_CHILDREN)}[/dim]")
