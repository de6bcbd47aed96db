"""
State discovery command.

Connects to a NETCONF device, negotiates its OS version and retrieves
its operational state one catalog subtree at a time.
"""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from nc_discover.core.config import get_settings
from nc_discover.core.exceptions import NcDiscoverError
from nc_discover.discovery.orchestrator import Discoverer
from nc_discover.formatters.output import print_report, print_report_table

console = Console(stderr=True)


def discover_command(
    device: Annotated[
        str,
        typer.Option("--device", "-device", help="Device hostname or IP address"),
    ],
    username: Annotated[
        str,
        typer.Option(
            "--username", "-username", "-u", envvar="NETCONF_USER", help="NETCONF username"
        ),
    ],
    password: Annotated[
        str,
        typer.Option(
            "--password", "-password", "-p", envvar="NETCONF_PASS", help="NETCONF password"
        ),
    ],
    device_type: Annotated[
        Optional[str],
        typer.Option("--type", "-type", "-t", help="Device family (default: nokia)"),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option("--port", help="NETCONF port"),
    ] = None,
    command_timeout: Annotated[
        Optional[int],
        typer.Option("--command-timeout", help="Per-RPC timeout in seconds"),
    ] = None,
    session_timeout: Annotated[
        Optional[int],
        typer.Option("--session-timeout", help="Session lifetime in seconds"),
    ] = None,
    output_json: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output in JSON format"),
    ] = False,
    output_table: Annotated[
        bool,
        typer.Option("--table", help="Output a summary table"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable NETCONF transport debug output"),
    ] = False,
) -> None:
    """
    Discover the operational state of a NETCONF device.

    Example:
        ncdiscover discover -device router1.example.com -username admin -password secret
    """
    settings = get_settings()
    debug = debug or settings.debug
    family = device_type or settings.default_family

    try:
        credentials = settings.credentials(
            username=username,
            password=password,
            port=port,
            command_timeout=command_timeout,
            session_timeout=session_timeout,
        )
        discoverer = Discoverer(family=family, debug=debug)
    except (NcDiscoverError, ValidationError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    report = discoverer.run(device, credentials)

    if output_table:
        print_report_table(report)
    else:
        print_report(report, use_json=output_json)

    if not report.connected:
        raise typer.Exit(1)
