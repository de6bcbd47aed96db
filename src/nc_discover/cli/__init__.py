"""
CLI module for nc-discover.

Provides the `ncdiscover` command-line interface.
"""

from __future__ import annotations

from nc_discover.cli.main import app, cli

__all__ = ["app", "cli"]
