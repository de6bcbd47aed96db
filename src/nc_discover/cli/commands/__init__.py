"""
CLI command modules for nc-discover.
"""

from __future__ import annotations

from nc_discover.cli.commands import catalog, discover

__all__ = [
    "catalog",
    "discover",
]
