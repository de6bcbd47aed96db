"""
Core module for nc-discover.

Contains configuration management, exceptions, and base functionality.
"""

from __future__ import annotations

from nc_discover.core.config import (
    DiscoverySettings,
    NetconfCredentials,
    get_settings,
    load_settings,
)
from nc_discover.core.exceptions import (
    ConfigurationError,
    ExtractionError,
    NcDiscoverError,
    NetconfConnectionError,
    NetconfError,
    RetrievalError,
)

__all__ = [
    # Settings
    "get_settings",
    "load_settings",
    "DiscoverySettings",
    "NetconfCredentials",
    # Exceptions
    "NcDiscoverError",
    "ConfigurationError",
    "NetconfError",
    "NetconfConnectionError",
    "RetrievalError",
    "ExtractionError",
]
