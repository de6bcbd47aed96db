"""
Pydantic models for nc-discover.

Contains data models for:
- Schema: Catalogs of subtree descriptors
- Discovery: Retrieved documents, errors and run reports
"""

from __future__ import annotations

from nc_discover.models.discovery import (
    CompatibilityResult,
    DiscoveryError,
    DiscoveryReport,
    ErrorKind,
    MismatchKind,
    ResultDocument,
    RpcErrorDetail,
)
from nc_discover.models.schema import Catalog, SchemaDescriptor

__all__ = [
    "Catalog",
    "SchemaDescriptor",
    "CompatibilityResult",
    "DiscoveryError",
    "DiscoveryReport",
    "ErrorKind",
    "MismatchKind",
    "ResultDocument",
    "RpcErrorDetail",
]
