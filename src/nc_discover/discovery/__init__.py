"""
State discovery for NETCONF devices.

Negotiates the device's OS version from its capabilities, then
retrieves its operational state one catalog subtree at a time.
"""

from __future__ import annotations

from nc_discover.discovery.catalog import CATALOGS, SROS_2X, get_catalog
from nc_discover.discovery.extractor import extract
from nc_discover.discovery.families import DeviceFamily, FamilyProfile, get_family
from nc_discover.discovery.filters import build_filter
from nc_discover.discovery.negotiator import check_compatibility, select_version
from nc_discover.discovery.orchestrator import Discoverer, discover

__all__ = [
    "CATALOGS",
    "SROS_2X",
    "get_catalog",
    "extract",
    "DeviceFamily",
    "FamilyProfile",
    "get_family",
    "build_filter",
    "check_compatibility",
    "select_version",
    "Discoverer",
    "discover",
]
