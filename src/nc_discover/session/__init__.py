"""
Management sessions for nc-discover.

Provides the session interface driven by the discovery orchestrator
and its NETCONF implementation.
"""

from __future__ import annotations

from nc_discover.session.base import BaseSession, RawResponse
from nc_discover.session.netconf import NetconfSession

__all__ = ["BaseSession", "NetconfSession", "RawResponse"]
