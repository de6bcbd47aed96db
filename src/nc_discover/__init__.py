"""
nc-discover: NETCONF operational state discovery.

Retrieves the operational state tree of a NETCONF device as an ordered
series of subtree queries:
- Capability-based OS version negotiation
- Catalog-driven chunked <get> retrieval
- Per-subtree failure isolation
- Reply extraction and rendering
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
