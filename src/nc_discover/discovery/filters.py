"""
Subtree filter construction for <get> requests.
"""

from __future__ import annotations

from nc_discover.constants import Namespaces
from nc_discover.models.schema import SchemaDescriptor

# NETCONF subtree filter envelope
FILTER_TEMPLATE = '<filter type="subtree">{}</filter>'

# Operational state wrapper
STATE_TEMPLATE = '<state xmlns="{namespace}">{element}</state>'


def build_filter(
    descriptor: SchemaDescriptor,
    state_namespace: str = Namespaces.SROS_STATE,
) -> str:
    """
    Build the <filter> payload retrieving one descriptor's subtree.

    Pure string composition: the same descriptor always yields the
    same payload.

    Args:
        descriptor: Catalog entry to retrieve
        state_namespace: Namespace of the <state> root element

    Returns:
        <filter type="subtree"><state xmlns="...">element</state></filter>
    """
    state = STATE_TEMPLATE.format(namespace=state_namespace, element=descriptor.element)
    return FILTER_TEMPLATE.format(state)
