"""
Schema catalogs for state discovery.

The Nokia SR OS <state> tree is too large for a single <get>, so it is
retrieved one top-level subtree at a time in the order listed here.
"""

from __future__ import annotations

from nc_discover.core.exceptions import ConfigurationError
from nc_discover.models.schema import Catalog, SchemaDescriptor

SROS_STATE_PREFIX = "urn:nokia.com:sros:ns:yang:sr:state"

# <router> children queried as one composite subtree
ROUTER_CHILDREN: tuple[str, ...] = (
    "router-name",
    "vrtr-id",
    "oper-router-id",
    "gtp",
    "aggregates",
    "wlan-gw-tunnel",
    "sfm-overload",
    "interface",
    "ipv4",
    "ipv6",
    "tunnel-interface",
    "pcp",
    "tunnel-table",
    "network-domains",
    "dhcp6",
    "bier",
    "dhcp-server",
    "igmp",
    "isis",
    "l2tp",
    "label-fib",
    "ldp",
    "mld",
    "mpls",
    "msdp",
    "nat",
    "origin-validation",
    "ospf",
    "ospf3",
    "p2mp-sr-tree",
    "pcep",
    "pim",
    "radius",
    "rib-api",
    "rip",
    "ripng",
    "route-fib",
    "rsvp",
    "segment-routing",
    "static-routes",
    "tunnel-fib",
    "twamp-light",
    "wpp",
)

# Too large for the device to return within the command timeout.
# Never queried.
EXCLUDED_ROUTER_CHILDREN: tuple[str, ...] = ("route-table", "bgp")

_SROS_2X_SUBTREES: tuple[str, ...] = (
    "aaa",
    "application-assurance",
    "aps",
    "bfd",
    "call-trace",
    "card",
    "cflowd",
    "chassis",
    "cpm",
    "esa",
    "eth-cfm",
    "eth-ring",
    "filter",
    "fwd-path-ext",
    "group-encryption",
    "ipsec",
    "isa",
    "lag",
    "log",
    "macsec",
    "mcac",
    "mirror",
    "multicast-management",
    "multilink-bundle",
    "mvpn-extranet",
    "oam-pm",
    "openflow",
    "policy-options",
    "port",
    "port-xc",
    "pw-port",
    "python",
    "qos",
    "redundancy",
    "router",
    "satellite",
    "service",
    "sfm",
    "subscriber-mgmt",
    "system",
    "test-oam",
    "users",
    "vrrp",
)


def composite_element(parent: str, children: tuple[str, ...]) -> str:
    """
    Build an element template selecting only the named children of parent.

    Args:
        parent: Container element name
        children: Child element names to include

    Returns:
        Indented XML fragment, e.g. '<router><router-name/>...</router>'
    """
    lines = [f"\n  <{parent}>"]
    lines.extend(f"    <{child}/>" for child in children)
    lines.append(f"  </{parent}>\n")
    return "\n".join(lines)


def _sros_descriptor(subtree: str) -> SchemaDescriptor:
    if subtree == "router":
        element = composite_element("router", ROUTER_CHILDREN)
    else:
        element = f"<{subtree} />"
    return SchemaDescriptor(element=element, namespace=f"{SROS_STATE_PREFIX}:{subtree}")


SROS_2X = Catalog(
    name="sros-2x",
    description="Nokia SR OS 2x <state> tree, nokia-state revision 2019-12-03",
    descriptors=tuple(_sros_descriptor(s) for s in _SROS_2X_SUBTREES),
)

CATALOGS: dict[str, Catalog] = {
    SROS_2X.name: SROS_2X,
}


def get_catalog(name: str) -> Catalog:
    """
    Look up a catalog by name.

    Raises:
        ConfigurationError: If no catalog has that name
    """
    try:
        return CATALOGS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown catalog: {name}", context={"available": sorted(CATALOGS)}
        ) from None
