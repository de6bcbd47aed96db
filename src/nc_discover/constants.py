"""
Constants for nc-discover.

NETCONF namespaces, capability identifiers and timeouts shared
across the discovery modules.
"""

from __future__ import annotations

from typing import Final


class Namespaces:
    """XML namespace URIs."""

    NETCONF_BASE: Final = "urn:ietf:params:xml:ns:netconf:base:1.0"
    SROS_STATE: Final = "urn:nokia.com:sros:ns:yang:sr:state"


class SrosCapabilities:
    """Nokia SR OS capability identifiers advertised in the NETCONF hello."""

    # Substring shared by every major-release capability
    OS_VERSION: Final = "urn:nokia.com:sros:ns:yang:sr:major-release-"
    OS_VERSION_21: Final = "urn:nokia.com:sros:ns:yang:sr:major-release-21"
    OS_VERSION_22: Final = "urn:nokia.com:sros:ns:yang:sr:major-release-22"

    CONF_2019_12_03: Final = (
        "urn:nokia.com:sros:ns:yang:sr:conf?module=nokia-conf&revision=2019-12-03"
    )
    STATE_2019_12_03: Final = (
        "urn:nokia.com:sros:ns:yang:sr:state?module=nokia-state&revision=2019-12-03"
    )

    SUPPORTED_MAJOR_RELEASES: Final = (21, 22)


class Timeouts:
    """Default timeouts in seconds."""

    # Large transponder and router subtrees take minutes to return
    COMMAND: Final = 5 * 60
    SESSION: Final = 60 * 60
    CONNECT_MAX: Final = 24 * 60 * 60


# Path of the operational state subtree inside a <get> reply
STATE_PATH: Final = "/rpc-reply/data/state"

# Indentation used when serializing extracted documents
DOCUMENT_INDENT: Final = "    "

DEFAULT_NETCONF_PORT: Final = 830
