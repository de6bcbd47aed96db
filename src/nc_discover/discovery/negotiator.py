"""
Capability-based version negotiation.

We are not parsing the device's YANG models, only relying on the root
structure of its <state> tree, so compatibility is judged from the
capabilities advertised in the NETCONF <hello> exchange.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from nc_discover.constants import SrosCapabilities
from nc_discover.models.discovery import CompatibilityResult, MismatchKind

if TYPE_CHECKING:
    from nc_discover.discovery.families import FamilyProfile

logger = logging.getLogger(__name__)

# Required capabilities checked on every device, in check order
SROS_REQUIRED_CAPABILITIES: tuple[tuple[MismatchKind, str], ...] = (
    (MismatchKind.CONFIG_SCHEMA_REVISION, SrosCapabilities.CONF_2019_12_03),
    (MismatchKind.STATE_SCHEMA_REVISION, SrosCapabilities.STATE_2019_12_03),
)


def select_version(
    capabilities: Iterable[str],
    token: str = SrosCapabilities.OS_VERSION,
) -> str | None:
    """
    Return the first capability containing the version token.

    Capabilities are scanned in the order the session reported them,
    so a device advertising several major releases yields whichever
    it listed first.

    Args:
        capabilities: Capabilities from the NETCONF hello
        token: Version prefix to look for

    Returns:
        Matching capability, or None if none contains the token
    """
    return next((cap for cap in capabilities if token in cap), None)


def parse_major(version: str | None, token: str = SrosCapabilities.OS_VERSION) -> int | None:
    """
    Parse the major release number following the token.

    >>> parse_major("urn:nokia.com:sros:ns:yang:sr:major-release-21")
    21
    """
    if not version:
        return None
    match = re.search(re.escape(token) + r"(\d+)", version)
    return int(match.group(1)) if match else None


def check_compatibility(
    version: str | None,
    capabilities: Sequence[str],
    token: str = SrosCapabilities.OS_VERSION,
    supported_majors: Iterable[int] = SrosCapabilities.SUPPORTED_MAJOR_RELEASES,
    required: Iterable[tuple[MismatchKind, str]] = SROS_REQUIRED_CAPABILITIES,
) -> CompatibilityResult:
    """
    Check a device's version and schema revisions.

    The schema revision checks run whether or not the version is
    supported; each required capability that is absent adds one
    mismatch.

    Args:
        version: Capability returned by select_version, or None
        capabilities: Capabilities from the NETCONF hello
        token: Version prefix used to parse the major release
        supported_majors: Allow-list of major releases
        required: (mismatch kind, capability) pairs that must be present

    Returns:
        CompatibilityResult
    """
    major = parse_major(version, token)
    supported = major is not None and major in set(supported_majors)

    advertised = set(capabilities)
    mismatches = tuple(kind for kind, capability in required if capability not in advertised)

    return CompatibilityResult(
        version=version,
        major=major,
        supported=supported,
        mismatches=mismatches,
    )


def negotiate(capabilities: Sequence[str], profile: FamilyProfile) -> CompatibilityResult:
    """Select the version and check compatibility using a family's rules."""
    version = select_version(capabilities, profile.version_token)
    return check_compatibility(
        version,
        capabilities,
        token=profile.version_token,
        supported_majors=profile.supported_majors,
        required=profile.required_capabilities,
    )
