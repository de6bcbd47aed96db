"""
Device family profiles.

Each supported device family is described by one FamilyProfile record
holding its negotiation rules and catalogs. Profiles are selected by
DeviceFamily tag from the caller.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from nc_discover.constants import Namespaces, SrosCapabilities
from nc_discover.core.exceptions import ConfigurationError
from nc_discover.discovery.catalog import SROS_2X, get_catalog
from nc_discover.discovery.negotiator import SROS_REQUIRED_CAPABILITIES
from nc_discover.models.discovery import MismatchKind
from nc_discover.models.schema import Catalog


class DeviceFamily(str, Enum):
    """Supported device families."""

    NOKIA = "nokia"


class FamilyProfile(BaseModel):
    """
    Negotiation rules and catalogs for one device family.

    Attributes:
        family: Family tag
        display_name: Human-readable family name
        version_token: Substring identifying the OS version capability
        supported_majors: Major releases known to match the catalogs
        required_capabilities: Schema revisions the catalogs were written against
        state_namespace: Namespace of the <state> root used in filters
        device_params: ncclient device handler parameters
        catalogs: Catalog name per major release
        default_catalog: Catalog used for unknown or unsupported releases
    """

    model_config = ConfigDict(frozen=True)

    family: DeviceFamily
    display_name: str
    version_token: str
    supported_majors: tuple[int, ...]
    required_capabilities: tuple[tuple[MismatchKind, str], ...] = ()
    state_namespace: str
    device_params: dict[str, str] = Field(default_factory=lambda: {"name": "default"})
    catalogs: dict[int, str] = Field(default_factory=dict)
    default_catalog: str

    def catalog_for(self, major: int | None) -> Catalog:
        """Return the catalog for a major release, or the default catalog."""
        if major is None:
            return get_catalog(self.default_catalog)
        return get_catalog(self.catalogs.get(major, self.default_catalog))


NOKIA_SROS = FamilyProfile(
    family=DeviceFamily.NOKIA,
    display_name="Nokia SR OS",
    version_token=SrosCapabilities.OS_VERSION,
    supported_majors=SrosCapabilities.SUPPORTED_MAJOR_RELEASES,
    required_capabilities=SROS_REQUIRED_CAPABILITIES,
    state_namespace=Namespaces.SROS_STATE,
    # SR OS 20, 21 and 22 differ slightly in root elements; 21 and 22 share one
    catalogs={21: SROS_2X.name, 22: SROS_2X.name},
    default_catalog=SROS_2X.name,
)

FAMILIES: dict[DeviceFamily, FamilyProfile] = {
    DeviceFamily.NOKIA: NOKIA_SROS,
}


def get_family(tag: DeviceFamily | str) -> FamilyProfile:
    """
    Look up a family profile by tag.

    Raises:
        ConfigurationError: If the tag names no known family
    """
    try:
        family = tag if isinstance(tag, DeviceFamily) else DeviceFamily(tag.strip().lower())
        return FAMILIES[family]
    except (ValueError, KeyError):
        raise ConfigurationError(
            f"Unknown device family: {tag}",
            context={"available": [f.value for f in DeviceFamily]},
        ) from None
