"""
Tests for capability-based version negotiation.
"""

from __future__ import annotations

from nc_discover.constants import SrosCapabilities
from nc_discover.discovery.families import NOKIA_SROS
from nc_discover.discovery.negotiator import (
    check_compatibility,
    negotiate,
    parse_major,
    select_version,
)
from nc_discover.models.discovery import MismatchKind

RELEASE_20 = "urn:nokia.com:sros:ns:yang:sr:major-release-20"


class TestSelectVersion:
    """Tests for select_version."""

    def test_returns_matching_capability(self, supported_capabilities):
        """Test the release capability is selected."""
        assert select_version(supported_capabilities) == SrosCapabilities.OS_VERSION_21

    def test_none_when_absent(self):
        """Test None when no capability carries the token."""
        assert select_version(["urn:ietf:params:netconf:base:1.1"]) is None

    def test_empty_capabilities(self):
        """Test None for an empty capability set."""
        assert select_version([]) is None

    def test_first_match_in_iteration_order(self):
        """Test the first match wins, not the lexically smallest."""
        caps = [SrosCapabilities.OS_VERSION_22, SrosCapabilities.OS_VERSION_21]
        assert select_version(caps) == SrosCapabilities.OS_VERSION_22
        assert select_version(list(reversed(caps))) == SrosCapabilities.OS_VERSION_21

    def test_substring_match(self):
        """Test capabilities with query parameters still match."""
        cap = SrosCapabilities.OS_VERSION_21 + "?module=nokia-sros-yang-extensions"
        assert select_version(["urn:ietf:params:netconf:base:1.0", cap]) == cap

    def test_custom_token(self):
        """Test a custom version token."""
        assert select_version(["a", "vendor:os-7", "vendor:os-8"], token="vendor:os-") == "vendor:os-7"


class TestParseMajor:
    """Tests for parse_major."""

    def test_release_21(self):
        """Test parsing release 21."""
        assert parse_major(SrosCapabilities.OS_VERSION_21) == 21

    def test_none(self):
        """Test None input."""
        assert parse_major(None) is None

    def test_no_digits(self):
        """Test a token without a release number."""
        assert parse_major(SrosCapabilities.OS_VERSION) is None


class TestCheckCompatibility:
    """Tests for check_compatibility."""

    def test_supported_device(self, supported_capabilities):
        """Test release 21 with both revisions is supported without mismatches."""
        version = select_version(supported_capabilities)
        result = check_compatibility(version, supported_capabilities)

        assert result.supported
        assert result.major == 21
        assert result.mismatches == ()

    def test_release_22_supported(self):
        """Test release 22 is in the allow-list."""
        caps = [
            SrosCapabilities.OS_VERSION_22,
            SrosCapabilities.CONF_2019_12_03,
            SrosCapabilities.STATE_2019_12_03,
        ]
        assert check_compatibility(SrosCapabilities.OS_VERSION_22, caps).supported

    def test_missing_state_revision(self):
        """Test a missing state revision reports one mismatch."""
        caps = [SrosCapabilities.OS_VERSION_21, SrosCapabilities.CONF_2019_12_03]
        result = check_compatibility(SrosCapabilities.OS_VERSION_21, caps)

        assert result.supported
        assert result.mismatches == (MismatchKind.STATE_SCHEMA_REVISION,)

    def test_missing_both_revisions_in_order(self):
        """Test config mismatch is reported before state mismatch."""
        result = check_compatibility(
            SrosCapabilities.OS_VERSION_21, [SrosCapabilities.OS_VERSION_21]
        )

        assert result.mismatches == (
            MismatchKind.CONFIG_SCHEMA_REVISION,
            MismatchKind.STATE_SCHEMA_REVISION,
        )

    def test_unsupported_version_still_checks_revisions(self):
        """Test revisions are checked even when the version is unsupported."""
        result = check_compatibility(RELEASE_20, [RELEASE_20, SrosCapabilities.CONF_2019_12_03])

        assert not result.supported
        assert result.major == 20
        assert result.mismatches == (MismatchKind.STATE_SCHEMA_REVISION,)

    def test_unknown_version(self, supported_capabilities):
        """Test no version is unsupported."""
        result = check_compatibility(None, supported_capabilities)

        assert not result.supported
        assert result.major is None
        assert result.mismatches == ()

    def test_revision_must_match_exactly(self):
        """Test a different revision does not satisfy the requirement."""
        other = SrosCapabilities.STATE_2019_12_03.replace("2019-12-03", "2021-03-01")
        caps = [SrosCapabilities.OS_VERSION_21, SrosCapabilities.CONF_2019_12_03, other]
        result = check_compatibility(SrosCapabilities.OS_VERSION_21, caps)

        assert result.mismatches == (MismatchKind.STATE_SCHEMA_REVISION,)


class TestNegotiate:
    """Tests for negotiate with a family profile."""

    def test_negotiate_nokia(self, supported_capabilities):
        """Test negotiating with the Nokia profile."""
        result = negotiate(supported_capabilities, NOKIA_SROS)

        assert result.version == SrosCapabilities.OS_VERSION_21
        assert result.supported
        assert NOKIA_SROS.catalog_for(result.major).name == "sros-2x"
