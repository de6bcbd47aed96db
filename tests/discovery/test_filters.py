"""
Tests for subtree filter construction.
"""

from __future__ import annotations

from lxml import etree

from nc_discover.constants import Namespaces
from nc_discover.discovery.catalog import SROS_2X
from nc_discover.discovery.filters import build_filter
from nc_discover.models.schema import SchemaDescriptor

AAA = SchemaDescriptor(element="<aaa />", namespace="urn:nokia.com:sros:ns:yang:sr:state:aaa")


class TestBuildFilter:
    """Tests for build_filter."""

    def test_payload(self):
        """Test the exact payload for a simple descriptor."""
        assert build_filter(AAA) == (
            '<filter type="subtree">'
            '<state xmlns="urn:nokia.com:sros:ns:yang:sr:state"><aaa /></state>'
            "</filter>"
        )

    def test_deterministic(self):
        """Test identical descriptors give byte-identical payloads."""
        copy = SchemaDescriptor(element=AAA.element, namespace=AAA.namespace)
        first = build_filter(AAA)
        build_filter(SROS_2X.descriptors[-1])
        assert build_filter(copy) == first
        assert build_filter(AAA) == first

    def test_custom_state_namespace(self):
        """Test the state wrapper namespace can be overridden."""
        payload = build_filter(AAA, state_namespace="urn:example:state")
        assert '<state xmlns="urn:example:state">' in payload

    def test_well_formed(self):
        """Test every catalog filter parses as a subtree filter."""
        for descriptor in SROS_2X:
            root = etree.fromstring(build_filter(descriptor).encode())
            assert root.tag == "filter"
            assert root.get("type") == "subtree"
            state = root[0]
            assert state.tag == f"{{{Namespaces.SROS_STATE}}}state"
            assert etree.QName(state[0]).localname == descriptor.name

    def test_router_filter_children(self):
        """Test the router filter selects children and skips excluded ones."""
        router = next(d for d in SROS_2X if d.name == "router")
        root = etree.fromstring(build_filter(router).encode())
        children = [etree.QName(c).localname for c in root[0][0]]

        assert "interface" in children
        assert "route-table" not in children
        assert "bgp" not in children
