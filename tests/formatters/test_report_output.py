"""
Tests for discovery report formatters.
"""

from __future__ import annotations

import json
from io import StringIO

import pytest

from nc_discover.discovery.catalog import SROS_2X
from nc_discover.formatters.output import ReportFormatter, compact_element
from nc_discover.models.discovery import (
    DiscoveryError,
    DiscoveryReport,
    ErrorKind,
    ResultDocument,
    RpcErrorDetail,
)

AAA_NS = "urn:nokia.com:sros:ns:yang:sr:state:aaa"
CARD_NS = "urn:nokia.com:sros:ns:yang:sr:state:card"


@pytest.fixture
def report() -> DiscoveryReport:
    """Report with one populated document, one empty document and one error."""
    return DiscoveryReport(
        hostname="router1",
        family="nokia",
        version="urn:nokia.com:sros:ns:yang:sr:major-release-21",
        catalog="sros-2x",
        documents=(
            ResultDocument(
                element="<aaa />",
                namespace=AAA_NS,
                content="<state>\n    <aaa/>\n</state>",
            ),
            ResultDocument(element="<card />", namespace=CARD_NS),
        ),
        errors=(
            DiscoveryError(
                kind=ErrorKind.RETRIEVAL,
                message="rpc-error retrieving bfd",
                element="bfd",
                details=(RpcErrorDetail(message="Too big", error_kind="operation-failed"),),
            ),
        ),
    )


class TestCompactElement:
    """Tests for compact_element."""

    def test_simple(self):
        """Test simple elements are unchanged."""
        assert compact_element("<aaa />") == "<aaa />"

    def test_composite(self):
        """Test composite elements collapse onto one line."""
        router = next(d for d in SROS_2X if d.name == "router")
        compact = compact_element(router.element)

        assert "\n" not in compact
        assert compact.startswith("<router><")
        assert compact.endswith("</router>")


class TestFormatReport:
    """Tests for text output."""

    def test_text_layout(self, report):
        """Test header, indented content and error count lines."""
        lines = ReportFormatter().format_report(report).splitlines()

        assert lines[0] == f"{AAA_NS} <aaa />"
        assert lines[1] == "    <state>"
        assert lines[2] == "        <aaa/>"
        assert lines[3] == "    </state>"
        assert lines[4] == f"{CARD_NS} <card />"
        assert lines[5] == "    (empty)"
        assert lines[-1] == "router1 errorCount = 1"

    def test_no_documents(self):
        """Test a report without documents still prints the error count."""
        report = DiscoveryReport(hostname="router1", family="nokia")
        assert ReportFormatter().format_report(report) == "router1 errorCount = 0"


class TestFormatReportJson:
    """Tests for JSON output."""

    def test_json(self, report):
        """Test JSON output carries documents, errors and the count."""
        data = json.loads(ReportFormatter().format_report_json(report))

        assert data["hostname"] == "router1"
        assert data["catalog"] == "sros-2x"
        assert data["error_count"] == 1
        assert len(data["documents"]) == 2
        assert data["documents"][1]["content"] is None
        assert data["errors"][0]["kind"] == "retrieval"
        assert data["errors"][0]["details"][0]["error_kind"] == "operation-failed"


class TestWriteReport:
    """Tests for writing to a stream."""

    def test_write_text(self, report):
        """Test text is written with a trailing newline."""
        output = StringIO()
        ReportFormatter(output=output).write_report(report)

        assert output.getvalue().endswith("router1 errorCount = 1\n")

    def test_write_json(self, report):
        """Test JSON mode writes parseable JSON."""
        output = StringIO()
        ReportFormatter(output=output, use_json=True).write_report(report)

        assert json.loads(output.getvalue())["error_count"] == 1

    def test_debug_to_stderr(self, report, capsys):
        """Test debug messages go to stderr."""
        output = StringIO()
        ReportFormatter(output=output, debug=True).write_report(report)

        captured = capsys.readouterr()
        assert "DEBUG [ReportFormatter]" in captured.err
        assert captured.out == ""


class TestFormatReportTable:
    """Tests for table output."""

    def test_table(self, report):
        """Test documents and errors are tabulated."""
        table = ReportFormatter().format_report_table(report)

        assert "Subtree" in table
        assert "aaa" in table
        assert "empty" in table
        assert "retrieval" in table
        assert "rpc-error retrieving bfd" in table
        assert table.splitlines()[-1] == "router1: 2 documents, errorCount = 1"

    def test_table_no_documents(self):
        """Test a connection failure report."""
        report = DiscoveryReport(
            hostname="router1",
            family="nokia",
            errors=(DiscoveryError(kind=ErrorKind.CONNECTION, message="refused"),),
        )
        table = ReportFormatter().format_report_table(report)

        assert "No documents retrieved." in table
        assert "connection" in table
