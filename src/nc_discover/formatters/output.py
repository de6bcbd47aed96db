"""
Output formatter for discovery reports.

Provides formatters for discovery reports in various formats
(text, JSON, table).
"""

from __future__ import annotations

import json
import re
import sys
from typing import Any, TextIO

from nc_discover.models.discovery import DiscoveryReport


def compact_element(element: str) -> str:
    """Collapse an element template onto one line."""
    return re.sub(r">\s+<", "><", element.strip())


class ReportFormatter:
    """
    Formatter for discovery report output.

    Attributes:
        output: Output stream (defaults to stdout)
        use_json: Output in JSON format
        debug: Enable debug output
    """

    def __init__(
        self,
        output: TextIO | None = None,
        use_json: bool = False,
        debug: bool = False,
    ):
        self.output = output or sys.stdout
        self.use_json = use_json
        self.debug = debug

    def _write(self, text: str) -> None:
        """Write text to output stream."""
        self.output.write(text)
        if text and not text.endswith("\n"):
            self.output.write("\n")
        self.output.flush()

    def _debug_print(self, message: str) -> None:
        """Print debug message to stderr."""
        if self.debug:
            print(f"DEBUG [ReportFormatter]: {message}", file=sys.stderr)

    # =========================================================================
    # Text Output
    # =========================================================================

    def format_report(self, report: DiscoveryReport) -> str:
        """
        Format a report as text.

        One header line per document (namespace and element), followed
        by its content indented, then a final error count line.

        Args:
            report: Discovery report

        Returns:
            Formatted report string
        """
        lines = []
        for doc in report.documents:
            lines.append(f"{doc.namespace} {compact_element(doc.element)}")
            if doc.content is None:
                lines.append("    (empty)")
            else:
                lines.extend(f"    {line}" for line in doc.content.splitlines())
        lines.append(f"{report.hostname} errorCount = {report.error_count}")
        return "\n".join(lines)

    # =========================================================================
    # JSON Output
    # =========================================================================

    def report_to_dict(self, report: DiscoveryReport) -> dict[str, Any]:
        """Convert a report to a JSON-serializable dictionary."""
        data = report.model_dump(mode="json")
        data["error_count"] = report.error_count
        return data

    def format_report_json(self, report: DiscoveryReport) -> str:
        """
        Format a report as JSON.

        Args:
            report: Discovery report

        Returns:
            JSON string
        """
        return json.dumps(self.report_to_dict(report), indent=2)

    def write_report(self, report: DiscoveryReport) -> None:
        """
        Write report output to stream.

        Args:
            report: Discovery report
        """
        self._debug_print(
            f"Writing {len(report.documents)} documents, {report.error_count} errors"
        )

        if self.use_json:
            output_str = self.format_report_json(report)
        else:
            output_str = self.format_report(report)

        self._write(output_str)

    # =========================================================================
    # Table Output (for CLI)
    # =========================================================================

    def format_report_table(self, report: DiscoveryReport) -> str:
        """
        Format a report summary as ASCII table for CLI display.

        Lists each retrieved subtree with its content size, followed
        by each counted error.

        Args:
            report: Discovery report

        Returns:
            ASCII table string
        """
        lines = []

        if report.documents:
            name_width = max(max(len(d.name) for d in report.documents), 7)  # "Subtree"
            header = f"{'Subtree':<{name_width}}  {'Size':>9}  Namespace"
            lines.append(header)
            lines.append("-" * len(header))
            for doc in report.documents:
                size = "empty" if doc.content is None else str(len(doc.content))
                lines.append(f"{doc.name:<{name_width}}  {size:>9}  {doc.namespace}")
        else:
            lines.append("No documents retrieved.")

        if report.errors:
            lines.append("")
            kind_width = max(len(e.kind.value) for e in report.errors)
            header = f"{'Error':<{kind_width}}  {'Subtree':<16}  Message"
            lines.append(header)
            lines.append("-" * len(header))
            for err in report.errors:
                lines.append(f"{err.kind.value:<{kind_width}}  {err.element or '-':<16}  {err.message}")

        lines.append("")
        lines.append(
            f"{report.hostname}: {len(report.documents)} documents, "
            f"errorCount = {report.error_count}"
        )
        return "\n".join(lines)


# =============================================================================
# Convenience Functions
# =============================================================================


def print_report(report: DiscoveryReport, use_json: bool = False) -> None:
    """
    Print a discovery report to stdout.

    Args:
        report: Discovery report
        use_json: Output in JSON format
    """
    formatter = ReportFormatter(use_json=use_json)
    formatter.write_report(report)


def print_report_table(report: DiscoveryReport) -> None:
    """
    Print a discovery report summary as ASCII table.

    Args:
        report: Discovery report
    """
    formatter = ReportFormatter()
    print(formatter.format_report_table(report))
