"""
Output formatters for nc-discover.

Provides formatting for discovery reports
in various formats (text, JSON, table).
"""

from __future__ import annotations

from nc_discover.formatters.output import (
    ReportFormatter,
    print_report,
    print_report_table,
)

__all__ = [
    "ReportFormatter",
    "print_report",
    "print_report_table",
]
