"""Report aggregation and rendering."""

from seedcheck.reporting.aggregator import (
    ReconciliationReport,
    ReportAccumulator,
    ReportScope,
    count_findings,
)
from seedcheck.reporting.renderer import render_finding, render_report

__all__ = [
    "ReconciliationReport",
    "ReportAccumulator",
    "ReportScope",
    "count_findings",
    "render_finding",
    "render_report",
]
