"""Plain text rendering of reconciliation reports."""

from seedcheck.models.findings import Finding, Severity
from seedcheck.reporting.aggregator import ReconciliationReport

SEPARATOR = "-" * 51

_LABELS = {
    Severity.ERROR: "ERROR",
    Severity.WARNING: "WARNING",
    Severity.INFO: "OK",
}


def render_finding(finding: Finding) -> list[str]:
    """Render one finding as a block of lines."""
    label = _LABELS[finding.severity]
    title = finding.kind.value.replace("_", " ").upper()
    subject = f"Entity [{finding.entity}]" if finding.entity else f"File [{finding.file_name}]"
    lines = [f"{label} {title}: {subject}"]
    if finding.entity and finding.file_name:
        lines.append(f"    File: {finding.file_name}")
    lines.append(f"    {finding.message}")
    if finding.suggestion:
        lines.append(f"    -> {finding.suggestion}")
    return lines


def render_report(report: ReconciliationReport, verbosity: int = 1) -> str:
    """Render the findings visible at a verbosity level plus the summary line."""
    lines: list[str] = []
    for finding in report.visible(verbosity):
        lines.extend(render_finding(finding))
        lines.append("")
    lines.append(SEPARATOR)
    lines.append(report.summary_line())
    return "\n".join(lines)
