"""Accumulation of findings into run-level counts."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from seedcheck.models.findings import Finding, Severity


class ReportScope(str, Enum):
    """Which checks a report covers."""

    FILENAMES = "filenames"
    HEADERS = "headers"
    ALL = "all"


SUCCESS_MESSAGES = {
    ReportScope.FILENAMES: "Perfect match. No naming issues found.",
    ReportScope.HEADERS: "Perfect! All CSV headers are correct.",
    ReportScope.ALL: "Perfect! All CSV files match the model.",
}


def count_findings(findings: Iterable[Finding], severity: Severity) -> int:
    """Count findings of a severity, each group at most once."""
    count = 0
    groups: set[str] = set()
    for finding in findings:
        if finding.severity != severity:
            continue
        if finding.group is not None:
            if finding.group in groups:
                continue
            groups.add(finding.group)
        count += 1
    return count


@dataclass(frozen=True)
class ReconciliationReport:
    """Findings of one run, in presentation order.

    Counts are computed over all findings, one per group and severity;
    verbosity only affects which findings ``visible`` returns.
    """

    scope: ReportScope
    findings: tuple[Finding, ...] = ()

    @property
    def error_count(self) -> int:
        return count_findings(self.findings, Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return count_findings(self.findings, Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    def visible(self, verbosity: int) -> list[Finding]:
        """Findings rendered at the given verbosity level."""
        return [f for f in self.findings if f.is_visible(verbosity)]

    def summary_line(self) -> str:
        if self.error_count or self.warning_count:
            return f"Findings: {self.error_count} Errors, {self.warning_count} Warnings."
        return SUCCESS_MESSAGES[self.scope]

    def combine(self, other: "ReconciliationReport") -> "ReconciliationReport":
        """Concatenate two reports into one covering all checks."""
        return ReconciliationReport(scope=ReportScope.ALL, findings=self.findings + other.findings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "scope": self.scope.value,
            "summary": {
                "errors": self.error_count,
                "warnings": self.warning_count,
            },
            "findings": [f.to_dict() for f in self.findings],
        }


@dataclass
class ReportAccumulator:
    """Collects findings for a single run."""

    scope: ReportScope
    findings: list[Finding] = field(default_factory=list)

    def add(self, finding: Finding) -> None:
        self.findings.append(finding)

    def extend(self, findings: Iterable[Finding]) -> None:
        self.findings.extend(findings)

    @property
    def error_count(self) -> int:
        return count_findings(self.findings, Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return count_findings(self.findings, Severity.WARNING)

    def build(self) -> ReconciliationReport:
        return ReconciliationReport(scope=self.scope, findings=tuple(self.findings))
