"""Comparison of expected columns against a data file's header row."""

from typing import Iterable, Optional, Sequence

from seedcheck.models.entity import EntityDescriptor, FieldKind
from seedcheck.models.findings import (
    ExpectedColumn,
    Finding,
    FindingKind,
    HeaderFinding,
    Severity,
)


def reconcile_headers(
    entity: EntityDescriptor,
    expected: Sequence[ExpectedColumn],
    headers: Sequence[str],
    managed_names: Iterable[str],
    file_name: str = "",
) -> HeaderFinding:
    """Partition header discrepancies into missing key, missing non-key and extra.

    Comparison ignores case and reported column names are lowercased. Missing
    foreign key columns are always non-key, whatever the target key status.
    A header column is not extra when it is a managed field, names a scalar
    field of the entity in any casing, or has the form ``{base}_{suffix}``
    with ``base`` a to-one association or to-one composition.

    Args:
        entity: Entity the file belongs to
        expected: Columns derived for the entity
        headers: Header row, already trimmed and unquoted
        managed_names: Managed field names, tolerated when present
        file_name: Data file name, carried into the result

    Returns:
        HeaderFinding for the (entity, file) pair
    """
    actual = [h.lower() for h in headers]
    actual_set = set(actual)
    managed = {name.lower() for name in managed_names}
    expected_names = {column.name.lower() for column in expected}

    result = HeaderFinding(entity=entity.name, file_name=file_name)

    for column in expected:
        name = column.name.lower()
        if name in actual_set:
            continue
        if column.is_key_column and not column.is_foreign_key:
            result.missing_key_columns.append(name)
        else:
            result.missing_non_key_columns.append(name)

    seen: set[str] = set()
    for header in actual:
        if header in seen:
            continue
        seen.add(header)
        if header in managed or header in expected_names:
            continue
        if _is_scalar_field(entity, header) or _is_foreign_key_reference(entity, header):
            continue
        result.extra_columns.append(header)

    return result


def _is_scalar_field(entity: EntityDescriptor, header: str) -> bool:
    field = entity.field_ignoring_case(header)
    return field is not None and field.kind == FieldKind.SCALAR


def _is_foreign_key_reference(entity: EntityDescriptor, header: str) -> bool:
    position = header.find("_")
    while position > 0:
        field = entity.field_ignoring_case(header[:position])
        if field is not None and field.is_foreign_key_base:
            return True
        position = header.find("_", position + 1)
    return False


def describe_header(finding: HeaderFinding, group: Optional[str] = None) -> list[Finding]:
    """Turn a header comparison into findings, errors first.

    All findings share one group, so the comparison adds at most one error
    and one warning to the run counts.

    Args:
        finding: Result of :func:`reconcile_headers`
        group: Counting group, defaults to the entity and file name
    """
    common = {
        "entity": finding.entity,
        "file_name": finding.file_name,
        "group": group or f"headers:{finding.entity}/{finding.file_name}",
    }
    findings: list[Finding] = []

    if finding.extra_columns:
        findings.append(Finding(
            kind=FindingKind.EXTRA_COLUMNS,
            severity=Severity.ERROR,
            message=f"Extra columns: {', '.join(finding.extra_columns)}",
            suggestion="Remove columns that don't exist in the schema.",
            columns=tuple(finding.extra_columns),
            **common,
        ))
    if finding.missing_key_columns:
        findings.append(Finding(
            kind=FindingKind.MISSING_KEY_COLUMNS,
            severity=Severity.ERROR,
            message=f"Missing key columns: {', '.join(finding.missing_key_columns)}",
            suggestion="Add missing key columns to the CSV header.",
            columns=tuple(finding.missing_key_columns),
            **common,
        ))
    if finding.missing_non_key_columns:
        findings.append(Finding(
            kind=FindingKind.MISSING_NON_KEY_COLUMNS,
            severity=Severity.WARNING,
            message=f"Missing non-key columns: {', '.join(finding.missing_non_key_columns)}",
            suggestion="Consider adding these columns to the CSV header.",
            columns=tuple(finding.missing_non_key_columns),
            **common,
        ))
    if not findings:
        findings.append(Finding(
            kind=FindingKind.HEADER_OK,
            severity=Severity.INFO,
            message="All headers match the schema perfectly.",
            **common,
        ))
    return findings
