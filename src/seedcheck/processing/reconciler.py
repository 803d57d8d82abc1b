"""Reconciliation of seed data files against a compiled model.

Runs discovery, filename matching and header reconciliation and collects the
outcome in a :class:`ReconciliationReport`. Every run builds its own
accumulator, so a Reconciler can be reused and runs never share state.
"""

from typing import Optional

from seedcheck.core.config import ReconcilerConfig
from seedcheck.core.errors import FileReadError
from seedcheck.core.logging import get_logger
from seedcheck.models.findings import (
    DiscoveredFile,
    FilenameMatch,
    Finding,
    FindingKind,
    Severity,
)
from seedcheck.processing.columns import derive_expected_columns
from seedcheck.processing.csv_reader import read_header
from seedcheck.processing.discovery import discover_files
from seedcheck.processing.filesystem import FileSystem
from seedcheck.processing.headers import describe_header, reconcile_headers
from seedcheck.processing.matcher import FilenameMatcher, describe_match, describe_missing_file
from seedcheck.processing.model_index import ModelIndex
from seedcheck.reporting.aggregator import ReconciliationReport, ReportAccumulator, ReportScope

logger = get_logger(__name__)


class Reconciler:
    """Reconciles the data files of a project against its entity model."""

    def __init__(
        self,
        index: ModelIndex,
        fs: FileSystem,
        config: Optional[ReconcilerConfig] = None,
    ):
        self.index = index
        self.fs = fs
        self.config = config or index.config
        self.matcher = FilenameMatcher(index, self.config.file_extension)

    def discover(self) -> list[DiscoveredFile]:
        """Scan the configured data folders."""
        return discover_files(self.fs, self.config.data_folders, self.config.file_extension)

    def validate_filenames(self, files: Optional[list[DiscoveredFile]] = None) -> ReconciliationReport:
        """Check that every data file is named after an entity."""
        return self._run(ReportScope.FILENAMES, files)

    def validate_headers(self, files: Optional[list[DiscoveredFile]] = None) -> ReconciliationReport:
        """Check the header row of every data file attributed to an entity."""
        return self._run(ReportScope.HEADERS, files)

    def validate_all(self, files: Optional[list[DiscoveredFile]] = None) -> ReconciliationReport:
        """Run filename and header checks over a single discovery."""
        return self._run(ReportScope.ALL, files)

    def _run(self, scope: ReportScope, files: Optional[list[DiscoveredFile]]) -> ReconciliationReport:
        accumulator = ReportAccumulator(scope=scope)
        files = self.discover() if files is None else files

        if not files:
            accumulator.add(Finding(
                kind=FindingKind.NO_DATA_FILES,
                severity=Severity.WARNING,
                message="No data files found. Check your folder structure.",
                suggestion=f"Place seed files in one of: {', '.join(self.config.data_folders)}",
            ))
            return self._finish(accumulator)

        matches = [self.matcher.match(f) for f in files]
        bound: dict[str, list[FilenameMatch]] = {}
        unbound: list[FilenameMatch] = []
        for match in matches:
            if match.is_bound:
                bound.setdefault(match.entity, []).append(match)
            else:
                unbound.append(match)

        check_names = scope in (ReportScope.FILENAMES, ReportScope.ALL)
        check_headers = scope in (ReportScope.HEADERS, ReportScope.ALL)

        for entity in self.index.entities:
            entity_matches = bound.get(entity.name, [])
            if not entity_matches:
                if check_names:
                    accumulator.add(describe_missing_file(entity, self.config.file_extension))
                continue
            for match in entity_matches:
                if check_names:
                    accumulator.add(describe_match(match))
                if check_headers:
                    accumulator.extend(self._header_findings(match))

        if check_names:
            accumulator.extend(describe_match(match) for match in unbound)

        return self._finish(accumulator)

    def _header_findings(self, match: FilenameMatch) -> list[Finding]:
        entity = self.index.get(match.entity)
        file_name = match.file.original_name
        try:
            headers = read_header(self.fs, match.file.path)
        except FileReadError as exc:
            logger.warning("file_read_failed", path=match.file.path, error=exc.message)
            return [Finding(
                kind=FindingKind.READ_FAILURE,
                severity=Severity.INFO,
                message=f"Could not read file: {exc.message}",
                entity=match.entity,
                file_name=file_name,
            )]

        expected = derive_expected_columns(entity, self.index)
        result = reconcile_headers(
            entity,
            expected,
            headers,
            self.config.managed_names,
            file_name=file_name,
        )
        return describe_header(result, group=f"headers:{match.file.path}")

    def _finish(self, accumulator: ReportAccumulator) -> ReconciliationReport:
        report = accumulator.build()
        logger.info(
            "reconciliation_completed",
            scope=report.scope.value,
            errors=report.error_count,
            warnings=report.warning_count,
        )
        return report
