"""Records produced while reconciling seed data files against the model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Severity(str, Enum):
    """Severity of a finding."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def min_verbosity(self) -> int:
        """Lowest verbosity level at which this severity is rendered."""
        return {Severity.ERROR: 0, Severity.WARNING: 1, Severity.INFO: 2}[self]


class FindingKind(str, Enum):
    """What a finding is about."""

    # Filenames
    FILENAME_OK = "filename_ok"
    ENTITY_NOT_FOUND = "entity_not_found"
    NAMESPACE_MISSING = "namespace_missing"
    ENTITY_CASE_MISMATCH = "entity_case_mismatch"
    FILENAME_CASE_MISMATCH = "filename_case_mismatch"
    FUNCTION_LIKE = "function_like"
    MISSING_FILE = "missing_file"
    EXCLUDED_ENTITY = "excluded_entity"

    # Headers
    HEADER_OK = "header_ok"
    EXTRA_COLUMNS = "extra_columns"
    MISSING_KEY_COLUMNS = "missing_key_columns"
    MISSING_NON_KEY_COLUMNS = "missing_non_key_columns"

    # I/O
    READ_FAILURE = "read_failure"
    NO_DATA_FILES = "no_data_files"


class MatchKind(str, Enum):
    """How a discovered file relates to the model."""

    EXACT = "exact"
    ENTITY_CASE_MISMATCH = "entity_case_mismatch"
    FILENAME_CASE_MISMATCH = "filename_case_mismatch"
    NAMESPACE_MISSING = "namespace_missing"
    FUNCTION_LIKE = "function_like"
    EXCLUDED = "excluded"
    UNMATCHED = "unmatched"


@dataclass(frozen=True)
class DiscoveredFile:
    """A candidate data file found during a scan."""

    original_name: str
    folder: str

    @property
    def normalized_name(self) -> str:
        return self.original_name.lower()

    @property
    def path(self) -> str:
        return f"{self.folder.rstrip('/')}/{self.original_name}" if self.folder else self.original_name


@dataclass(frozen=True)
class FilenameMatch:
    """Relates one discovered file to at most one entity."""

    file: DiscoveredFile
    kind: MatchKind
    entity: Optional[str] = None
    expected_filename: Optional[str] = None

    @property
    def is_bound(self) -> bool:
        """Whether the file is attributed to an entity for header checks."""
        return self.entity is not None and self.kind in (
            MatchKind.EXACT,
            MatchKind.ENTITY_CASE_MISMATCH,
            MatchKind.FILENAME_CASE_MISMATCH,
        )


@dataclass(frozen=True)
class ExpectedColumn:
    """A column the model expects in a data file header."""

    name: str
    is_key_column: bool = False
    is_foreign_key: bool = False


@dataclass
class HeaderFinding:
    """Header discrepancies for one (entity, file) pair."""

    entity: str
    file_name: str
    missing_key_columns: list[str] = field(default_factory=list)
    missing_non_key_columns: list[str] = field(default_factory=list)
    extra_columns: list[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.extra_columns or self.missing_key_columns)

    @property
    def has_warnings(self) -> bool:
        return bool(self.missing_non_key_columns)


@dataclass(frozen=True)
class Finding:
    """A single reportable outcome of a run.

    Findings sharing a ``group`` come from one check of one file and count
    at most once per severity. Ungrouped findings count individually.
    """

    kind: FindingKind
    severity: Severity
    message: str
    entity: Optional[str] = None
    file_name: Optional[str] = None
    suggestion: Optional[str] = None
    columns: tuple[str, ...] = ()
    group: Optional[str] = None

    def is_visible(self, verbosity: int) -> bool:
        return verbosity >= self.severity.min_verbosity

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "severity": self.severity.value,
            "message": self.message,
            "entity": self.entity,
            "file_name": self.file_name,
            "suggestion": self.suggestion,
            "columns": list(self.columns),
            "group": self.group,
        }
