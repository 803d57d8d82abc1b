"""Reconciliation stages: indexing, discovery, matching and header checks."""

from seedcheck.processing.model_index import (
    ModelIndex,
    entities_of,
    lookup_case_insensitive,
)
from seedcheck.processing.filesystem import (
    FileSystem,
    LocalFileSystem,
    InMemoryFileSystem,
)
from seedcheck.processing.discovery import discover_files
from seedcheck.processing.csv_reader import parse_header_row, read_header
from seedcheck.processing.matcher import (
    FilenameMatcher,
    describe_match,
    describe_missing_file,
    strict_filename,
)
from seedcheck.processing.columns import derive_expected_columns
from seedcheck.processing.headers import describe_header, reconcile_headers
from seedcheck.processing.reconciler import Reconciler

__all__ = [
    # Model index
    "ModelIndex",
    "entities_of",
    "lookup_case_insensitive",
    # File access
    "FileSystem",
    "LocalFileSystem",
    "InMemoryFileSystem",
    "discover_files",
    "parse_header_row",
    "read_header",
    # Matching
    "FilenameMatcher",
    "describe_match",
    "describe_missing_file",
    "strict_filename",
    # Columns and headers
    "derive_expected_columns",
    "describe_header",
    "reconcile_headers",
    # Orchestration
    "Reconciler",
]
