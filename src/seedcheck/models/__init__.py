"""Data models for seed data reconciliation."""

from seedcheck.models.entity import EntityDescriptor, FieldDescriptor, FieldKind
from seedcheck.models.findings import (
    DiscoveredFile,
    ExpectedColumn,
    FilenameMatch,
    Finding,
    FindingKind,
    HeaderFinding,
    MatchKind,
    Severity,
)
from seedcheck.models.loader import load_compiled_model

__all__ = [
    "EntityDescriptor",
    "FieldDescriptor",
    "FieldKind",
    "DiscoveredFile",
    "ExpectedColumn",
    "FilenameMatch",
    "Finding",
    "FindingKind",
    "HeaderFinding",
    "MatchKind",
    "Severity",
    "load_compiled_model",
]
