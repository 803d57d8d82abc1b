"""Mapping of discovered data files to model entities.

A data file for entity ``my.bookshop.Books`` is expected to be named
``my-bookshop-Books.csv``: namespace dots become hyphens and the extension is
appended. Dots kept as namespace separators (``my.bookshop-Books.csv``) are
accepted as well. Casing of the fully-qualified entity name must match
exactly, while a casing difference in the extension is tolerated with a
warning.
"""

from seedcheck.models.entity import EntityDescriptor
from seedcheck.models.findings import (
    DiscoveredFile,
    FilenameMatch,
    Finding,
    FindingKind,
    MatchKind,
    Severity,
)
from seedcheck.processing.model_index import ModelIndex


def strict_filename(entity: EntityDescriptor, extension: str = ".csv") -> str:
    """File name an entity's data file must carry."""
    return entity.name.replace(".", "-") + extension


class FilenameMatcher:
    """Classifies discovered files against the entity index."""

    def __init__(self, index: ModelIndex, extension: str = ".csv"):
        self.index = index
        self.extension = extension

    def match(self, file: DiscoveredFile) -> FilenameMatch:
        """Match one discovered file to at most one entity.

        Args:
            file: File found during discovery

        Returns:
            FilenameMatch describing how the file relates to the model
        """
        name = file.original_name
        base = self._base_name(name)
        candidate = base.replace("-", ".")
        entity = self.index.lookup(candidate)

        if entity is None:
            return self._unresolved(file, base, candidate)

        expected = strict_filename(entity, self.extension)
        if self.index.is_excluded(entity.name):
            return FilenameMatch(file, MatchKind.EXCLUDED, entity.name, expected)

        if candidate != entity.name:
            return FilenameMatch(file, MatchKind.ENTITY_CASE_MISMATCH, entity.name, expected)

        normalized = base.replace(".", "-") + name[len(base):]
        if normalized != expected:
            return FilenameMatch(file, MatchKind.FILENAME_CASE_MISMATCH, entity.name, expected)

        return FilenameMatch(file, MatchKind.EXACT, entity.name, expected)

    def _base_name(self, name: str) -> str:
        if name.lower().endswith(self.extension.lower()):
            return name[: len(name) - len(self.extension)]
        return name.rpartition(".")[0] or name

    def _strip_namespace(self, base: str) -> str:
        """Remove the longest known namespace, written with dots or hyphens."""
        lowered = base.lower().replace("-", ".")
        for namespace in self.index.namespaces:
            prefix = namespace.lower() + "."
            if lowered.startswith(prefix):
                return base[len(prefix):]
        return base

    def _unresolved(self, file: DiscoveredFile, base: str, candidate: str) -> FilenameMatch:
        if "." in self._strip_namespace(base):
            return FilenameMatch(file, MatchKind.FUNCTION_LIKE)

        if "." not in candidate:
            namespaced = self.index.entities_with_local_name(candidate)
            if namespaced:
                expected = ", ".join(strict_filename(e, self.extension) for e in namespaced)
                return FilenameMatch(file, MatchKind.NAMESPACE_MISSING, expected_filename=expected)

        return FilenameMatch(file, MatchKind.UNMATCHED)


def describe_match(match: FilenameMatch) -> Finding:
    """Turn a filename match into a reportable finding."""
    file_name = match.file.original_name
    entity = match.entity
    expected = match.expected_filename

    if match.kind == MatchKind.EXACT:
        return Finding(
            kind=FindingKind.FILENAME_OK,
            severity=Severity.INFO,
            message="Filename matches entity name perfectly.",
            entity=entity,
            file_name=file_name,
        )
    if match.kind == MatchKind.FILENAME_CASE_MISMATCH:
        return Finding(
            kind=FindingKind.FILENAME_CASE_MISMATCH,
            severity=Severity.WARNING,
            message=f"Case mismatch: expects {expected}, found {file_name}.",
            entity=entity,
            file_name=file_name,
            suggestion="Rename the file to match the entity casing exactly.",
        )
    if match.kind == MatchKind.ENTITY_CASE_MISMATCH:
        return Finding(
            kind=FindingKind.ENTITY_CASE_MISMATCH,
            severity=Severity.ERROR,
            message=f"Entity name casing differs: expects {expected}, found {file_name}.",
            entity=entity,
            file_name=file_name,
            suggestion="Rename the file so the entity name is spelled exactly as in the model.",
        )
    if match.kind == MatchKind.NAMESPACE_MISSING:
        return Finding(
            kind=FindingKind.NAMESPACE_MISSING,
            severity=Severity.ERROR,
            message=f"Namespace missing: expects {expected}, found {file_name}.",
            file_name=file_name,
            suggestion="You MUST prefix the filename with the namespace.",
        )
    if match.kind == MatchKind.FUNCTION_LIKE:
        return Finding(
            kind=FindingKind.FUNCTION_LIKE,
            severity=Severity.WARNING,
            message=f"{file_name} looks like data for an action or function, not an entity.",
            file_name=file_name,
            suggestion="Remove the file if it was created by mistake.",
        )
    if match.kind == MatchKind.EXCLUDED:
        return Finding(
            kind=FindingKind.EXCLUDED_ENTITY,
            severity=Severity.INFO,
            message="Entity is excluded from reconciliation; file not checked.",
            entity=entity,
            file_name=file_name,
        )
    return Finding(
        kind=FindingKind.ENTITY_NOT_FOUND,
        severity=Severity.ERROR,
        message=f"Entity not found for {file_name}.",
        file_name=file_name,
        suggestion="Rename the file after an entity (namespace dots as hyphens) or remove it.",
    )


def describe_missing_file(entity: EntityDescriptor, extension: str = ".csv") -> Finding:
    """Informational finding for an entity without a data file."""
    return Finding(
        kind=FindingKind.MISSING_FILE,
        severity=Severity.INFO,
        message=f"No data file found; expected {strict_filename(entity, extension)}.",
        entity=entity.name,
    )
