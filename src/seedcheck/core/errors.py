"""Custom exception classes for seed data reconciliation."""

from typing import Optional


class SeedCheckError(Exception):
    """Base exception for all seedcheck errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ModelLoadError(SeedCheckError):
    """Error while reading a compiled model from disk."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, error_code="MODEL_LOAD", **kwargs)
        self.path = path
        self.details.update({"path": path})


class ModelIndexError(SeedCheckError):
    """Error raised when a model definition cannot be indexed."""

    def __init__(
        self,
        message: str,
        definition: Optional[str] = None,
        element: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, error_code="MODEL_INDEX", **kwargs)
        self.definition = definition
        self.element = element
        self.details.update({
            "definition": definition,
            "element": element,
        })


class FileReadError(SeedCheckError):
    """Error while listing a folder or reading a data file."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        not_found: bool = False,
        **kwargs,
    ):
        super().__init__(message, error_code="FILE_READ", **kwargs)
        self.path = path
        self.not_found = not_found
        self.details.update({
            "path": path,
            "not_found": not_found,
        })


class ConfigurationError(SeedCheckError):
    """Error raised for invalid reconciler settings."""

    def __init__(
        self,
        message: str,
        setting: Optional[str] = None,
        value: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, error_code="CONFIGURATION", **kwargs)
        self.setting = setting
        self.value = value
        self.details.update({
            "setting": setting,
            "value": value,
        })
