"""Settings for a reconciliation run."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from seedcheck.core.errors import ConfigurationError

DEFAULT_DATA_FOLDERS = ("db/data", "db/csv", "db/src/csv")
DEFAULT_MANAGED_FIELDS = ("createdAt", "createdBy", "modifiedAt", "modifiedBy")


class ReconcilerConfig(BaseModel):
    """Configuration for the reconciliation engine."""

    model_config = {"frozen": True}

    data_folders: tuple[str, ...] = Field(
        default=DEFAULT_DATA_FOLDERS, description="Folders scanned for seed data files"
    )
    file_extension: str = Field(
        default=".csv", description="Extension of seed data files (matched ignoring case)"
    )
    reserved_prefixes: tuple[str, ...] = Field(
        default=("sap.common",), description="Namespaces excluded from reconciliation"
    )
    managed_fields: tuple[str, ...] = Field(
        default=DEFAULT_MANAGED_FIELDS, description="System-populated fields, never required"
    )
    skip_annotation: str = Field(
        default="@cds.persistence.skip", description="Annotation excluding entities and fields"
    )
    verbosity: int = Field(
        default=1, ge=0, le=2, description="0=errors, 1=errors and warnings, 2=everything"
    )

    @property
    def managed_names(self) -> frozenset[str]:
        """Lowercased managed field names."""
        return frozenset(name.lower() for name in self.managed_fields)

    def with_verbosity(self, verbosity: int) -> "ReconcilerConfig":
        """Return a copy of this config with another verbosity level."""
        return build_config(**{**self.model_dump(), "verbosity": verbosity})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ReconcilerConfig":
        """Build a config from ``SEEDCHECK_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            ReconcilerConfig with defaults for unset variables

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        overrides: dict = {}

        folders = env.get("SEEDCHECK_DATA_FOLDERS")
        if folders:
            overrides["data_folders"] = _split_list(folders)

        prefixes = env.get("SEEDCHECK_RESERVED_PREFIXES")
        if prefixes is not None:
            overrides["reserved_prefixes"] = _split_list(prefixes)

        level = env.get("SEEDCHECK_TRACE_LEVEL")
        if level:
            try:
                overrides["verbosity"] = int(level)
            except ValueError:
                raise ConfigurationError(
                    "Trace level must be 0, 1 or 2",
                    setting="SEEDCHECK_TRACE_LEVEL",
                    value=level,
                )

        return build_config(**overrides)


def build_config(**settings) -> ReconcilerConfig:
    """Validate settings into a ReconcilerConfig.

    Raises:
        ConfigurationError: If pydantic rejects a setting
    """
    try:
        return ReconcilerConfig(**settings)
    except ValidationError as exc:
        first = exc.errors()[0]
        setting = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid setting {setting}: {first.get('msg')}",
            setting=setting,
            value=str(first.get("input")),
        ) from exc


def _split_list(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())
