"""Core utilities for seedcheck."""

from seedcheck.core.logging import get_logger, configure_logging
from seedcheck.core.errors import (
    SeedCheckError,
    ModelLoadError,
    ModelIndexError,
    FileReadError,
    ConfigurationError,
)
from seedcheck.core.config import ReconcilerConfig, build_config

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    # Errors
    "SeedCheckError",
    "ModelLoadError",
    "ModelIndexError",
    "FileReadError",
    "ConfigurationError",
    # Config
    "ReconcilerConfig",
    "build_config",
]
