"""Reconciliation of CDS model metadata against seed data files.

Checks that every CSV seed file is named after an entity of the compiled
model and that its header row carries the columns the entity expects.
"""

from seedcheck.core import ReconcilerConfig, SeedCheckError
from seedcheck.models import load_compiled_model
from seedcheck.processing import LocalFileSystem, ModelIndex, Reconciler
from seedcheck.reporting import ReconciliationReport, render_report

__version__ = "0.1.0"

__all__ = [
    "ReconcilerConfig",
    "SeedCheckError",
    "load_compiled_model",
    "LocalFileSystem",
    "ModelIndex",
    "Reconciler",
    "ReconciliationReport",
    "render_report",
]
