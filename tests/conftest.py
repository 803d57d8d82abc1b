"""
Pytest configuration and shared fixtures for seedcheck.
"""
import copy

import pytest
from hypothesis import settings, Verbosity

from seedcheck.core.config import ReconcilerConfig
from seedcheck.processing.model_index import ModelIndex

# Configure Hypothesis settings for all property-based tests
settings.register_profile(
    "default",
    max_examples=100,
    deadline=5000,
    suppress_health_check=[],
    verbosity=Verbosity.normal,
)

settings.register_profile(
    "ci",
    max_examples=200,
    deadline=10000,
    suppress_health_check=[],
    verbosity=Verbosity.quiet,
)

settings.register_profile(
    "debug",
    max_examples=10,
    deadline=None,
    suppress_health_check=[],
    verbosity=Verbosity.verbose,
)

settings.load_profile("default")


SALES_MODEL = {
    "definitions": {
        "sales": {"kind": "namespace"},
        "sales.Status": {"kind": "type", "type": "cds.String"},
        "sales.Order": {
            "kind": "entity",
            "elements": {
                "ID": {"key": True, "type": "cds.UUID"},
                "status": {"type": "cds.String"},
                "customer": {
                    "type": "cds.Association",
                    "target": "sales.Customer",
                    "keys": [{"ref": ["ID"]}],
                },
                "items": {
                    "type": "cds.Composition",
                    "target": "sales.OrderItem",
                    "cardinality": {"max": "*"},
                },
                "notes": {
                    "type": "cds.Association",
                    "target": "sales.Note",
                    "cardinality": {"max": "*"},
                },
                "note": {"type": "cds.String", "virtual": True},
                "legacyCode": {"type": "cds.String", "@cds.persistence.skip": True},
                "createdAt": {"type": "cds.Timestamp"},
                "createdBy": {"type": "cds.String"},
                "modifiedAt": {"type": "cds.Timestamp"},
                "modifiedBy": {"type": "cds.String"},
            },
        },
        "sales.Customer": {
            "kind": "entity",
            "elements": {
                "ID": {"key": True, "type": "cds.UUID"},
                "name": {"type": "cds.String"},
                "currency": {
                    "type": "cds.Association",
                    "target": "sap.common.Currencies",
                },
            },
        },
        "sales.OrderItem": {
            "kind": "entity",
            "elements": {
                "up_": {
                    "key": True,
                    "type": "cds.Association",
                    "target": "sales.Order",
                    "cardinality": {"max": 1},
                },
                "pos": {"key": True, "type": "cds.Integer"},
                "product": {"type": "cds.String"},
            },
        },
        "sales.Note": {
            "kind": "entity",
            "elements": {
                "ID": {"key": True, "type": "cds.UUID"},
                "order": {"type": "cds.Association", "target": "sales.Order"},
                "text": {"type": "cds.String"},
            },
        },
        "sales.DraftOrder": {
            "kind": "entity",
            "@cds.persistence.skip": True,
            "elements": {"ID": {"key": True, "type": "cds.UUID"}},
        },
        "sap.common.Currencies": {
            "kind": "entity",
            "elements": {
                "code": {"key": True, "type": "cds.String"},
                "name": {"type": "cds.String"},
            },
        },
    }
}


@pytest.fixture
def compiled_model():
    """Provide a fresh copy of the sales model for each test."""
    return copy.deepcopy(SALES_MODEL)


@pytest.fixture
def config():
    return ReconcilerConfig()


@pytest.fixture
def index(compiled_model, config):
    return ModelIndex.from_compiled(compiled_model, config)
