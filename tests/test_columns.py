"""Tests for expected column derivation."""

from seedcheck.models.findings import ExpectedColumn
from seedcheck.processing.columns import derive_expected_columns
from seedcheck.processing.model_index import ModelIndex


class TestDeriveExpectedColumns:
    """Tests for derive_expected_columns."""

    def test_order_columns(self, index):
        columns = derive_expected_columns(index.get("sales.Order"), index)

        assert columns == [
            ExpectedColumn(name="ID", is_key_column=True),
            ExpectedColumn(name="status"),
            ExpectedColumn(name="customer_ID", is_key_column=True, is_foreign_key=True),
        ]

    def test_managed_virtual_and_skipped_fields_excluded(self, index):
        names = [c.name for c in derive_expected_columns(index.get("sales.Order"), index)]

        for excluded in ("createdAt", "createdBy", "modifiedAt", "modifiedBy", "note", "legacyCode"):
            assert excluded not in names

    def test_compositions_and_to_many_excluded(self, index):
        names = [c.name for c in derive_expected_columns(index.get("sales.Order"), index)]

        assert not any(name.startswith("items") for name in names)
        assert not any(name.startswith("notes") for name in names)

    def test_association_into_excluded_entity_resolves(self, index):
        names = [c.name for c in derive_expected_columns(index.get("sales.Customer"), index)]

        assert names == ["ID", "name", "currency_code"]

    def test_key_association_yields_foreign_key_column(self, index):
        columns = derive_expected_columns(index.get("sales.OrderItem"), index)

        assert columns[0] == ExpectedColumn(name="up__ID", is_key_column=True, is_foreign_key=True)
        assert [c.name for c in columns] == ["up__ID", "pos", "product"]

    def test_composite_target_key(self):
        model = {
            "definitions": {
                "a.Parent": {
                    "kind": "entity",
                    "elements": {
                        "code": {"key": True, "type": "cds.String"},
                        "year": {"key": True, "type": "cds.Integer"},
                        "label": {"type": "cds.String"},
                    },
                },
                "a.Child": {
                    "kind": "entity",
                    "elements": {
                        "ID": {"key": True, "type": "cds.UUID"},
                        "parent": {"type": "cds.Association", "target": "a.Parent"},
                    },
                },
            }
        }
        index = ModelIndex.from_compiled(model)

        names = [c.name for c in derive_expected_columns(index.get("a.Child"), index)]

        assert names == ["ID", "parent_code", "parent_year"]

    def test_unresolved_target_contributes_nothing(self):
        model = {
            "definitions": {
                "a.Child": {
                    "kind": "entity",
                    "elements": {
                        "ID": {"key": True, "type": "cds.UUID"},
                        "ghost": {"type": "cds.Association", "target": "a.Missing"},
                    },
                },
            }
        }
        index = ModelIndex.from_compiled(model)

        names = [c.name for c in derive_expected_columns(index.get("a.Child"), index)]

        assert names == ["ID"]
