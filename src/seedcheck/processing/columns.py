"""Derivation of the columns an entity's data file is expected to carry."""

from seedcheck.core.logging import get_logger
from seedcheck.models.entity import EntityDescriptor, FieldKind
from seedcheck.models.findings import ExpectedColumn
from seedcheck.processing.model_index import ModelIndex

logger = get_logger(__name__)


def derive_expected_columns(entity: EntityDescriptor, index: ModelIndex) -> list[ExpectedColumn]:
    """Compute the expected header columns of an entity in declaration order.

    Virtual, skipped and managed fields contribute nothing, nor do
    compositions and to-many associations. A to-one association contributes
    one ``{field}_{targetKey}`` column per key of its target; these foreign key
    columns are never required at error severity. An association whose target
    is not in the model contributes nothing.

    Args:
        entity: Entity to derive columns for
        index: Model index used to resolve association targets

    Returns:
        Expected columns, each flagged as key and/or foreign key column
    """
    columns: list[ExpectedColumn] = []
    for field in entity.elements.values():
        if not field.contributes_column:
            continue
        if field.kind in (FieldKind.COMPOSITION, FieldKind.TO_MANY_ASSOCIATION):
            continue

        if field.kind == FieldKind.TO_ONE_ASSOCIATION:
            target = index.get(field.target) if field.target else None
            if target is None:
                logger.debug(
                    "association_target_unresolved",
                    entity=entity.name,
                    field=field.name,
                    target=field.target,
                )
                continue
            for key in target.key_fields:
                columns.append(
                    ExpectedColumn(
                        name=f"{field.name}_{key.name}",
                        is_key_column=key.is_key,
                        is_foreign_key=True,
                    )
                )
            continue

        columns.append(ExpectedColumn(name=field.name, is_key_column=field.is_key))
    return columns
