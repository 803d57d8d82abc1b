"""Normalization of a compiled model into an entity lookup structure.

The compiled model is consumed as an opaque mapping (or an object with a
``definitions`` attribute). Every definition of kind ``entity`` is resolved
once into an :class:`EntityDescriptor`; malformed definitions fail here so the
reconciliation stages never deal with partially shaped input.
"""

from collections.abc import Mapping
from typing import Any, Optional

from seedcheck.core.config import ReconcilerConfig
from seedcheck.core.errors import ModelIndexError
from seedcheck.core.logging import get_logger
from seedcheck.models.entity import EntityDescriptor, FieldDescriptor, FieldKind

logger = get_logger(__name__)

ASSOCIATION_TYPE = "cds.Association"
COMPOSITION_TYPE = "cds.Composition"


class ModelIndex:
    """Entity index over a compiled model.

    ``entities`` holds the entities subject to reconciliation, sorted by
    fully-qualified name. Lookups also see entities excluded by reserved
    namespace or skip annotation, so that associations into them still
    resolve their keys. ``namespaces`` lists the namespaces of all entities,
    longest first.
    """

    def __init__(self, entities: list[EntityDescriptor], config: Optional[ReconcilerConfig] = None):
        self.config = config or ReconcilerConfig()
        self._all: dict[str, EntityDescriptor] = {}
        self._by_lower: dict[str, EntityDescriptor] = {}
        for entity in entities:
            if entity.name in self._all:
                raise ModelIndexError("Duplicate entity name", definition=entity.name)
            self._all[entity.name] = entity
            self._by_lower.setdefault(entity.name.lower(), entity)

        self._excluded = {name for name, entity in self._all.items() if self._is_excluded(entity)}
        self.entities: list[EntityDescriptor] = sorted(
            (e for name, e in self._all.items() if name not in self._excluded),
            key=lambda e: e.name,
        )
        self.namespaces: list[str] = sorted(
            {e.namespace for e in self._all.values() if e.namespace},
            key=lambda ns: (-len(ns), ns),
        )
        self._by_local_name: dict[str, list[EntityDescriptor]] = {}
        for entity in self.entities:
            if entity.namespace:
                self._by_local_name.setdefault(entity.local_name.lower(), []).append(entity)

    @classmethod
    def from_compiled(cls, model: Any, config: Optional[ReconcilerConfig] = None) -> "ModelIndex":
        """Build an index from a compiled model.

        Args:
            model: Mapping or object exposing ``definitions``
            config: Reconciler settings (managed fields, exclusions)

        Returns:
            ModelIndex over all entity definitions

        Raises:
            ModelIndexError: If a definition is malformed
        """
        config = config or ReconcilerConfig()
        definitions = _definitions_of(model)
        managed = set(config.managed_fields)
        entities = []
        for name, definition in definitions.items():
            if not isinstance(definition, Mapping):
                raise ModelIndexError("Definition is not an object", definition=name)
            if definition.get("kind") != "entity":
                continue
            entities.append(_build_entity(name, definition, managed, config.skip_annotation))

        logger.debug("model_indexed", entities=len(entities), definitions=len(definitions))
        return cls(entities, config)

    def _is_excluded(self, entity: EntityDescriptor) -> bool:
        if entity.skip:
            return True
        return any(
            entity.name == prefix or entity.name.startswith(prefix + ".")
            for prefix in self.config.reserved_prefixes
        )

    def get(self, name: str) -> Optional[EntityDescriptor]:
        """Exact lookup by fully-qualified name."""
        return self._all.get(name)

    def lookup(self, name: str) -> Optional[EntityDescriptor]:
        """Case-insensitive lookup by fully-qualified name."""
        exact = self._all.get(name)
        if exact is not None:
            return exact
        return self._by_lower.get(name.lower())

    def is_excluded(self, name: str) -> bool:
        return name in self._excluded

    def entities_with_local_name(self, local_name: str) -> list[EntityDescriptor]:
        """Reconciled, namespaced entities whose last name segment matches ignoring case."""
        return list(self._by_local_name.get(local_name.lower(), []))

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self):
        return iter(self.entities)


def entities_of(model: Any, config: Optional[ReconcilerConfig] = None) -> list[EntityDescriptor]:
    """Entities subject to reconciliation, sorted by fully-qualified name."""
    return ModelIndex.from_compiled(model, config).entities


def lookup_case_insensitive(
    model: Any, name: str, config: Optional[ReconcilerConfig] = None
) -> Optional[EntityDescriptor]:
    """Find an entity by name ignoring case."""
    return ModelIndex.from_compiled(model, config).lookup(name)


def _definitions_of(model: Any) -> Mapping:
    if isinstance(model, ModelIndex):
        raise ModelIndexError("Model is already indexed")
    if isinstance(model, Mapping):
        definitions = model.get("definitions")
    else:
        definitions = getattr(model, "definitions", None)
    if not isinstance(definitions, Mapping):
        raise ModelIndexError("Compiled model has no definitions mapping")
    return definitions


def _build_entity(
    name: str, definition: Mapping, managed: set[str], skip_annotation: str
) -> EntityDescriptor:
    elements = definition.get("elements") or {}
    if not isinstance(elements, Mapping):
        raise ModelIndexError("Entity elements are not an object", definition=name)

    fields: dict[str, FieldDescriptor] = {}
    for element_name, element in elements.items():
        if not isinstance(element, Mapping):
            raise ModelIndexError("Element is not an object", definition=name, element=element_name)
        fields[element_name] = _build_field(name, element_name, element, managed, skip_annotation)

    return EntityDescriptor(
        name=name,
        elements=fields,
        skip=bool(definition.get(skip_annotation, False)),
    )


def _build_field(
    entity_name: str,
    name: str,
    element: Mapping,
    managed: set[str],
    skip_annotation: str,
) -> FieldDescriptor:
    element_type = element.get("type")
    cardinality_max = _cardinality_max(element.get("cardinality"))
    target = None

    if element_type in (ASSOCIATION_TYPE, COMPOSITION_TYPE):
        target = element.get("target")
        if not isinstance(target, str) or not target:
            raise ModelIndexError(
                "Association has no target", definition=entity_name, element=name
            )
        if element_type == COMPOSITION_TYPE:
            kind = FieldKind.COMPOSITION
        elif cardinality_max == "*":
            kind = FieldKind.TO_MANY_ASSOCIATION
        else:
            kind = FieldKind.TO_ONE_ASSOCIATION
    else:
        kind = FieldKind.SCALAR

    return FieldDescriptor(
        name=name,
        kind=kind,
        is_key=bool(element.get("key", False)),
        is_virtual=bool(element.get("virtual", False)),
        is_skipped=bool(element.get(skip_annotation, False)),
        is_managed=name in managed,
        target=target,
        cardinality_max=cardinality_max,
    )


def _cardinality_max(cardinality: Any) -> str:
    if not isinstance(cardinality, Mapping):
        return "1"
    upper = cardinality.get("max")
    if upper == "*":
        return "*"
    try:
        return "*" if int(upper) > 1 else "1"
    except (TypeError, ValueError):
        return "1"
