"""Entity and field descriptors built from a compiled model."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class FieldKind(str, Enum):
    """Kinds of entity fields relevant to seed data columns."""

    SCALAR = "scalar"
    TO_ONE_ASSOCIATION = "to_one_association"
    TO_MANY_ASSOCIATION = "to_many_association"
    COMPOSITION = "composition"


class FieldDescriptor(BaseModel):
    """A single element of an entity, resolved once at index time."""

    model_config = {"frozen": True}

    name: str = Field(..., description="Element name as declared")
    kind: FieldKind = Field(default=FieldKind.SCALAR, description="Field kind")
    is_key: bool = Field(default=False, description="Part of the primary key")
    is_virtual: bool = Field(default=False, description="Virtual element, never persisted")
    is_skipped: bool = Field(default=False, description="Annotated with the skip annotation")
    is_managed: bool = Field(default=False, description="System-populated managed field")
    target: Optional[str] = Field(None, description="Target entity name for associations")
    cardinality_max: str = Field(default="1", description="Upper cardinality, '1' or '*'")

    @property
    def is_to_many(self) -> bool:
        return self.cardinality_max == "*"

    @property
    def is_foreign_key_base(self) -> bool:
        """Whether ``{name}_{key}`` columns are valid references for this field."""
        if self.kind == FieldKind.TO_ONE_ASSOCIATION:
            return True
        return self.kind == FieldKind.COMPOSITION and not self.is_to_many

    @property
    def contributes_column(self) -> bool:
        return not (self.is_virtual or self.is_skipped or self.is_managed)


class EntityDescriptor(BaseModel):
    """A persisted entity with its fields in declaration order."""

    model_config = {"frozen": True}

    name: str = Field(..., description="Fully-qualified dotted entity name")
    elements: dict[str, FieldDescriptor] = Field(
        default_factory=dict, description="Fields keyed by name, in declaration order"
    )
    skip: bool = Field(default=False, description="Excluded from reconciliation")

    @property
    def namespace(self) -> str:
        return self.name.rpartition(".")[0]

    @property
    def local_name(self) -> str:
        return self.name.rpartition(".")[2]

    @property
    def key_fields(self) -> list[FieldDescriptor]:
        return [f for f in self.elements.values() if f.is_key]

    def field_ignoring_case(self, name: str) -> Optional[FieldDescriptor]:
        """Find a field by name regardless of casing."""
        lowered = name.lower()
        for candidate in self.elements.values():
            if candidate.name.lower() == lowered:
                return candidate
        return None
