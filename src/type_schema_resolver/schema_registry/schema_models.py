"""Schema registry entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PropertyKind(str, Enum):
    """Variant tag of a property schema."""

    SCALAR = "scalar"
    REFERENCE = "reference"
    ARRAY = "array"
    MAP = "map"


@dataclass(frozen=True)
class XmlMetadata:
    """XML rendering hints for a model or a property."""

    name: str | None = None
    namespace: str | None = None
    wrapped: bool = False


@dataclass(frozen=True)
class PropertySchema:  # pylint: disable=too-many-instance-attributes
    """Tagged property schema: shared fields plus the payload of its ``kind``.

    Scalar payload: ``scalar_type``, ``format``, ``allowed_values``.
    Reference payload: ``reference`` (target schema name).
    Array payload: ``items``, ``unique_items``.
    Map payload: ``additional_properties``.
    """

    kind: PropertyKind
    name: str | None = None
    description: str | None = None
    required: bool = False
    position: int | None = None
    example: Any = None
    read_only: bool = False
    xml: XmlMetadata | None = None
    scalar_type: str | None = None
    format: str | None = None
    allowed_values: tuple[Any, ...] = ()
    reference: str | None = None
    items: PropertySchema | None = None
    unique_items: bool = False
    additional_properties: PropertySchema | None = None

    @classmethod
    def scalar(
        cls, scalar_type: str, format: str | None = None, allowed_values: tuple[Any, ...] = ()
    ) -> PropertySchema:  # pylint: disable=redefined-builtin
        return cls(
            kind=PropertyKind.SCALAR,
            scalar_type=scalar_type,
            format=format,
            allowed_values=allowed_values,
        )

    @classmethod
    def reference_to(cls, schema_name: str) -> PropertySchema:
        return cls(kind=PropertyKind.REFERENCE, reference=schema_name)

    @classmethod
    def array(cls, items: PropertySchema, *, unique_items: bool = False) -> PropertySchema:
        return cls(kind=PropertyKind.ARRAY, items=items, unique_items=unique_items)

    @classmethod
    def map(cls, values: PropertySchema) -> PropertySchema:
        return cls(kind=PropertyKind.MAP, additional_properties=values)


@dataclass
class ModelSchema:
    """Named composite schema with properties in display order."""

    name: str
    description: str | None = None
    discriminator: str | None = None
    xml: XmlMetadata | None = None
    properties: dict[str, PropertySchema] = field(default_factory=dict)

    @property
    def required_properties(self) -> tuple[str, ...]:
        return tuple(name for name, prop in self.properties.items() if prop.required)


@dataclass(frozen=True)
class ComposedSchema:
    """Polymorphic subtype: a parent reference plus the child's own fields."""

    parent: str
    child: ModelSchema

    @property
    def name(self) -> str:
        return self.child.name


SchemaDefinition = ModelSchema | ComposedSchema
