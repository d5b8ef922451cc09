"""Type introspection entities."""

from __future__ import annotations

from collections.abc import Set
from dataclasses import dataclass, field
from typing import Any

UNCONSTRAINED_TYPE_NAME = "Object"


@dataclass(frozen=True)
class TypeRef:
    """Opaque handle to one host type, produced by an introspection provider."""

    canonical_name: str
    is_container: bool = False
    key_type: TypeRef | None = None
    value_type: TypeRef | None = None
    is_enum: bool = False
    raw_class: Any = None
    host_type: Any = field(default=None, compare=False, repr=False)

    @property
    def is_unconstrained(self) -> bool:
        return self.canonical_name == UNCONSTRAINED_TYPE_NAME

    @property
    def is_map_like(self) -> bool:
        return self.is_container and self.key_type is not None and self.value_type is not None

    @property
    def is_set_like(self) -> bool:
        """Whether the raw container class carries set semantics."""
        raw_class = self.raw_class
        if raw_class in (set, frozenset):
            return True
        return isinstance(raw_class, type) and issubclass(raw_class, Set)


@dataclass(frozen=True)
class XmlNameDeclaration:
    """XML name/namespace pair declared on a type or a wrapper element.

    A wrapper declared without a name uses the property name.
    """

    name: str | None = None
    namespace: str | None = None


@dataclass(frozen=True)
class PropertyMetadata:  # pylint: disable=too-many-instance-attributes
    """Per-property metadata exposed by the provider; ``None`` means unset."""

    required: bool | None = None
    description: str | None = None
    position: int | None = None
    example: Any = None
    read_only: bool | None = None
    xml_wrapper: XmlNameDeclaration | None = None
    xml_element_name: str | None = None


@dataclass(frozen=True)
class PropertyDeclaration:
    """One declared member of a composite type.

    ``member_type`` is ``None`` when the provider could not evaluate the
    member's annotation.
    """

    name: str
    member_type: TypeRef | None
    accessor_name: str | None = None
    metadata: PropertyMetadata = field(default_factory=PropertyMetadata)
