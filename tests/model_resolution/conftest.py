"""Fixtures for model resolution tests."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import pytest
from type_schema_resolver.type_introspection import (
    UNCONSTRAINED_TYPE_NAME,
    PropertyDeclaration,
    PropertyMetadata,
    TypeRef,
    XmlNameDeclaration,
)


@dataclass
class _DeclaredModel:
    properties: list[PropertyDeclaration]
    description: str | None = None
    discriminator: str | None = None
    type_info: str | None = None
    subtypes: tuple[str, ...] = ()
    xml_root: XmlNameDeclaration | None = None


@dataclass
class InMemoryTypeProvider:
    """Provider over hand-declared models, recording every property enumeration."""

    models: dict[str, _DeclaredModel] = field(default_factory=dict)
    enumerated: list[str] = field(default_factory=list)
    enums: dict[str, tuple[Any, ...]] = field(default_factory=dict)

    def declare(
        self,
        name: str,
        *properties: PropertyDeclaration,
        description: str | None = None,
        discriminator: str | None = None,
        type_info: str | None = None,
        subtypes: Sequence[str] = (),
        xml_root: XmlNameDeclaration | None = None,
    ) -> TypeRef:
        self.models[name] = _DeclaredModel(
            properties=list(properties),
            description=description,
            discriminator=discriminator,
            type_info=type_info,
            subtypes=tuple(subtypes),
            xml_root=xml_root,
        )
        return self.ref(name)

    @staticmethod
    def ref(name: str) -> TypeRef:
        return TypeRef(canonical_name=name, raw_class=object, host_type=name)

    @staticmethod
    def any_type() -> TypeRef:
        return TypeRef(canonical_name=UNCONSTRAINED_TYPE_NAME, raw_class=object)

    @staticmethod
    def list_of(element: TypeRef) -> TypeRef:
        return TypeRef(
            canonical_name=f"list[{element.canonical_name}]",
            is_container=True,
            value_type=element,
            raw_class=list,
        )

    @staticmethod
    def set_of(element: TypeRef) -> TypeRef:
        return TypeRef(
            canonical_name=f"set[{element.canonical_name}]",
            is_container=True,
            value_type=element,
            raw_class=set,
        )

    @staticmethod
    def map_of(value: TypeRef) -> TypeRef:
        return TypeRef(
            canonical_name=f"dict[string, {value.canonical_name}]",
            is_container=True,
            key_type=TypeRef(canonical_name="string", raw_class=str),
            value_type=value,
            raw_class=dict,
        )

    def enum(self, name: str, *values: Any) -> TypeRef:
        self.enums[name] = tuple(values)
        return TypeRef(canonical_name=name, is_enum=True, raw_class=object)

    @staticmethod
    def prop(
        name: str,
        member_type: TypeRef | None,
        *,
        accessor_name: str | None = None,
        **metadata: Any,
    ) -> PropertyDeclaration:
        return PropertyDeclaration(
            name=name,
            member_type=member_type,
            accessor_name=accessor_name or name,
            metadata=PropertyMetadata(**metadata),
        )

    def construct_type(self, host_type: Any) -> TypeRef:
        if isinstance(host_type, TypeRef):
            return host_type
        return self.ref(str(host_type))

    def description(self, type_ref: TypeRef) -> str | None:
        model = self.models.get(type_ref.canonical_name)
        return model.description if model else None

    def xml_root_metadata(self, type_ref: TypeRef) -> XmlNameDeclaration | None:
        model = self.models.get(type_ref.canonical_name)
        return model.xml_root if model else None

    def declared_properties(self, type_ref: TypeRef) -> Sequence[PropertyDeclaration]:
        self.enumerated.append(type_ref.canonical_name)
        model = self.models.get(type_ref.canonical_name)
        return tuple(model.properties) if model else ()

    def explicit_discriminator(self, type_ref: TypeRef) -> str | None:
        model = self.models.get(type_ref.canonical_name)
        return model.discriminator if model else None

    def type_info_property(self, type_ref: TypeRef) -> str | None:
        model = self.models.get(type_ref.canonical_name)
        return model.type_info if model else None

    def declared_subtypes(self, type_ref: TypeRef) -> Sequence[TypeRef]:
        model = self.models.get(type_ref.canonical_name)
        return tuple(self.ref(name) for name in model.subtypes) if model else ()

    def enum_values(self, type_ref: TypeRef) -> tuple[Any, ...]:
        return self.enums.get(type_ref.canonical_name, ())


@pytest.fixture
def provider() -> InMemoryTypeProvider:
    return InMemoryTypeProvider()


@pytest.fixture
def string_type() -> TypeRef:
    return TypeRef(canonical_name="string", raw_class=str)


@pytest.fixture
def long_type() -> TypeRef:
    return TypeRef(canonical_name="long", raw_class=int)
