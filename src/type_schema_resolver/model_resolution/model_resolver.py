"""Recursive composite-type resolution into named model schemas."""

from __future__ import annotations

import logging
from collections.abc import Collection
from dataclasses import replace

from type_schema_resolver.scalar_mapping import ScalarMapper
from type_schema_resolver.schema_registry import (
    ComposedSchema,
    ModelSchema,
    PropertySchema,
    SchemaRegistry,
    XmlMetadata,
)
from type_schema_resolver.type_introspection import (
    PropertyDeclaration,
    PropertyMetadata,
    TypeIntrospectionProvider,
    TypeRef,
)

from .property_ordering import PropertyOrderer
from .property_resolver import PropertyResolver

logger = logging.getLogger(__name__)

_ACCESSOR_PREFIXES = ("get", "is")


class ModelResolver:
    """Resolve composite types into ``ModelSchema``s registered in a ``SchemaRegistry``.

    One model is built per canonical name and registry. A name being expanded
    is registered as a placeholder first; re-entrant resolution of that name
    returns the placeholder instead of expanding it again, which is what makes
    self-referential and mutually recursive types terminate.
    """

    def __init__(
        self,
        provider: TypeIntrospectionProvider,
        *,
        scalar_mapper: ScalarMapper | None = None,
        orderer: PropertyOrderer | None = None,
    ) -> None:
        self._provider = provider
        self._orderer = orderer or PropertyOrderer()
        self._property_resolver = PropertyResolver(provider, self, scalar_mapper or ScalarMapper())

    @property
    def property_resolver(self) -> PropertyResolver:
        return self._property_resolver

    def resolve(self, type_ref: TypeRef, registry: SchemaRegistry) -> ModelSchema | None:
        """Resolve ``type_ref`` into a registered model; ``None`` for key/value containers."""
        name = type_ref.canonical_name
        if type_ref.is_unconstrained:
            return self._unconstrained_model(name, registry)
        if type_ref.is_map_like:
            return None

        completed = registry.completed(name)
        if completed is not None:
            return completed
        model = self._schema_shell(type_ref)
        existing = registry.claim(model)
        if existing is not None:
            if registry.in_progress(name) is existing:
                logger.debug("Schema %s is already being resolved; referencing it by name", name)
            return existing
        properties = self._collect_properties(type_ref, registry)
        model.properties = {prop.name: prop for prop in self._orderer.order(properties)}
        self._compose_subtypes(type_ref, model, set(model.properties), registry)
        for parent in registry.finish_resolution(model):
            _register_composition(parent.name, set(parent.properties), model, registry)
        return model

    def _unconstrained_model(self, name: str, registry: SchemaRegistry) -> ModelSchema:
        existing = registry.setdefault(name, ModelSchema(name=name))
        if isinstance(existing, ModelSchema):
            return existing
        return ModelSchema(name=name)

    def _schema_shell(self, type_ref: TypeRef) -> ModelSchema:
        xml = None
        root = self._provider.xml_root_metadata(type_ref)
        if root is not None and root.name:
            xml = XmlMetadata(name=root.name, namespace=root.namespace or None)
        discriminator = self._provider.explicit_discriminator(
            type_ref
        ) or self._provider.type_info_property(type_ref)
        return ModelSchema(
            name=type_ref.canonical_name,
            description=self._provider.description(type_ref) or None,
            discriminator=discriminator or None,
            xml=xml,
        )

    def _collect_properties(
        self, type_ref: TypeRef, registry: SchemaRegistry
    ) -> list[PropertySchema]:
        properties: list[PropertySchema] = []
        for declaration in self._provider.declared_properties(type_ref):
            name = display_name(declaration)
            if declaration.member_type is None:
                logger.debug(
                    "Dropping %s.%s: member type unavailable", type_ref.canonical_name, name
                )
                continue
            prop = self._property_resolver.resolve(declaration.member_type, registry)
            if prop is None:
                logger.debug(
                    "Dropping %s.%s: unresolvable type %s",
                    type_ref.canonical_name,
                    name,
                    declaration.member_type.canonical_name,
                )
                continue
            properties.append(_with_metadata(prop, name, declaration.metadata))
        return properties

    def _compose_subtypes(
        self,
        type_ref: TypeRef,
        model: ModelSchema,
        inherited_names: Collection[str],
        registry: SchemaRegistry,
    ) -> None:
        for subtype_ref in self._provider.declared_subtypes(type_ref):
            if subtype_ref.canonical_name == model.name:
                continue
            subtype = self.resolve(subtype_ref, registry)
            if subtype is None:
                continue
            if registry.defer_composition(subtype, model):
                logger.debug("Deferring composition of %s under %s", subtype.name, model.name)
                continue
            _register_composition(model.name, inherited_names, subtype, registry)


def display_name(declaration: PropertyDeclaration) -> str:
    """Property name, keeping accessors such as ``island`` or ``getaway`` literal.

    An accessor starting with ``get``/``is`` followed by a lowercase character
    (or nothing) is not a bean-style accessor and keeps its own name.
    """
    accessor = declaration.accessor_name
    if accessor:
        for prefix in _ACCESSOR_PREFIXES:
            if accessor.startswith(prefix):
                following = accessor[len(prefix) : len(prefix) + 1]
                if not following or following.islower():
                    return accessor
    return declaration.name


def _register_composition(
    parent_name: str,
    inherited_names: Collection[str],
    child: ModelSchema,
    registry: SchemaRegistry,
) -> None:
    for name in inherited_names:
        child.properties.pop(name, None)
    child.discriminator = None
    registry.define(child.name, ComposedSchema(parent=parent_name, child=child))
    logger.debug("Registered %s as a subtype of %s", child.name, parent_name)


def _with_metadata(prop: PropertySchema, name: str, metadata: PropertyMetadata) -> PropertySchema:
    return replace(
        prop,
        name=name,
        required=bool(metadata.required),
        description=metadata.description or None,
        position=metadata.position,
        example=metadata.example,
        read_only=bool(metadata.read_only),
        xml=_property_xml(name, metadata),
    )


def _property_xml(name: str, metadata: PropertyMetadata) -> XmlMetadata | None:
    xml = None
    wrapper = metadata.xml_wrapper
    if wrapper is not None:
        xml = XmlMetadata(
            name=wrapper.name or name, namespace=wrapper.namespace or None, wrapped=True
        )
    element_name = metadata.xml_element_name
    if element_name and element_name != name:
        xml = replace(xml, name=element_name) if xml is not None else XmlMetadata(name=element_name)
    return xml
