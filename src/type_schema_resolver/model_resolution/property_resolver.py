"""Property schema resolution for one declared member type."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from type_schema_resolver.scalar_mapping import ScalarMapper
from type_schema_resolver.schema_registry import PropertySchema, SchemaRegistry
from type_schema_resolver.type_introspection import TypeIntrospectionProvider, TypeRef

if TYPE_CHECKING:
    from .model_resolver import ModelResolver

logger = logging.getLogger(__name__)


class PropertyResolver:
    """Turn a member type into a scalar, reference, array or map property."""

    def __init__(
        self,
        provider: TypeIntrospectionProvider,
        model_resolver: ModelResolver,
        scalar_mapper: ScalarMapper,
    ) -> None:
        self._provider = provider
        self._model_resolver = model_resolver
        self._scalar_mapper = scalar_mapper

    def resolve(self, type_ref: TypeRef, registry: SchemaRegistry) -> PropertySchema | None:
        """Resolve ``type_ref`` into a property schema; ``None`` means omit the property."""
        scalar = self._scalar_mapper.map_scalar(type_ref.canonical_name)
        if scalar is not None:
            return scalar
        if type_ref.is_enum:
            return self._enum_property(type_ref)
        if type_ref.is_container and type_ref.value_type is not None:
            if type_ref.key_type is not None:
                return self._map_property(type_ref.value_type, registry)
            items = self._element_property(type_ref.value_type, registry)
            if items is None:
                return None
            return PropertySchema.array(items, unique_items=type_ref.is_set_like)
        return self._reference_property(type_ref, registry)

    def _map_property(self, value_type: TypeRef, registry: SchemaRegistry) -> PropertySchema | None:
        if value_type.is_unconstrained:
            return PropertySchema.map(PropertySchema.scalar("string"))
        values = self._element_property(value_type, registry)
        if values is None:
            return None
        return PropertySchema.map(values)

    def _element_property(
        self, element_type: TypeRef, registry: SchemaRegistry
    ) -> PropertySchema | None:
        element = self.resolve(element_type, registry)
        if element is None:
            logger.debug("Unresolvable container element type %s", element_type.canonical_name)
        return element

    def _reference_property(
        self, type_ref: TypeRef, registry: SchemaRegistry
    ) -> PropertySchema | None:
        model = self._model_resolver.resolve(type_ref, registry)
        if model is None:
            return None
        registry.setdefault(model.name, model)
        return PropertySchema.reference_to(model.name)

    def _enum_property(self, type_ref: TypeRef) -> PropertySchema:
        values = self._provider.enum_values(type_ref)
        if values and all(_is_integer(value) for value in values):
            return PropertySchema.scalar("integer", "int64", values)
        return PropertySchema.scalar(
            "string", allowed_values=tuple(str(value) for value in values)
        )


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
