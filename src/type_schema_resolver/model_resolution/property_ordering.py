"""Deterministic display order for the properties of one schema."""

from __future__ import annotations

from collections.abc import Iterable

from type_schema_resolver.schema_registry.schema_models import PropertySchema


class PropertyOrderer:
    """Total, stable property order.

    Properties without a position come first, in declaration order. Positioned
    properties follow in ascending position; equal positions keep declaration
    order.
    """

    @staticmethod
    def sort_key(prop: PropertySchema) -> tuple[bool, int]:
        if prop.position is None:
            return (False, 0)
        return (True, prop.position)

    def order(self, properties: Iterable[PropertySchema]) -> list[PropertySchema]:
        return sorted(properties, key=self.sort_key)
