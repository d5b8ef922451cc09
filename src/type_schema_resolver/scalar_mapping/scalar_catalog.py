"""Lookup of built-in scalar schemas by canonical type name."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from type_schema_resolver.schema_registry.schema_models import PropertySchema


@dataclass(frozen=True)
class ScalarFormat:
    """Base schema type and optional format of one scalar."""

    scalar_type: str
    format: str | None = None


DEFAULT_SCALAR_FORMATS: Mapping[str, ScalarFormat] = {
    "boolean": ScalarFormat("boolean"),
    "string": ScalarFormat("string"),
    "integer": ScalarFormat("integer", "int32"),
    "long": ScalarFormat("integer", "int64"),
    "float": ScalarFormat("number", "float"),
    "double": ScalarFormat("number", "double"),
    "number": ScalarFormat("number"),
    "date": ScalarFormat("string", "date"),
    "date-time": ScalarFormat("string", "date-time"),
    "time": ScalarFormat("string", "time"),
    "byte": ScalarFormat("string", "byte"),
    "binary": ScalarFormat("string", "binary"),
    "uuid": ScalarFormat("string", "uuid"),
    "uri": ScalarFormat("string", "uri"),
}


class ScalarMapper:
    """Pure canonical-name to scalar-schema lookup."""

    def __init__(self, overrides: Mapping[str, ScalarFormat] | None = None) -> None:
        self._formats = {**DEFAULT_SCALAR_FORMATS, **(overrides or {})}

    @property
    def canonical_names(self) -> tuple[str, ...]:
        return tuple(self._formats)

    def map_scalar(self, canonical_name: str) -> PropertySchema | None:
        scalar = self._formats.get(canonical_name)
        if scalar is None:
            return None
        return PropertySchema.scalar(scalar.scalar_type, scalar.format)
