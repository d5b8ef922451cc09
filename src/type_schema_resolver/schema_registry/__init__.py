"""Schema registry exports."""

from .definition_registry import SchemaRegistry
from .schema_models import (
    ComposedSchema,
    ModelSchema,
    PropertyKind,
    PropertySchema,
    SchemaDefinition,
    XmlMetadata,
)

__all__ = [
    "ComposedSchema",
    "ModelSchema",
    "PropertyKind",
    "PropertySchema",
    "SchemaDefinition",
    "SchemaRegistry",
    "XmlMetadata",
]
