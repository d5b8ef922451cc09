"""Render a schema registry as a Swagger 2.0 ``definitions`` document."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

import yaml

from type_schema_resolver.schema_registry import (
    ComposedSchema,
    ModelSchema,
    PropertyKind,
    PropertySchema,
    SchemaDefinition,
    SchemaRegistry,
    XmlMetadata,
)

DEFINITIONS_REF_PREFIX = "#/definitions/"


class OutputFormat(str, Enum):
    """Supported document encodings."""

    YAML = "yaml"
    JSON = "json"


class RenderError(Exception):
    """Raised when a rendered document cannot be encoded."""


def render_definitions(registry: SchemaRegistry) -> dict[str, Any]:
    """Return the ``definitions`` object for every registered schema, sorted by name."""
    return {
        name: render_schema(definition)
        for name, definition in sorted(registry.items(), key=lambda item: item[0])
    }


def render_schema(definition: SchemaDefinition) -> dict[str, Any]:
    if isinstance(definition, ComposedSchema):
        return {
            "allOf": [
                {"$ref": f"{DEFINITIONS_REF_PREFIX}{definition.parent}"},
                _render_model(definition.child),
            ]
        }
    return _render_model(definition)


def render_property(prop: PropertySchema) -> dict[str, Any]:
    rendered = _render_payload(prop)
    if prop.description:
        rendered["description"] = prop.description
    if prop.example is not None:
        rendered["example"] = prop.example
    if prop.read_only:
        rendered["readOnly"] = True
    if prop.xml is not None:
        rendered["xml"] = _render_xml(prop.xml)
    return rendered


def dump_document(document: dict[str, Any], output_format: OutputFormat | str) -> str:
    """Encode a rendered document as JSON or YAML text."""
    try:
        resolved_format = OutputFormat(output_format)
    except ValueError as exc:
        raise RenderError(f"Unsupported output format: {output_format}") from exc
    try:
        if resolved_format is OutputFormat.JSON:
            return json.dumps(document, indent=2, default=str) + "\n"
        return yaml.safe_dump(_plain(document), sort_keys=False, allow_unicode=True)
    except (TypeError, ValueError, yaml.YAMLError) as exc:
        raise RenderError(f"Failed to encode document: {exc}") from exc


def _render_model(model: ModelSchema) -> dict[str, Any]:
    rendered: dict[str, Any] = {"type": "object"}
    required = list(model.required_properties)
    if required:
        rendered["required"] = required
    if model.discriminator:
        rendered["discriminator"] = model.discriminator
    if model.description:
        rendered["description"] = model.description
    if model.properties:
        rendered["properties"] = {
            name: render_property(prop) for name, prop in model.properties.items()
        }
    if model.xml is not None:
        rendered["xml"] = _render_xml(model.xml)
    return rendered


def _render_payload(prop: PropertySchema) -> dict[str, Any]:
    if prop.kind is PropertyKind.REFERENCE:
        return {"$ref": f"{DEFINITIONS_REF_PREFIX}{prop.reference}"}
    if prop.kind is PropertyKind.ARRAY:
        rendered: dict[str, Any] = {"type": "array"}
        if prop.items is not None:
            rendered["items"] = render_property(prop.items)
        if prop.unique_items:
            rendered["uniqueItems"] = True
        return rendered
    if prop.kind is PropertyKind.MAP:
        rendered = {"type": "object"}
        if prop.additional_properties is not None:
            rendered["additionalProperties"] = render_property(prop.additional_properties)
        return rendered
    rendered = {"type": prop.scalar_type}
    if prop.format:
        rendered["format"] = prop.format
    if prop.allowed_values:
        rendered["enum"] = list(prop.allowed_values)
    return rendered


def _render_xml(xml: XmlMetadata) -> dict[str, Any]:
    rendered: dict[str, Any] = {}
    if xml.name:
        rendered["name"] = xml.name
    if xml.namespace:
        rendered["namespace"] = xml.namespace
    if xml.wrapped:
        rendered["wrapped"] = True
    return rendered


def _plain(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)
