"""Scalar catalog tests."""

from __future__ import annotations

import pytest
from type_schema_resolver.scalar_mapping import ScalarFormat, ScalarMapper
from type_schema_resolver.schema_registry import PropertyKind


@pytest.mark.parametrize(
    ("canonical_name", "scalar_type", "scalar_format"),
    [
        ("boolean", "boolean", None),
        ("string", "string", None),
        ("integer", "integer", "int32"),
        ("long", "integer", "int64"),
        ("float", "number", "float"),
        ("double", "number", "double"),
        ("date-time", "string", "date-time"),
        ("uuid", "string", "uuid"),
    ],
)
def test_known_scalars_map_to_type_and_format(
    canonical_name: str, scalar_type: str, scalar_format: str | None
) -> None:
    prop = ScalarMapper().map_scalar(canonical_name)

    assert prop is not None
    assert prop.kind is PropertyKind.SCALAR
    assert prop.scalar_type == scalar_type
    assert prop.format == scalar_format


def test_unknown_names_are_not_scalars() -> None:
    mapper = ScalarMapper()

    assert mapper.map_scalar("Address") is None
    assert mapper.map_scalar("Object") is None
    assert mapper.map_scalar("list[string]") is None


def test_mapping_is_pure_and_returns_fresh_equal_schemas() -> None:
    mapper = ScalarMapper()

    assert mapper.map_scalar("long") == mapper.map_scalar("long")


def test_overrides_replace_and_extend_defaults() -> None:
    mapper = ScalarMapper(
        {
            "long": ScalarFormat("string", "int64-string"),
            "money": ScalarFormat("string", "decimal"),
        }
    )

    assert mapper.map_scalar("long").scalar_type == "string"
    assert mapper.map_scalar("money").format == "decimal"
    assert "money" in mapper.canonical_names
    assert ScalarMapper().map_scalar("long").scalar_type == "integer"
