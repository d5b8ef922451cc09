"""End-to-end resolution of dataclass models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from type_schema_resolver.document_rendering import render_definitions
from type_schema_resolver.model_resolution import resolve_models
from type_schema_resolver.schema_registry import ComposedSchema, ModelSchema, PropertyKind
from type_schema_resolver.type_introspection import (
    XmlNameDeclaration,
    api_field,
    api_model,
    json_type_info,
    subtype_of,
)


class Species(Enum):
    CAT = "cat"
    DOG = "dog"


@dataclass
class TreeNode:
    """A node in a tree."""

    label: str
    children: list[TreeNode] = field(default_factory=list)
    parent: Optional[TreeNode] = None


@json_type_info(property="kind")
@dataclass
class Animal:
    kind: str
    name: str
    species: Species = Species.CAT


@subtype_of(Animal)
@dataclass
class Cat(Animal):
    indoor: bool = True
    owner: Optional[Owner] = None


@api_model(xml_root=XmlNameDeclaration(name="owner"))
@dataclass
class Owner:
    email: str = api_field(description="Contact address", position=1)
    pets: dict[str, Animal] = api_field(
        default_factory=dict, position=0, xml_wrapper=XmlNameDeclaration()
    )
    extras: dict[str, Any] = field(default_factory=dict)
    payload: Any = None


def test_self_referencing_dataclass_resolves_to_one_schema() -> None:
    registry = resolve_models([TreeNode])

    assert registry.names() == ("TreeNode",)
    node = registry.get("TreeNode")
    assert node.description == "A node in a tree."
    assert node.properties["children"].items.reference == "TreeNode"
    assert node.properties["parent"].reference == "TreeNode"
    assert node.required_properties == ("label",)


def test_subtype_graph_resolves_regardless_of_root_order() -> None:
    forward = resolve_models([Animal, Cat])
    backward = resolve_models([Cat, Animal])

    for registry in (forward, backward):
        assert sorted(registry.names()) == ["Animal", "Cat", "Object", "Owner"]
        cat = registry.get("Cat")
        assert isinstance(cat, ComposedSchema)
        assert cat.parent == "Animal"
        assert list(cat.child.properties) == ["indoor", "owner"]
        assert cat.child.discriminator is None
        animal = registry.get("Animal")
        assert isinstance(animal, ModelSchema)
        assert animal.discriminator == "kind"
        assert animal.properties["species"].allowed_values == ("cat", "dog")
    assert render_definitions(forward) == render_definitions(backward)


def test_owner_properties_follow_positions_and_unconstrained_rules() -> None:
    registry = resolve_models([Owner])

    owner = registry.get("Owner")
    assert list(owner.properties) == ["extras", "payload", "pets", "email"]
    assert owner.properties["extras"].kind is PropertyKind.MAP
    assert owner.properties["extras"].additional_properties.scalar_type == "string"
    assert owner.properties["payload"].reference == "Object"
    assert owner.properties["pets"].additional_properties.reference == "Animal"
    assert owner.properties["pets"].xml.wrapped is True
    assert owner.xml.name == "owner"
    assert registry.get("Object").properties == {}


def test_container_roots_contribute_their_element_type() -> None:
    registry = resolve_models([list[TreeNode], int, Species])

    assert registry.names() == ("TreeNode",)


def test_rendered_document_uses_definition_references() -> None:
    document = render_definitions(resolve_models([Cat]))

    assert list(document) == sorted(document)
    cat = document["Cat"]
    assert cat["allOf"][0] == {"$ref": "#/definitions/Animal"}
    assert cat["allOf"][1]["properties"]["indoor"] == {"type": "boolean"}
    assert document["Animal"]["discriminator"] == "kind"
    assert document["Animal"]["required"] == ["kind", "name"]
    assert document["Owner"]["properties"]["payload"] == {"$ref": "#/definitions/Object"}
    assert document["Object"] == {"type": "object"}


def test_locally_defined_self_referencing_dataclass_keeps_its_children() -> None:
    @dataclass
    class LocalNode:
        label: str
        children: list[LocalNode] = field(default_factory=list)

    registry = resolve_models([LocalNode])

    assert registry.names() == ("LocalNode",)
    node = registry.get("LocalNode")
    assert list(node.properties) == ["label", "children"]
    assert node.properties["children"].items.reference == "LocalNode"
