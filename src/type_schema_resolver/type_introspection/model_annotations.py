"""Declarative documentation metadata for Python model classes.

Model classes opt into schema metadata with plain decorators and dataclass
field metadata::

    @json_type_info(property="kind")
    @api_model(description="A shape", xml_root=XmlNameDeclaration(name="shape"))
    @dataclass
    class Shape:
        kind: str
        name: str = api_field(default="", description="Display name", position=0)

    @subtype_of(Shape)
    @dataclass
    class Circle(Shape):
        radius: float = 0.0

The metadata is only read by ``DataclassIntrospectionProvider``.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from .type_references import XmlNameDeclaration

API_PROPERTY_KEY = "type_schema_resolver.api_property"
_API_MODEL_ATTRIBUTE = "__api_model__"
_TYPE_INFO_ATTRIBUTE = "__json_type_info__"
_SUBTYPES_ATTRIBUTE = "__api_subtypes__"
_ACCESSOR_ATTRIBUTE = "__api_property__"

_ClassT = TypeVar("_ClassT", bound=type)
_FuncT = TypeVar("_FuncT", bound=Callable[..., Any])


@dataclass(frozen=True)
class ApiProperty:  # pylint: disable=too-many-instance-attributes
    """Documentation metadata for one model member."""

    description: str | None = None
    required: bool | None = None
    position: int | None = None
    example: Any = None
    read_only: bool | None = None
    xml_wrapper: XmlNameDeclaration | None = None
    xml_element_name: str | None = None
    hidden: bool = False


@dataclass(frozen=True)
class ApiModel:
    """Documentation metadata for one model class."""

    name: str | None = None
    description: str | None = None
    discriminator: str | None = None
    subtypes: tuple[type, ...] = ()
    xml_root: XmlNameDeclaration | None = None


def api_field(
    *,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
    **metadata: Any,
) -> Any:
    """Declare a dataclass field carrying ``ApiProperty`` metadata."""
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={API_PROPERTY_KEY: ApiProperty(**metadata)},
    )


def api_accessor(**metadata: Any) -> Callable[[_FuncT], _FuncT]:
    """Attach ``ApiProperty`` metadata to a getter; apply below ``@property``."""

    def decorate(func: _FuncT) -> _FuncT:
        setattr(func, _ACCESSOR_ATTRIBUTE, ApiProperty(**metadata))
        return func

    return decorate


def api_model(
    *,
    name: str | None = None,
    description: str | None = None,
    discriminator: str | None = None,
    subtypes: Sequence[type] = (),
    xml_root: XmlNameDeclaration | None = None,
) -> Callable[[_ClassT], _ClassT]:
    """Attach model-level metadata to a class (not inherited by subclasses)."""

    def decorate(cls: _ClassT) -> _ClassT:
        setattr(
            cls,
            _API_MODEL_ATTRIBUTE,
            ApiModel(
                name=name,
                description=description,
                discriminator=discriminator,
                subtypes=tuple(subtypes),
                xml_root=xml_root,
            ),
        )
        return cls

    return decorate


def json_type_info(
    *, property: str  # pylint: disable=redefined-builtin
) -> Callable[[_ClassT], _ClassT]:
    """Declare the property whose value selects the concrete subtype (inherited)."""

    def decorate(cls: _ClassT) -> _ClassT:
        setattr(cls, _TYPE_INFO_ATTRIBUTE, property)
        return cls

    return decorate


def subtype_of(parent: type) -> Callable[[_ClassT], _ClassT]:
    """Register the decorated class as a named subtype of ``parent``."""

    def decorate(cls: _ClassT) -> _ClassT:
        registered = parent.__dict__.get(_SUBTYPES_ATTRIBUTE)
        if registered is None:
            registered = []
            setattr(parent, _SUBTYPES_ATTRIBUTE, registered)
        if cls not in registered:
            registered.append(cls)
        return cls

    return decorate


def find_api_model(cls: type) -> ApiModel | None:
    value = cls.__dict__.get(_API_MODEL_ATTRIBUTE)
    return value if isinstance(value, ApiModel) else None


def find_type_info_property(cls: type) -> str | None:
    value = getattr(cls, _TYPE_INFO_ATTRIBUTE, None)
    return value or None


def find_registered_subtypes(cls: type) -> tuple[type, ...]:
    return tuple(cls.__dict__.get(_SUBTYPES_ATTRIBUTE) or ())


def find_accessor_property(func: Any) -> ApiProperty | None:
    value = getattr(func, _ACCESSOR_ATTRIBUTE, None)
    return value if isinstance(value, ApiProperty) else None
