"""Introspection provider for dataclasses and annotated Python classes."""

from __future__ import annotations

import dataclasses
import datetime
import inspect
import logging
import re
import sys
import types
import uuid
from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import (
    Annotated,
    Any,
    ClassVar,
    ForwardRef,
    Literal,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from .model_annotations import (
    API_PROPERTY_KEY,
    ApiProperty,
    find_accessor_property,
    find_api_model,
    find_registered_subtypes,
    find_type_info_property,
)
from .type_references import (
    UNCONSTRAINED_TYPE_NAME,
    PropertyDeclaration,
    PropertyMetadata,
    TypeRef,
    XmlNameDeclaration,
)

logger = logging.getLogger(__name__)

_SCALAR_TYPE_NAMES: dict[type, str] = {
    bool: "boolean",
    str: "string",
    int: "long",
    float: "double",
    Decimal: "number",
    datetime.datetime: "date-time",
    datetime.date: "date",
    datetime.time: "time",
    bytes: "binary",
    bytearray: "binary",
    uuid.UUID: "uuid",
    PurePath: "string",
}
_NON_CONTAINER_ITERABLES = (str, bytes, bytearray, memoryview)
_ACCESSOR_PREFIXES = ("get", "is")
_UNRESOLVED = object()


class DataclassIntrospectionProvider:
    """Expose dataclasses, annotated classes and ``typing`` annotations as ``TypeRef``s."""

    def __init__(self, *, use_docstrings: bool = True) -> None:
        self._use_docstrings = use_docstrings

    def construct_type(self, host_type: Any) -> TypeRef:
        return self._construct(host_type, {})

    def description(self, type_ref: TypeRef) -> str | None:
        cls = _model_class(type_ref)
        if cls is None:
            return None
        api_model = find_api_model(cls)
        if api_model is not None and api_model.description:
            return api_model.description
        if not self._use_docstrings:
            return None
        return _declared_docstring(cls)

    def xml_root_metadata(self, type_ref: TypeRef) -> XmlNameDeclaration | None:
        cls = _model_class(type_ref)
        api_model = find_api_model(cls) if cls is not None else None
        if api_model is None or api_model.xml_root is None or not api_model.xml_root.name:
            return None
        return api_model.xml_root

    def explicit_discriminator(self, type_ref: TypeRef) -> str | None:
        cls = _model_class(type_ref)
        api_model = find_api_model(cls) if cls is not None else None
        if api_model is None:
            return None
        return api_model.discriminator or None

    def type_info_property(self, type_ref: TypeRef) -> str | None:
        cls = _model_class(type_ref)
        return find_type_info_property(cls) if cls is not None else None

    def declared_subtypes(self, type_ref: TypeRef) -> Sequence[TypeRef]:
        cls = _model_class(type_ref)
        if cls is None:
            return ()
        api_model = find_api_model(cls)
        declared = list(api_model.subtypes) if api_model is not None else []
        for subtype in find_registered_subtypes(cls):
            if subtype not in declared:
                declared.append(subtype)
        return tuple(self.construct_type(subtype) for subtype in declared)

    def enum_values(self, type_ref: TypeRef) -> tuple[Any, ...]:
        cls = type_ref.raw_class
        if not (isinstance(cls, type) and issubclass(cls, Enum)):
            return ()
        return tuple(member.value for member in cls)

    def declared_properties(self, type_ref: TypeRef) -> Sequence[PropertyDeclaration]:
        cls = _model_class(type_ref)
        if cls is None or type_ref.is_container or type_ref.is_enum:
            return ()
        bindings = _type_bindings(type_ref.host_type)
        hints = _resolved_hints(cls)
        declarations: list[PropertyDeclaration] = []
        field_names: set[str] = set()
        for name, has_default, field_property in _field_members(cls, hints):
            field_names.add(name)
            annotation = hints.get(name, _UNRESOLVED)
            api_property = field_property or _annotated_property(annotation)
            if api_property is not None and api_property.hidden:
                continue
            declarations.append(
                PropertyDeclaration(
                    name=name,
                    member_type=self._member_type(annotation, bindings),
                    accessor_name=name,
                    metadata=_property_metadata(
                        api_property,
                        inferred_required=not has_default and not _is_optional(annotation),
                    ),
                )
            )
        for accessor_name, accessor in _accessor_members(cls):
            name = _bean_property_name(accessor_name)
            if name in field_names:
                continue
            api_property = find_accessor_property(accessor.fget)
            if api_property is not None and api_property.hidden:
                continue
            annotation = _return_annotation(accessor.fget)
            declarations.append(
                PropertyDeclaration(
                    name=name,
                    member_type=self._member_type(annotation, bindings),
                    accessor_name=accessor_name,
                    metadata=_property_metadata(
                        api_property or _annotated_property(annotation),
                        inferred_read_only=accessor.fset is None,
                    ),
                )
            )
        return tuple(declarations)

    def _member_type(self, annotation: Any, bindings: Mapping[Any, Any]) -> TypeRef | None:
        if annotation is _UNRESOLVED:
            return None
        return self._construct(annotation, bindings)

    def _construct(self, annotation: Any, bindings: Mapping[Any, Any]) -> TypeRef:
        # pylint: disable=too-many-return-statements
        if isinstance(annotation, TypeVar):
            bound = bindings.get(annotation)
            if bound is None:
                return _unconstrained()
            return self._construct(bound, {})
        supertype = getattr(annotation, "__supertype__", None)
        if supertype is not None:
            return self._construct(supertype, bindings)

        origin = get_origin(annotation)
        args = get_args(annotation)
        if origin is Annotated:
            return self._construct(args[0], bindings)
        if origin is Union or isinstance(annotation, types.UnionType):
            members = [arg for arg in args if arg is not type(None)]
            if len(members) == 1:
                return self._construct(members[0], bindings)
            return _unconstrained()
        if origin is Literal:
            return _literal_type(annotation, args)
        if annotation is Any or annotation is object or annotation is None:
            return _unconstrained()
        if isinstance(annotation, (str, ForwardRef)):
            return _unconstrained()

        raw = origin if origin is not None else annotation
        if not isinstance(raw, type):
            return _unconstrained()
        if issubclass(raw, Enum):
            return TypeRef(
                canonical_name=_model_name(raw),
                is_enum=True,
                raw_class=raw,
                host_type=annotation,
            )
        scalar_name = _scalar_name(raw)
        if scalar_name is not None:
            return TypeRef(canonical_name=scalar_name, raw_class=raw, host_type=annotation)
        if _is_container_class(raw):
            return self._construct_container(annotation, raw, args, bindings)
        if origin is not None:
            name = _model_name(raw) + "".join(
                _name_fragment(self._construct(arg, bindings).canonical_name) for arg in args
            )
            resolved_args = tuple(_bind(arg, bindings) for arg in args)
            return TypeRef(
                canonical_name=name,
                raw_class=raw,
                host_type=raw[resolved_args] if resolved_args else raw,
            )
        return TypeRef(canonical_name=_model_name(raw), raw_class=raw, host_type=annotation)

    def _construct_container(
        self, annotation: Any, raw: type, args: tuple[Any, ...], bindings: Mapping[Any, Any]
    ) -> TypeRef:
        if issubclass(raw, Mapping):
            key_type = self._construct(args[0], bindings) if args else _unconstrained()
            value_type = self._construct(args[1], bindings) if len(args) > 1 else _unconstrained()
            canonical_name = (
                f"{raw.__name__}[{key_type.canonical_name}, {value_type.canonical_name}]"
            )
            return TypeRef(
                canonical_name=canonical_name,
                is_container=True,
                key_type=key_type,
                value_type=value_type,
                raw_class=raw,
                host_type=annotation,
            )
        if raw is tuple and not (len(args) == 2 and args[1] is Ellipsis):
            # heterogeneous tuples have no single element type
            element_type = _unconstrained()
        else:
            element_type = self._construct(args[0], bindings) if args else _unconstrained()
        return TypeRef(
            canonical_name=f"{raw.__name__}[{element_type.canonical_name}]",
            is_container=True,
            value_type=element_type,
            raw_class=raw,
            host_type=annotation,
        )


def _unconstrained() -> TypeRef:
    return TypeRef(canonical_name=UNCONSTRAINED_TYPE_NAME, raw_class=object)


def _literal_type(annotation: Any, values: tuple[Any, ...]) -> TypeRef:
    if values and all(isinstance(value, str) for value in values):
        return TypeRef(canonical_name="string", raw_class=str, host_type=annotation)
    if values and all(isinstance(value, bool) for value in values):
        return TypeRef(canonical_name="boolean", raw_class=bool, host_type=annotation)
    if values and all(isinstance(value, int) and not isinstance(value, bool) for value in values):
        return TypeRef(canonical_name="long", raw_class=int, host_type=annotation)
    return _unconstrained()


def _scalar_name(raw: type) -> str | None:
    for base in raw.__mro__:
        name = _SCALAR_TYPE_NAMES.get(base)
        if name is not None:
            return name
    return None


def _is_container_class(raw: type) -> bool:
    if dataclasses.is_dataclass(raw) or issubclass(raw, _NON_CONTAINER_ITERABLES):
        return False
    return issubclass(raw, Iterable)


def _model_name(cls: type) -> str:
    api_model = find_api_model(cls)
    if api_model is not None and api_model.name:
        return api_model.name
    return cls.__name__


def _name_fragment(canonical_name: str) -> str:
    parts = re.findall(r"[A-Za-z0-9]+", canonical_name)
    return "".join(part[:1].upper() + part[1:] for part in parts)


def _bind(annotation: Any, bindings: Mapping[Any, Any]) -> Any:
    if isinstance(annotation, TypeVar):
        return bindings.get(annotation, Any)
    return annotation


def _model_class(type_ref: TypeRef) -> type | None:
    host_type = type_ref.host_type
    candidate = get_origin(host_type) or host_type
    return candidate if isinstance(candidate, type) else None


def _type_bindings(host_type: Any) -> dict[Any, Any]:
    origin = get_origin(host_type)
    if origin is None:
        return {}
    parameters = getattr(origin, "__parameters__", ())
    return dict(zip(parameters, get_args(host_type)))


def _declared_docstring(cls: type) -> str | None:
    doc = cls.__dict__.get("__doc__")
    if not doc or not isinstance(doc, str):
        return None
    if dataclasses.is_dataclass(cls) and doc.startswith(f"{cls.__name__}("):
        return None
    cleaned = inspect.cleandoc(doc)
    first_paragraph = cleaned.split("\n\n", 1)[0]
    return " ".join(first_paragraph.split()) or None


def _resolved_hints(owner: Any) -> dict[str, Any]:
    try:
        return get_type_hints(owner, include_extras=True)
    except (NameError, TypeError, AttributeError) as exc:
        logger.debug("Falling back to per-member annotations for %r: %s", owner, exc)
    hints: dict[str, Any] = {}
    for klass in reversed(inspect.getmro(owner)):
        if klass is object:
            continue
        module = sys.modules.get(klass.__module__)
        global_namespace = vars(module) if module is not None else {}
        # Classes defined in a function body can still name themselves.
        local_namespace = {**vars(klass), klass.__name__: klass, owner.__name__: owner}
        for name, annotation in inspect.get_annotations(klass).items():
            hints[name] = _evaluate_annotation(
                name, annotation, global_namespace, local_namespace
            )
    return hints


def _evaluate_annotation(
    name: str, annotation: Any, global_namespace: dict[str, Any], local_namespace: dict[str, Any]
) -> Any:
    holder = type("_AnnotationHolder", (), {"__annotations__": {name: annotation}})
    try:
        return get_type_hints(
            holder, global_namespace, local_namespace, include_extras=True
        )[name]
    except (NameError, SyntaxError, TypeError, AttributeError) as exc:
        logger.debug("Unresolvable annotation %r: %s", annotation, exc)
        return _UNRESOLVED


def _return_annotation(func: Any) -> Any:
    try:
        hints = get_type_hints(func, include_extras=True)
    except (NameError, TypeError, AttributeError) as exc:
        logger.debug("Unresolvable return annotation on %r: %s", func, exc)
        return _UNRESOLVED
    return hints.get("return", _UNRESOLVED)


def _field_members(
    cls: type, hints: Mapping[str, Any]
) -> Iterable[tuple[str, bool, ApiProperty | None]]:
    if dataclasses.is_dataclass(cls):
        for field in dataclasses.fields(cls):
            if field.name.startswith("_"):
                continue
            has_default = (
                field.default is not dataclasses.MISSING
                or field.default_factory is not dataclasses.MISSING
            )
            api_property = field.metadata.get(API_PROPERTY_KEY)
            yield field.name, has_default, api_property
        return
    seen: set[str] = set()
    for klass in reversed(inspect.getmro(cls)):
        if klass is object:
            continue
        for name in inspect.get_annotations(klass):
            if name in seen or name.startswith("_"):
                continue
            annotation = hints.get(name)
            if annotation is ClassVar or get_origin(annotation) is ClassVar:
                continue
            seen.add(name)
            yield name, hasattr(cls, name), None


def _accessor_members(cls: type) -> Iterable[tuple[str, property]]:
    accessors: dict[str, property] = {}
    for klass in reversed(inspect.getmro(cls)):
        for name, value in vars(klass).items():
            if isinstance(value, property) and not name.startswith("_") and value.fget is not None:
                accessors[name] = value
    return accessors.items()


def _bean_property_name(accessor_name: str) -> str:
    for prefix in _ACCESSOR_PREFIXES:
        if accessor_name.startswith(prefix) and len(accessor_name) > len(prefix):
            remainder = accessor_name[len(prefix) :].lstrip("_")
            if remainder:
                return remainder[0].lower() + remainder[1:]
    return accessor_name


def _annotated_property(annotation: Any) -> ApiProperty | None:
    if get_origin(annotation) is not Annotated:
        return None
    for extra in annotation.__metadata__:
        if isinstance(extra, ApiProperty):
            return extra
    return None


def _is_optional(annotation: Any) -> bool:
    if annotation is _UNRESOLVED:
        return True
    if get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    if get_origin(annotation) is Union or isinstance(annotation, types.UnionType):
        return type(None) in get_args(annotation)
    return annotation is None or annotation is Any


def _property_metadata(
    api_property: ApiProperty | None,
    *,
    inferred_required: bool | None = None,
    inferred_read_only: bool | None = None,
) -> PropertyMetadata:
    if api_property is None:
        return PropertyMetadata(required=inferred_required, read_only=inferred_read_only or None)
    return PropertyMetadata(
        required=api_property.required if api_property.required is not None else inferred_required,
        description=api_property.description or None,
        position=api_property.position,
        example=api_property.example,
        read_only=(
            api_property.read_only
            if api_property.read_only is not None
            else inferred_read_only or None
        ),
        xml_wrapper=api_property.xml_wrapper,
        xml_element_name=api_property.xml_element_name or None,
    )
