"""Resolve a batch of root types into one schema registry."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from type_schema_resolver.scalar_mapping import ScalarMapper
from type_schema_resolver.schema_registry import SchemaRegistry
from type_schema_resolver.type_introspection import (
    DataclassIntrospectionProvider,
    TypeIntrospectionProvider,
    TypeRef,
)

from .model_resolver import ModelResolver

logger = logging.getLogger(__name__)


def resolve_models(
    host_types: Iterable[Any],
    *,
    provider: TypeIntrospectionProvider | None = None,
    scalar_mapper: ScalarMapper | None = None,
    registry: SchemaRegistry | None = None,
) -> SchemaRegistry:
    """Resolve every root type (and everything reachable from it) into one registry.

    Container roots contribute their element or value type. Scalar and
    enumeration roots have no named schema and are skipped.
    """
    resolved_provider = provider or DataclassIntrospectionProvider()
    resolved_scalar_mapper = scalar_mapper or ScalarMapper()
    session_registry = registry if registry is not None else SchemaRegistry()
    resolver = ModelResolver(resolved_provider, scalar_mapper=resolved_scalar_mapper)

    for host_type in host_types:
        root = _root_type(resolved_provider.construct_type(host_type))
        if root.is_enum or resolved_scalar_mapper.map_scalar(root.canonical_name) is not None:
            logger.warning("Skipping root %s: it has no named schema", root.canonical_name)
            continue
        resolver.resolve(root, session_registry)
    return session_registry


def _root_type(type_ref: TypeRef) -> TypeRef:
    while type_ref.is_container and type_ref.value_type is not None:
        type_ref = type_ref.value_type
    return type_ref
