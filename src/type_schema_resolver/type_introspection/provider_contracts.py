"""Contract consumed by the resolvers to inspect host types."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from .type_references import PropertyDeclaration, TypeRef, XmlNameDeclaration


class TypeIntrospectionProvider(Protocol):
    """Narrow capability set the resolvers query instead of reflecting themselves."""

    def construct_type(self, host_type: Any) -> TypeRef:
        """Build the type handle for a host type or annotation."""

    def description(self, type_ref: TypeRef) -> str | None:
        """Return the human description of a composite type."""

    def xml_root_metadata(self, type_ref: TypeRef) -> XmlNameDeclaration | None:
        """Return the declared XML root element, if any."""

    def declared_properties(self, type_ref: TypeRef) -> Sequence[PropertyDeclaration]:
        """Return the type's members in declaration order."""

    def explicit_discriminator(self, type_ref: TypeRef) -> str | None:
        """Return the discriminator declared in model-level metadata."""

    def type_info_property(self, type_ref: TypeRef) -> str | None:
        """Return the property named by a polymorphic type-resolution annotation."""

    def declared_subtypes(self, type_ref: TypeRef) -> Sequence[TypeRef]:
        """Return the named subtypes registered against the type."""

    def enum_values(self, type_ref: TypeRef) -> tuple[Any, ...]:
        """Return the member values of an enumeration type."""
