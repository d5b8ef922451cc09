"""Type introspection exports."""

from .dataclass_provider import DataclassIntrospectionProvider
from .model_annotations import (
    ApiModel,
    ApiProperty,
    api_accessor,
    api_field,
    api_model,
    json_type_info,
    subtype_of,
)
from .provider_contracts import TypeIntrospectionProvider
from .type_references import (
    UNCONSTRAINED_TYPE_NAME,
    PropertyDeclaration,
    PropertyMetadata,
    TypeRef,
    XmlNameDeclaration,
)

__all__ = [
    "ApiModel",
    "ApiProperty",
    "DataclassIntrospectionProvider",
    "PropertyDeclaration",
    "PropertyMetadata",
    "TypeIntrospectionProvider",
    "TypeRef",
    "UNCONSTRAINED_TYPE_NAME",
    "XmlNameDeclaration",
    "api_accessor",
    "api_field",
    "api_model",
    "json_type_info",
    "subtype_of",
]
