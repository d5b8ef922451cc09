"""Model resolution exports."""

from .model_resolver import ModelResolver, display_name
from .property_ordering import PropertyOrderer
from .property_resolver import PropertyResolver
from .resolution_session import resolve_models

__all__ = [
    "ModelResolver",
    "PropertyOrderer",
    "PropertyResolver",
    "display_name",
    "resolve_models",
]
