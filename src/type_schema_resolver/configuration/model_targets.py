"""Import of configured root model classes."""

from __future__ import annotations

import importlib
from typing import Any


class ModelImportError(Exception):
    """Raised when a configured model target cannot be imported."""


def load_model_class(target: str) -> Any:
    """Import ``package.module:Attr.Path`` and return the named object."""
    module_name, separator, attribute_path = target.partition(":")
    if not separator or not module_name or not attribute_path:
        raise ModelImportError(f"Model target must look like 'package.module:ClassName': {target}")
    try:
        resolved: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ModelImportError(f"Cannot import module '{module_name}': {exc}") from exc
    for attribute in attribute_path.split("."):
        try:
            resolved = getattr(resolved, attribute)
        except AttributeError as exc:
            raise ModelImportError(
                f"Module '{module_name}' has no attribute '{attribute_path}'."
            ) from exc
    return resolved
