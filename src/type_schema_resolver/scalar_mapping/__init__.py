"""Scalar mapping exports."""

from .scalar_catalog import DEFAULT_SCALAR_FORMATS, ScalarFormat, ScalarMapper

__all__ = ["DEFAULT_SCALAR_FORMATS", "ScalarFormat", "ScalarMapper"]
