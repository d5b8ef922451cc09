"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from type_schema_resolver.scalar_mapping import ScalarFormat


@dataclass(frozen=True)
class OutputSettings:
    """Where and how the rendered definitions document is written."""

    format: str
    path: Path | None


@dataclass(frozen=True)
class IntrospectionSettings:
    """Options for the Python introspection provider and scalar table."""

    use_docstrings: bool = True
    scalar_overrides: Mapping[str, ScalarFormat] = field(default_factory=dict)


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    models: tuple[str, ...]
    output: OutputSettings
    introspection: IntrospectionSettings
