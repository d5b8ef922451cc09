"""Configuration loader service."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from type_schema_resolver.document_rendering import OutputFormat
from type_schema_resolver.scalar_mapping import ScalarFormat

from .runtime_settings import Configuration, IntrospectionSettings, OutputSettings

MODEL_TARGET_PATTERN = re.compile(r"^[A-Za-z_][\w.]*:[A-Za-z_][\w.]*$")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    models = parse_model_targets(parsed.get("models"), "models")
    output = _parse_output_section(parsed.get("output"), path.parent)
    introspection = _parse_introspection_section(parsed.get("introspection"))

    return Configuration(
        path=path,
        models=models,
        output=output,
        introspection=introspection,
    )


def parse_model_targets(value: Any, field_name: str) -> tuple[str, ...]:
    """Validate a list of ``package.module:ClassName`` targets."""
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Sequence) or not value:
        raise ConfigurationError(f"{field_name} must be a non-empty list of model targets.")
    targets: list[str] = []
    for item in value:
        target = _require_non_empty_string(item, f"{field_name} entry")
        if not MODEL_TARGET_PATTERN.match(target):
            raise ConfigurationError(
                f"{field_name} entry '{target}' must look like 'package.module:ClassName'."
            )
        if target not in targets:
            targets.append(target)
    return tuple(targets)


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    output_format = _require_non_empty_string(
        section.get("format", OutputFormat.YAML.value), "output.format"
    ).lower()
    allowed = {member.value for member in OutputFormat}
    if output_format not in allowed:
        raise ConfigurationError(
            f"output.format must be one of: {', '.join(sorted(allowed))}."
        )
    raw_path = _optional_string(section.get("path"), "output.path")
    output_path = _resolve_path(base_path, raw_path) if raw_path else None
    return OutputSettings(format=output_format, path=output_path)


def _parse_introspection_section(value: Any) -> IntrospectionSettings:
    section = _optional_mapping(value, "introspection")
    use_docstrings = section.get("use_docstrings", True)
    if not isinstance(use_docstrings, bool):
        raise ConfigurationError("introspection.use_docstrings must be a boolean.")
    overrides = _parse_scalar_overrides(section.get("scalar_overrides"))
    return IntrospectionSettings(use_docstrings=use_docstrings, scalar_overrides=overrides)


def _parse_scalar_overrides(value: Any) -> dict[str, ScalarFormat]:
    section = _optional_mapping(value, "introspection.scalar_overrides")
    overrides: dict[str, ScalarFormat] = {}
    for canonical_name, definition in section.items():
        label = f"introspection.scalar_overrides.{canonical_name}"
        entry = _optional_mapping(definition, label)
        scalar_type = _require_non_empty_string(entry.get("type"), f"{label}.type")
        scalar_format = _optional_string(entry.get("format"), f"{label}.format")
        overrides[str(canonical_name)] = ScalarFormat(scalar_type, scalar_format)
    return overrides


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
