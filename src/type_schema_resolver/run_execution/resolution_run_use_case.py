"""Resolution run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from type_schema_resolver.configuration import (
    ConfigurationError,
    IntrospectionSettings,
    ModelImportError,
    load_configuration,
    load_model_class,
    parse_model_targets,
)
from type_schema_resolver.document_rendering import (
    OutputFormat,
    RenderError,
    dump_document,
    render_definitions,
)
from type_schema_resolver.model_resolution import resolve_models
from type_schema_resolver.scalar_mapping import ScalarMapper
from type_schema_resolver.type_introspection import DataclassIntrospectionProvider

from .run_contracts import RunOutcome, RunRequest

logger = logging.getLogger(__name__)

ModelImporter = Callable[[str], Any]


class ResolutionRunError(Exception):
    """Raised when a resolution run cannot be completed."""


def execute_resolution_run(
    request: RunRequest, *, import_model: ModelImporter | None = None
) -> RunOutcome:
    """Resolve the requested root models and render their definitions document."""
    importer = import_model or load_model_class
    try:
        configuration = load_configuration(request.config_path) if request.config_path else None
        targets = _merge_targets(
            configuration.models if configuration else (), request.model_targets
        )
        roots = tuple(importer(target) for target in targets)
    except (ConfigurationError, ModelImportError) as exc:
        raise ResolutionRunError(str(exc)) from exc

    introspection = configuration.introspection if configuration else IntrospectionSettings()
    output_format = request.output_format or (
        configuration.output.format if configuration else OutputFormat.YAML.value
    )
    output_path = _resolve_output_path(
        request.output_path, configuration.output.path if configuration else None
    )

    logger.info("Resolving %d root model(s)", len(roots))
    registry = resolve_models(
        roots,
        provider=DataclassIntrospectionProvider(use_docstrings=introspection.use_docstrings),
        scalar_mapper=ScalarMapper(introspection.scalar_overrides),
    )
    try:
        document_text = dump_document(render_definitions(registry), output_format)
    except RenderError as exc:
        raise ResolutionRunError(str(exc)) from exc

    if output_path is not None:
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(document_text, encoding="utf-8")
        except OSError as exc:
            raise ResolutionRunError(f"Failed to write {output_path}: {exc}") from exc
        logger.info("Wrote %d schema definition(s) to %s", len(registry), output_path)

    return RunOutcome(
        document_text=document_text,
        schema_names=tuple(sorted(registry.names())),
        output_path=output_path,
    )


def _merge_targets(configured: tuple[str, ...], requested: tuple[str, ...]) -> tuple[str, ...]:
    if not configured and not requested:
        raise ConfigurationError("Provide --config or at least one --model target.")
    merged = list(configured)
    if requested:
        for target in parse_model_targets(list(requested), "--model"):
            if target not in merged:
                merged.append(target)
    return tuple(merged)


def _resolve_output_path(requested: str | None, configured: Path | None) -> Path | None:
    if requested:
        return Path(requested).resolve()
    return configured
