"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one resolution run."""

    config_path: str | None = None
    model_targets: tuple[str, ...] = ()
    output_format: str | None = None
    output_path: str | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed resolution run."""

    document_text: str
    schema_names: tuple[str, ...]
    output_path: Path | None
