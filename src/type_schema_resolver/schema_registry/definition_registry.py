"""Named schema registry shared by one resolution session."""

from __future__ import annotations

import threading
from collections.abc import Iterator

from .schema_models import ModelSchema, SchemaDefinition


class SchemaRegistry:
    """Mapping from schema name to its current definition.

    ``define`` is last-write-wins per name. The registry also carries the
    session bookkeeping the model resolver relies on to terminate on cyclic
    type graphs: names currently being expanded, names already completed, and
    subtype compositions waiting for an in-progress subtype to finish. Every
    read and write happens under one lock per registry.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._definitions: dict[str, SchemaDefinition] = {}
        self._in_progress: dict[str, ModelSchema] = {}
        self._completed: dict[str, ModelSchema] = {}
        self._deferred_parents: dict[str, list[ModelSchema]] = {}

    def define(self, name: str, schema: SchemaDefinition) -> None:
        with self._lock:
            self._definitions[name] = schema

    def setdefault(self, name: str, schema: SchemaDefinition) -> SchemaDefinition:
        """Register ``schema`` unless ``name`` already has a definition."""
        with self._lock:
            return self._definitions.setdefault(name, schema)

    def get(self, name: str) -> SchemaDefinition | None:
        with self._lock:
            return self._definitions.get(name)

    def names(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._definitions)

    def items(self) -> tuple[tuple[str, SchemaDefinition], ...]:
        with self._lock:
            return tuple(self._definitions.items())

    def as_dict(self) -> dict[str, SchemaDefinition]:
        with self._lock:
            return dict(self._definitions)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._definitions

    def __len__(self) -> int:
        with self._lock:
            return len(self._definitions)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def claim(self, shell: ModelSchema) -> ModelSchema | None:
        """Claim ``shell.name`` for expansion by the caller.

        Returns the completed model or the in-progress placeholder when the
        name is already taken; otherwise records ``shell`` as in progress,
        registers it as a placeholder and returns ``None``.
        """
        with self._lock:
            existing = self._completed.get(shell.name) or self._in_progress.get(shell.name)
            if existing is not None:
                return existing
            self._in_progress[shell.name] = shell
            self._definitions.setdefault(shell.name, shell)
            return None

    def finish_resolution(self, model: ModelSchema) -> list[ModelSchema]:
        """Record ``model`` as resolved and return the parents waiting to compose it."""
        with self._lock:
            assert self._in_progress.get(model.name) is model, (
                f"Schema {model.name!r} finished without holding its claim; cycle guard bypassed"
            )
            del self._in_progress[model.name]
            self._completed[model.name] = model
            self._definitions[model.name] = model
            return self._deferred_parents.pop(model.name, [])

    def in_progress(self, name: str) -> ModelSchema | None:
        with self._lock:
            return self._in_progress.get(name)

    def completed(self, name: str) -> ModelSchema | None:
        with self._lock:
            return self._completed.get(name)

    def defer_composition(self, child: ModelSchema, parent: ModelSchema) -> bool:
        """Queue ``parent`` for composition if ``child`` is still being expanded.

        Returns ``False`` when ``child`` already finished, in which case the
        caller composes it directly.
        """
        with self._lock:
            if self._in_progress.get(child.name) is not child:
                return False
            parents = self._deferred_parents.setdefault(child.name, [])
            if not any(existing is parent for existing in parents):
                parents.append(parent)
            return True
