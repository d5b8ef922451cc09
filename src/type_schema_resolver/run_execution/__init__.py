"""Run execution exports."""

from .resolution_run_use_case import ResolutionRunError, execute_resolution_run
from .run_contracts import RunOutcome, RunRequest

__all__ = [
    "ResolutionRunError",
    "RunOutcome",
    "RunRequest",
    "execute_resolution_run",
]
