"""Run execution domain exports."""

from .generation_run_use_case import RunExecutionError, execute_schema_generation_run
from .run_contracts import GeneratedSchema, RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "GeneratedSchema",
    "RunExecutionError",
    "execute_schema_generation_run",
]
