"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one configured generation run."""

    config_path: str


@dataclass(frozen=True)
class GeneratedSchema:
    """One schema file written during a run."""

    type_path: str
    output_path: Path
    definition_count: int


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    generated: tuple[GeneratedSchema, ...]

    @property
    def output_paths(self) -> tuple[Path, ...]:
        return tuple(item.output_path for item in self.generated)
