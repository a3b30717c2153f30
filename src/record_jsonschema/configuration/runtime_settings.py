"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FieldMetadataConfig:
    """Description and format overrides for one field."""

    description: str | None = None
    format: str | None = None


@dataclass(frozen=True)
class TypeMetadataConfig:
    """Metadata overrides for one record type."""

    type_path: str
    description: str | None = None
    fields: Mapping[str, FieldMetadataConfig] = field(default_factory=dict)


@dataclass(frozen=True)
class TargetConfig:
    """One record type to render and the file it is written to."""

    type_path: str
    output_path: Path | None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    output_dir: Path
    indent: int
    targets: tuple[TargetConfig, ...]
    metadata: tuple[TypeMetadataConfig, ...] = ()
