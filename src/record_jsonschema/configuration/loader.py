"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    Configuration,
    FieldMetadataConfig,
    TargetConfig,
    TypeMetadataConfig,
)

DEFAULT_INDENT = 2
REQUIRED_PLACEHOLDER = "<REQUIRED>"
OPTIONAL_PLACEHOLDER = "<OPTIONAL>"


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

    output_dir_value = _optional_string(parsed.get("output_dir"), "output_dir")
    output_dir = _resolve_path(path.parent.resolve(), output_dir_value or ".")
    indent = _require_positive_int(parsed.get("indent", DEFAULT_INDENT), "indent")
    targets = _parse_targets_section(parsed.get("targets"))
    metadata = _parse_metadata_section(parsed.get("metadata"))

    return Configuration(
        path=path,
        output_dir=output_dir,
        indent=indent,
        targets=targets,
        metadata=metadata,
    )


def _parse_targets_section(value: Any) -> tuple[TargetConfig, ...]:
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise ConfigurationError("Configuration section 'targets' must be a list.")
    if not value:
        raise ConfigurationError("Configuration section 'targets' must not be empty.")

    targets: list[TargetConfig] = []
    for index, entry in enumerate(value):
        label = f"targets[{index}]"
        if isinstance(entry, str):
            entry = {"type": entry}
        section = _require_mapping(entry, label)
        type_path = _require_non_empty_string(section.get("type"), f"{label}.type")
        output = _optional_string(section.get("output"), f"{label}.output")
        targets.append(
            TargetConfig(type_path=type_path, output_path=Path(output) if output else None)
        )
    return tuple(targets)


def _parse_metadata_section(value: Any) -> tuple[TypeMetadataConfig, ...]:
    if value is None:
        return ()
    section = _require_mapping(value, "metadata")
    entries: list[TypeMetadataConfig] = []
    for type_path, raw in section.items():
        if not isinstance(type_path, str):
            raise ConfigurationError(
                f"Configuration section 'metadata' keys must be type paths, got {type_path!r}."
            )
        if _is_placeholder(type_path):
            continue
        label = f"metadata.{type_path}"
        type_section = _require_mapping(raw or {}, label)
        description = _optional_string(type_section.get("description"), f"{label}.description")
        fields = _parse_field_metadata(type_section.get("fields"), label=f"{label}.fields")
        entries.append(
            TypeMetadataConfig(type_path=type_path, description=description, fields=fields)
        )
    return tuple(entries)


def _parse_field_metadata(value: Any, *, label: str) -> dict[str, FieldMetadataConfig]:
    if value is None:
        return {}
    section = _require_mapping(value, label)
    fields: dict[str, FieldMetadataConfig] = {}
    for field_name, raw in section.items():
        field_label = f"{label}.{field_name}"
        if isinstance(raw, str):
            raw = {"description": raw}
        field_section = _require_mapping(raw or {}, field_label)
        fields[str(field_name)] = FieldMetadataConfig(
            description=_optional_string(
                field_section.get("description"), f"{field_label}.description"
            ),
            format=_optional_string(field_section.get("format"), f"{field_label}.format"),
        )
    return fields


def _is_placeholder(value: str) -> bool:
    return value.strip() == OPTIONAL_PLACEHOLDER


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    if stripped == REQUIRED_PLACEHOLDER:
        raise ConfigurationError(
            f"{field_name} still holds the {REQUIRED_PLACEHOLDER} placeholder."
        )
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if _is_placeholder(stripped):
        return None
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
