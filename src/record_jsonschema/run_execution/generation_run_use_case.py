"""Configured schema generation use-case service."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any

from record_jsonschema.configuration import (
    Configuration,
    ConfigurationError,
    TargetConfig,
    TypeMetadataConfig,
    load_configuration,
)
from record_jsonschema.document_encoding import write_schema_document
from record_jsonschema.schema_generation import generate_schema
from record_jsonschema.type_descriptors import (
    DataclassDescriptorProvider,
    SchemaMetadataRegistry,
    TypeResolutionError,
    resolve_record_type,
)

from .run_contracts import GeneratedSchema, RunOutcome, RunRequest

_LOGGER = logging.getLogger(__name__)

SCHEMA_FILE_SUFFIX = ".schema.json"


class RunExecutionError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_schema_generation_run(
    request: RunRequest, *, registry: SchemaMetadataRegistry | None = None
) -> RunOutcome:
    """Generate and write every schema target listed in the configuration.

    Metadata entries from the configuration are registered into `registry`
    (a fresh one when omitted) before any schema is generated.
    """
    try:
        configuration = load_configuration(request.config_path)
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc

    run_registry = registry if registry is not None else SchemaMetadataRegistry()
    provider = DataclassDescriptorProvider(run_registry)
    try:
        _register_metadata(configuration.metadata, run_registry, provider)
        resolved_targets = [
            (target, resolve_record_type(target.type_path, provider=provider))
            for target in configuration.targets
        ]
    except TypeResolutionError as exc:
        raise RunExecutionError(str(exc)) from exc

    generated: list[GeneratedSchema] = []
    for target, record_type in resolved_targets:
        document = generate_schema(record_type, provider=provider)
        destination = _resolve_output_path(configuration, target, record_type)
        try:
            written = write_schema_document(document, destination, indent=configuration.indent)
        except OSError as exc:
            raise RunExecutionError(f"Failed to write schema file {destination}: {exc}") from exc
        _LOGGER.info("Wrote schema for %s to %s", target.type_path, written)
        generated.append(
            GeneratedSchema(
                type_path=target.type_path,
                output_path=written,
                definition_count=len(document.definitions),
            )
        )
    return RunOutcome(generated=tuple(generated))


def _register_metadata(
    entries: tuple[TypeMetadataConfig, ...],
    registry: SchemaMetadataRegistry,
    provider: DataclassDescriptorProvider,
) -> None:
    for entry in entries:
        record_type = resolve_record_type(entry.type_path, provider=provider)
        available_fields = {field.name for field in dataclasses.fields(record_type)}
        unknown = sorted(set(entry.fields) - available_fields)
        if unknown:
            raise RunExecutionError(
                f"metadata.{entry.type_path}.fields.{unknown[0]} does not exist on "
                f"{record_type.__name__}."
            )
        if entry.description is not None:
            registry.describe_type(record_type, entry.description)
        for field_name, field_metadata in entry.fields.items():
            if field_metadata.description is not None:
                registry.describe_field(record_type, field_name, field_metadata.description)
            if field_metadata.format is not None:
                registry.format_field(record_type, field_name, field_metadata.format)


def _resolve_output_path(
    configuration: Configuration, target: TargetConfig, record_type: Any
) -> Path:
    if target.output_path is None:
        return configuration.output_dir / f"{record_type.__name__}{SCHEMA_FILE_SUFFIX}"
    if target.output_path.is_absolute():
        return target.output_path
    return configuration.output_dir / target.output_path
