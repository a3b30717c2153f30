"""Top-level schema generation service."""

from __future__ import annotations

import logging
from typing import Any

from record_jsonschema.schema_nodes.schema_models import SchemaDocument
from record_jsonschema.type_descriptors.dataclass_introspection import (
    DataclassDescriptorProvider,
)
from record_jsonschema.type_descriptors.descriptor_models import TypeDescriptorProvider

from .schema_builder import SchemaBuilder
from .usage_counter import count_type_usages

_LOGGER = logging.getLogger(__name__)


def generate_schema(
    root_type: Any, *, provider: TypeDescriptorProvider | None = None
) -> SchemaDocument:
    """Generate the JSON Schema document for `root_type`.

    Record types referenced from more than one field site are placed in the
    document definitions and referenced by `$ref`; all others are inlined.
    Unsupported field types degrade to `string` properties.
    """
    descriptor_provider = provider or DataclassDescriptorProvider()
    root = descriptor_provider.describe(root_type)
    _LOGGER.debug("Generating schema for %s", root.name)

    usage_counts = count_type_usages(root, descriptor_provider)
    builder = SchemaBuilder(descriptor_provider, usage_counts)
    root_object = builder.build_object(root)

    return SchemaDocument(
        description=root_object.description,
        properties=root_object.properties,
        required=root_object.required,
        definitions=dict(builder.definitions),
    )
