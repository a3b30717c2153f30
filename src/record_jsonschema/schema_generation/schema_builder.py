"""Build schema node trees from record type descriptors."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from record_jsonschema.schema_nodes.schema_models import (
    ArrayNode,
    ObjectNode,
    PrimitiveNode,
    ReferenceNode,
    SchemaNode,
    definition_ref,
    with_description,
)
from record_jsonschema.type_descriptors.descriptor_models import (
    FieldDescriptor,
    FieldKind,
    TypeDescriptor,
    TypeDescriptorProvider,
)

_LOGGER = logging.getLogger(__name__)

ARRAY_ITEM_DESCRIPTION = "Array item"
FALLBACK_TYPE_TAG = "string"

PRIMITIVE_TYPE_TAGS: Mapping[Any, str] = {
    str: "string",
    int: "integer",
    float: "number",
    Decimal: "number",
    bool: "boolean",
}


def default_object_description(type_name: str) -> str:
    return f"Generated schema for {type_name}"


def default_property_description(field_name: str) -> str:
    return f"Property {field_name}"


class SchemaBuilder:
    """Build object schemas, extracting reused record types into definitions.

    Record types counted more than once in `usage_counts` are emitted as
    references; each of them is built exactly once and stored in `definitions`.
    """

    def __init__(
        self,
        provider: TypeDescriptorProvider,
        usage_counts: Mapping[str, int],
        definitions: dict[str, ObjectNode] | None = None,
    ) -> None:
        self._provider = provider
        self._usage_counts = usage_counts
        self._definitions: dict[str, ObjectNode] = definitions if definitions is not None else {}

    @property
    def definitions(self) -> dict[str, ObjectNode]:
        return self._definitions

    def build_object(self, descriptor: TypeDescriptor) -> ObjectNode:
        """Return the object schema of `descriptor`, inlining or referencing nested records."""
        properties: dict[str, SchemaNode] = {}
        required: list[str] = []
        for field in descriptor.fields:
            properties[field.name] = self._build_field(field)
            if not field.nullable:
                required.append(field.name)

        description = descriptor.description
        if description is None:
            description = default_object_description(descriptor.name)
        return ObjectNode(
            description=description,
            properties=properties,
            required=tuple(required),
            additional_properties=False,
        )

    def _build_field(self, field: FieldDescriptor) -> SchemaNode:
        default_description = default_property_description(field.name)
        annotations = field.annotations

        node: SchemaNode
        if field.kind is FieldKind.PRIMITIVE:
            node = _primitive_node(field.declared_type, default_description, annotations.format)
        elif field.kind is FieldKind.LIST:
            node = ArrayNode(description=default_description, items=self._build_item(field))
        elif field.kind is FieldKind.RECORD:
            node = self._record_node(field.declared_type, default_description)
        else:
            node = PrimitiveNode(
                type=FALLBACK_TYPE_TAG, description=default_description, format=annotations.format
            )

        override = annotations.description
        if override is not None:
            node = with_description(node, override)
        return node

    def _build_item(self, field: FieldDescriptor) -> SchemaNode:
        if field.element_kind is FieldKind.RECORD:
            return self._record_node(field.element_type, ARRAY_ITEM_DESCRIPTION)
        if field.element_kind is FieldKind.PRIMITIVE:
            return _primitive_node(field.element_type, ARRAY_ITEM_DESCRIPTION)
        return PrimitiveNode(type=FALLBACK_TYPE_TAG, description=ARRAY_ITEM_DESCRIPTION)

    def _record_node(self, record_type: Any, reference_description: str) -> SchemaNode:
        descriptor = self._provider.describe(record_type)
        if self._usage_counts.get(descriptor.name, 0) > 1:
            return self._reference(descriptor, reference_description)
        return self.build_object(descriptor)

    def _reference(self, descriptor: TypeDescriptor, description: str) -> ReferenceNode:
        if descriptor.name not in self._definitions:
            _LOGGER.debug("Registering definition for %s", descriptor.name)
            self._definitions[descriptor.name] = self.build_object(descriptor)
        return ReferenceNode(description=description, ref=definition_ref(descriptor.name))


def _primitive_node(
    declared_type: Any, description: str, format_hint: str | None = None
) -> PrimitiveNode:
    type_tag = PRIMITIVE_TYPE_TAGS.get(declared_type, FALLBACK_TYPE_TAG)
    return PrimitiveNode(type=type_tag, description=description, format=format_hint)
