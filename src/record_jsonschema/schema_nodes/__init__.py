"""Schema node tree exports."""

from .schema_models import (
    DRAFT_07_SCHEMA_URI,
    ArrayNode,
    EnumNode,
    ObjectNode,
    PrimitiveNode,
    ReferenceNode,
    SchemaDocument,
    SchemaNode,
    definition_ref,
    with_description,
)

__all__ = [
    "DRAFT_07_SCHEMA_URI",
    "ArrayNode",
    "EnumNode",
    "ObjectNode",
    "PrimitiveNode",
    "ReferenceNode",
    "SchemaDocument",
    "SchemaNode",
    "definition_ref",
    "with_description",
]
