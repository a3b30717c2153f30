"""Schema node entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import TypeAlias, assert_never

DRAFT_07_SCHEMA_URI = "http://json-schema.org/draft-07/schema#"
DEFINITIONS_POINTER_PREFIX = "#/definitions/"


@dataclass(frozen=True)
class PrimitiveNode:
    """Scalar JSON value (`string`, `integer`, `number` or `boolean`)."""

    type: str
    description: str
    format: str | None = None


@dataclass(frozen=True)
class EnumNode:
    """Closed set of allowed string values."""

    description: str
    enum: tuple[str, ...]
    type: str = "string"


@dataclass(frozen=True)
class ArrayNode:
    """Homogeneous list of items."""

    description: str
    items: SchemaNode
    type: str = "array"


@dataclass(frozen=True)
class ReferenceNode:
    """Pointer into the document definitions table."""

    description: str
    ref: str


@dataclass(frozen=True)
class ObjectNode:
    """Record schema with ordered properties."""

    description: str
    properties: Mapping[str, SchemaNode] = field(default_factory=dict)
    required: tuple[str, ...] = ()
    additional_properties: bool = False
    type: str = "object"


SchemaNode: TypeAlias = PrimitiveNode | EnumNode | ArrayNode | ReferenceNode | ObjectNode


@dataclass(frozen=True)
class SchemaDocument:
    """Top-level JSON Schema document for one root record type."""

    description: str
    properties: Mapping[str, SchemaNode]
    required: tuple[str, ...] = ()
    definitions: Mapping[str, ObjectNode] = field(default_factory=dict)
    schema_uri: str = DRAFT_07_SCHEMA_URI
    type: str = "object"
    additional_properties: bool = False


def definition_ref(type_name: str) -> str:
    """Return the `$ref` pointer for a definitions entry."""
    return f"{DEFINITIONS_POINTER_PREFIX}{type_name}"


def with_description(node: SchemaNode, description: str) -> SchemaNode:
    """Return a copy of `node` carrying `description`, other attributes untouched.

    Raises:
      AssertionError: If `node` is not one of the five schema node variants.
    """
    match node:
        case PrimitiveNode():
            return replace(node, description=description)
        case EnumNode():
            return replace(node, description=description)
        case ArrayNode():
            return replace(node, description=description)
        case ReferenceNode():
            return replace(node, description=description)
        case ObjectNode():
            return replace(node, description=description)
        case _:
            assert_never(node)
