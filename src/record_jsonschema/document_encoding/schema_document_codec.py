"""JSON encoding and lenient decoding of schema documents."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, assert_never

from record_jsonschema.schema_nodes.schema_models import (
    DRAFT_07_SCHEMA_URI,
    ArrayNode,
    EnumNode,
    ObjectNode,
    PrimitiveNode,
    ReferenceNode,
    SchemaDocument,
    SchemaNode,
)

_TRUE_STRINGS = frozenset({"true", "yes", "1", "on"})
_FALSE_STRINGS = frozenset({"false", "no", "0", "off", ""})


class SchemaDecodingError(Exception):
    """Raised when schema document text cannot be decoded."""


def node_to_dict(node: SchemaNode) -> dict[str, Any]:
    """Return the JSON-compatible mapping of one schema node."""
    match node:
        case PrimitiveNode():
            rendered: dict[str, Any] = {"type": node.type, "description": node.description}
            if node.format is not None:
                rendered["format"] = node.format
            return rendered
        case EnumNode():
            return {"description": node.description, "type": node.type, "enum": list(node.enum)}
        case ArrayNode():
            return {
                "description": node.description,
                "type": node.type,
                "items": node_to_dict(node.items),
            }
        case ReferenceNode():
            return {"description": node.description, "$ref": node.ref}
        case ObjectNode():
            return {
                "description": node.description,
                "type": node.type,
                "properties": _properties_to_dict(node.properties),
                "required": list(node.required),
                "additionalProperties": node.additional_properties,
            }
        case _:
            assert_never(node)


def document_to_dict(document: SchemaDocument) -> dict[str, Any]:
    """Return the JSON-compatible mapping of a schema document; empty definitions are omitted."""
    rendered: dict[str, Any] = {
        "$schema": document.schema_uri,
        "description": document.description,
        "type": document.type,
        "properties": _properties_to_dict(document.properties),
        "required": list(document.required),
        "additionalProperties": document.additional_properties,
    }
    if document.definitions:
        rendered["definitions"] = {
            name: node_to_dict(definition) for name, definition in document.definitions.items()
        }
    return rendered


def encode_schema_document(document: SchemaDocument, *, indent: int | None = 2) -> str:
    """Render a schema document as JSON text."""
    return json.dumps(document_to_dict(document), indent=indent, ensure_ascii=False)


def write_schema_document(
    document: SchemaDocument, output_path: Path | str, *, indent: int | None = 2
) -> Path:
    """Write a schema document to `output_path`, creating parent directories.

    Returns:
      The resolved destination path.
    """
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(encode_schema_document(document, indent=indent) + "\n", encoding="utf-8")
    return destination.resolve()


def decode_schema_document(text: str) -> SchemaDocument:
    """Parse JSON text into a schema document, ignoring unknown keys."""
    try:
        root = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaDecodingError(f"Invalid schema document JSON: {exc}") from exc
    if not isinstance(root, Mapping):
        raise SchemaDecodingError("Schema document root must be an object.")

    definitions_raw = root.get("definitions") or {}
    if not isinstance(definitions_raw, Mapping):
        raise SchemaDecodingError("Schema document definitions must be an object.")
    definitions: dict[str, ObjectNode] = {}
    for name, raw in definitions_raw.items():
        definition = _decode_node(raw, path=f"definitions.{name}")
        if not isinstance(definition, ObjectNode):
            raise SchemaDecodingError(f"Definition '{name}' must be an object schema.")
        definitions[str(name)] = definition

    return SchemaDocument(
        description=_text(root.get("description")),
        properties=_decode_properties(root.get("properties"), path="properties"),
        required=_decode_required(root.get("required")),
        definitions=definitions,
        schema_uri=_text(root.get("$schema"), DRAFT_07_SCHEMA_URI),
        additional_properties=_lenient_bool(root.get("additionalProperties"), default=False),
    )


def _properties_to_dict(properties: Mapping[str, SchemaNode]) -> dict[str, Any]:
    return {name: node_to_dict(child) for name, child in properties.items()}


def _decode_node(raw: Any, *, path: str) -> SchemaNode:
    if not isinstance(raw, Mapping):
        raise SchemaDecodingError(f"Schema node at '{path}' must be an object.")
    description = _text(raw.get("description"))
    if "$ref" in raw:
        return ReferenceNode(description=description, ref=_text(raw.get("$ref")))
    if "enum" in raw:
        values = raw.get("enum")
        if not isinstance(values, Sequence) or isinstance(values, str):
            raise SchemaDecodingError(f"Enum values at '{path}' must be a list.")
        return EnumNode(
            description=description,
            enum=tuple(str(value) for value in values),
            type=_text(raw.get("type"), "string"),
        )

    node_type = _text(raw.get("type"), "string")
    if node_type == "array":
        items = raw.get("items")
        item_node = (
            _decode_node(items, path=f"{path}.items")
            if items is not None
            else PrimitiveNode(type="string", description="")
        )
        return ArrayNode(description=description, items=item_node)
    if node_type == "object":
        return ObjectNode(
            description=description,
            properties=_decode_properties(raw.get("properties"), path=f"{path}.properties"),
            required=_decode_required(raw.get("required")),
            additional_properties=_lenient_bool(raw.get("additionalProperties"), default=False),
        )
    format_hint = raw.get("format")
    return PrimitiveNode(
        type=node_type,
        description=description,
        format=None if format_hint is None else str(format_hint),
    )


def _decode_properties(raw: Any, *, path: str) -> dict[str, SchemaNode]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise SchemaDecodingError(f"'{path}' must be an object.")
    return {str(name): _decode_node(child, path=f"{path}.{name}") for name, child in raw.items()}


def _decode_required(raw: Any) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str) or not isinstance(raw, Sequence):
        raise SchemaDecodingError("'required' must be a list of field names.")
    return tuple(str(name) for name in raw)


def _text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def _lenient_bool(value: Any, *, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise SchemaDecodingError(f"Expected a boolean value, got: {value!r}")
