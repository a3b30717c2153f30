"""Side-table for schema metadata attached to record types and their fields."""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger(__name__)


class SchemaMetadataRegistry:
    """Descriptions and format hints keyed by record type and field name.

    Entries registered here form the property-level attachment scope and take
    priority over `dataclasses.field(metadata=...)` values on the same field.
    """

    def __init__(self) -> None:
        self._type_descriptions: dict[Any, str] = {}
        self._field_descriptions: dict[tuple[Any, str], str] = {}
        self._field_formats: dict[tuple[Any, str], str] = {}

    def describe_type(self, record_type: Any, description: str) -> None:
        """Override the object description generated for `record_type`."""
        _LOGGER.debug("Registering description for type %s", _type_label(record_type))
        self._type_descriptions[record_type] = description

    def describe_field(self, record_type: Any, field_name: str, description: str) -> None:
        """Override the description of one field node."""
        _LOGGER.debug(
            "Registering description for field %s.%s", _type_label(record_type), field_name
        )
        self._field_descriptions[(record_type, field_name)] = description

    def format_field(self, record_type: Any, field_name: str, format_hint: str) -> None:
        """Attach a raw `format` value to one field node."""
        _LOGGER.debug(
            "Registering format %r for field %s.%s",
            format_hint,
            _type_label(record_type),
            field_name,
        )
        self._field_formats[(record_type, field_name)] = format_hint

    def type_description(self, record_type: Any) -> str | None:
        return self._type_descriptions.get(record_type)

    def field_description(self, record_type: Any, field_name: str) -> str | None:
        return self._field_descriptions.get((record_type, field_name))

    def field_format(self, record_type: Any, field_name: str) -> str | None:
        return self._field_formats.get((record_type, field_name))

    def clear(self) -> None:
        """Drop every registered entry."""
        self._type_descriptions.clear()
        self._field_descriptions.clear()
        self._field_formats.clear()


def _type_label(record_type: Any) -> str:
    return getattr(record_type, "__name__", repr(record_type))


default_registry = SchemaMetadataRegistry()
