"""Schema metadata registry tests."""

from __future__ import annotations

from dataclasses import dataclass

from record_jsonschema.type_descriptors import SchemaMetadataRegistry


@dataclass
class Invoice:
    number: str


@dataclass
class Receipt:
    number: str


def test_entries_are_keyed_by_type_and_field() -> None:
    registry = SchemaMetadataRegistry()
    registry.describe_type(Invoice, "An invoice")
    registry.describe_field(Invoice, "number", "Invoice number")
    registry.format_field(Invoice, "number", "uuid")

    assert registry.type_description(Invoice) == "An invoice"
    assert registry.field_description(Invoice, "number") == "Invoice number"
    assert registry.field_format(Invoice, "number") == "uuid"
    assert registry.type_description(Receipt) is None
    assert registry.field_description(Receipt, "number") is None
    assert registry.field_format(Invoice, "missing") is None


def test_later_registration_replaces_earlier_one() -> None:
    registry = SchemaMetadataRegistry()
    registry.describe_field(Invoice, "number", "first")
    registry.describe_field(Invoice, "number", "second")

    assert registry.field_description(Invoice, "number") == "second"


def test_clear_drops_all_entries() -> None:
    registry = SchemaMetadataRegistry()
    registry.describe_type(Invoice, "An invoice")
    registry.format_field(Invoice, "number", "uuid")

    registry.clear()

    assert registry.type_description(Invoice) is None
    assert registry.field_format(Invoice, "number") is None
