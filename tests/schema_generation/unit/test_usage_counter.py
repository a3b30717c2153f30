"""Usage counter tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from record_jsonschema.schema_generation import generate_schema
from record_jsonschema.schema_generation.usage_counter import count_type_usages
from record_jsonschema.type_descriptors import DataclassDescriptorProvider, SchemaMetadataRegistry


@dataclass
class Coordinates:
    lat: float
    lon: float


@dataclass
class Street:
    name: str
    location: Coordinates


@dataclass
class Venue:
    title: str
    street: Street
    entrances: list[Coordinates]


@dataclass
class Festival:
    name: str
    main_stage: Venue
    side_stages: list[Venue]
    tags: list[str]
    sponsor: str | None


@dataclass
class Flat:
    name: str
    scores: list[int]


@dataclass
class TreeNode:
    label: str
    child: TreeNode | None


@dataclass
class Manager:
    name: str
    reports: list[Employee]


@dataclass
class Employee:
    name: str
    manager: Manager | None


def _provider() -> DataclassDescriptorProvider:
    return DataclassDescriptorProvider(SchemaMetadataRegistry())


def _count(record_type: type) -> dict[str, int]:
    provider = _provider()
    return dict(count_type_usages(provider.describe(record_type), provider))


def test_primitive_only_type_has_no_usages() -> None:
    assert _count(Flat) == {}


def test_root_type_itself_is_not_counted() -> None:
    counts = _count(Street)

    assert "Street" not in counts
    assert counts == {"Coordinates": 1}


def test_nested_fields_are_counted_at_every_site() -> None:
    counts = _count(Festival)

    assert counts["Venue"] == 2
    # Each Venue visit counts its Street and both Coordinates sites again.
    assert counts["Street"] == 2
    assert counts["Coordinates"] == 4


def test_list_element_records_are_counted() -> None:
    counts = _count(Venue)

    assert counts == {"Street": 1, "Coordinates": 2}


def test_counts_are_read_only() -> None:
    provider = _provider()
    counts = count_type_usages(provider.describe(Venue), provider)

    with pytest.raises(TypeError):
        counts["Street"] = 10  # type: ignore[index]


@pytest.mark.parametrize("record_type", [TreeNode, Manager])
def test_recursive_types_are_not_guarded_in_either_pass(record_type: type) -> None:
    provider = _provider()

    with pytest.raises(RecursionError):
        count_type_usages(provider.describe(record_type), provider)
    with pytest.raises(RecursionError):
        generate_schema(record_type, provider=provider)
