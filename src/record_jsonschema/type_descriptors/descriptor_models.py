"""Type descriptor entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol


class FieldKind(str, Enum):
    """Classification of a declared field type."""

    PRIMITIVE = "primitive"
    LIST = "list"
    RECORD = "record"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class FieldAnnotations:
    """Metadata attached to one field at its two attachment scopes."""

    property_description: str | None = None
    storage_description: str | None = None
    property_format: str | None = None
    storage_format: str | None = None

    @property
    def description(self) -> str | None:
        """Return the effective description, property scope first."""
        if self.property_description is not None:
            return self.property_description
        return self.storage_description

    @property
    def format(self) -> str | None:
        """Return the effective format hint, property scope first."""
        if self.property_format is not None:
            return self.property_format
        return self.storage_format


@dataclass(frozen=True)
class FieldDescriptor:  # pylint: disable=too-many-instance-attributes
    """One declared field of a record type."""

    name: str
    kind: FieldKind
    declared_type: Any
    nullable: bool = False
    element_kind: FieldKind | None = None
    element_type: Any = None
    annotations: FieldAnnotations = field(default_factory=FieldAnnotations)


@dataclass(frozen=True)
class TypeDescriptor:
    """Record type with its ordered fields."""

    name: str
    record_type: Any
    fields: tuple[FieldDescriptor, ...]
    description: str | None = None


class TypeDescriptorProvider(Protocol):
    """Source of record type descriptors."""

    def is_record(self, candidate: Any) -> bool:
        """Return True when `candidate` is eligible for object schema generation."""

    def describe(self, record_type: Any) -> TypeDescriptor:
        """Return the descriptor of `record_type`."""
