"""Type descriptor provider backed by dataclass introspection."""

from __future__ import annotations

import collections.abc
import dataclasses
import logging
import sys
import types
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Union, get_args, get_origin, get_type_hints

from .descriptor_models import FieldAnnotations, FieldDescriptor, FieldKind, TypeDescriptor
from .metadata_registry import SchemaMetadataRegistry, default_registry

_LOGGER = logging.getLogger(__name__)

PRIMITIVE_TYPES: frozenset[type] = frozenset({str, int, float, bool, Decimal})

_LIST_ORIGINS: frozenset[Any] = frozenset(
    {
        list,
        tuple,
        set,
        frozenset,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
        collections.abc.Set,
        collections.abc.MutableSet,
        collections.abc.Collection,
        collections.abc.Iterable,
    }
)

DESCRIPTION_METADATA_KEY = "description"
FORMAT_METADATA_KEY = "format"


class DataclassDescriptorProvider:
    """Describe dataclass types, reading overrides from a metadata registry."""

    def __init__(self, registry: SchemaMetadataRegistry | None = None) -> None:
        self._registry = registry if registry is not None else default_registry

    def is_record(self, candidate: Any) -> bool:
        return isinstance(candidate, type) and dataclasses.is_dataclass(candidate)

    def describe(self, record_type: Any) -> TypeDescriptor:
        if not self.is_record(record_type):
            raise TypeError(f"{record_type!r} is not a dataclass type.")
        hints = _resolve_type_hints(record_type)
        fields = tuple(
            self._describe_field(record_type, field, hints.get(field.name, field.type))
            for field in dataclasses.fields(record_type)
        )
        return TypeDescriptor(
            name=record_type.__name__,
            record_type=record_type,
            fields=fields,
            description=self._registry.type_description(record_type),
        )

    def _describe_field(
        self, record_type: type, field: dataclasses.Field, hint: Any
    ) -> FieldDescriptor:
        declared_type, nullable = _unwrap_optional(hint)
        kind = self._classify(declared_type)
        element_kind: FieldKind | None = None
        element_type: Any = None
        if kind is FieldKind.LIST:
            element_type = _list_element_type(declared_type)
            if element_type is not None:
                element_type, _ = _unwrap_optional(element_type)
                element_kind = self._classify(element_type)
            else:
                element_kind = FieldKind.UNSUPPORTED

        return FieldDescriptor(
            name=field.name,
            kind=kind,
            declared_type=declared_type,
            nullable=nullable,
            element_kind=element_kind,
            element_type=element_type,
            annotations=self._field_annotations(record_type, field),
        )

    def _classify(self, declared_type: Any) -> FieldKind:
        if self.is_record(declared_type):
            return FieldKind.RECORD
        if declared_type in _LIST_ORIGINS or get_origin(declared_type) in _LIST_ORIGINS:
            return FieldKind.LIST
        if declared_type in PRIMITIVE_TYPES:
            return FieldKind.PRIMITIVE
        return FieldKind.UNSUPPORTED

    def _field_annotations(self, record_type: type, field: dataclasses.Field) -> FieldAnnotations:
        storage: Mapping[str, Any] = field.metadata or {}
        return FieldAnnotations(
            property_description=self._registry.field_description(record_type, field.name),
            storage_description=_optional_text(storage.get(DESCRIPTION_METADATA_KEY)),
            property_format=self._registry.field_format(record_type, field.name),
            storage_format=_optional_text(storage.get(FORMAT_METADATA_KEY)),
        )


def _resolve_type_hints(record_type: type) -> dict[str, Any]:
    """Resolve field annotations, falling back to one field at a time.

    Fields whose annotation still fails keep their raw annotation and so
    classify as unsupported; their siblings resolve normally.
    """
    try:
        return get_type_hints(record_type)
    except (NameError, TypeError):
        pass

    module = sys.modules.get(record_type.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = dict(vars(record_type))
    hints: dict[str, Any] = {}
    for field in dataclasses.fields(record_type):
        holder = type("_FieldHint", (), {"__annotations__": {field.name: field.type}})
        try:
            hints.update(get_type_hints(holder, globalns=globalns, localns=localns))
        except (NameError, TypeError) as exc:
            _LOGGER.warning(
                "Could not resolve type hints for %s.%s (%s); the field maps to string.",
                record_type.__name__,
                field.name,
                exc,
            )
    return hints


def _unwrap_optional(hint: Any) -> tuple[Any, bool]:
    """Split `X | None` into `(X, True)`; other hints return `(hint, False)`."""
    if hint is None or hint is type(None):
        return type(None), True
    if get_origin(hint) not in (Union, types.UnionType):
        return hint, False
    args = get_args(hint)
    non_null = tuple(arg for arg in args if arg is not type(None))
    nullable = len(non_null) != len(args)
    if len(non_null) == 1:
        return non_null[0], nullable
    return Union[non_null], nullable  # noqa: UP007


def _list_element_type(list_type: Any) -> Any:
    args = get_args(list_type)
    if not args:
        return None
    return args[0]


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)
