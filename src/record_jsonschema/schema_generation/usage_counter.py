"""Count field-site references per nested record type."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping
from types import MappingProxyType

from record_jsonschema.type_descriptors.descriptor_models import (
    FieldKind,
    TypeDescriptor,
    TypeDescriptorProvider,
)

_LOGGER = logging.getLogger(__name__)


def count_type_usages(
    root: TypeDescriptor, provider: TypeDescriptorProvider
) -> Mapping[str, int]:
    """Return how many field sites reference each record type reachable from `root`.

    The root type itself is not counted. Nested types are revisited at every
    field site, so a self-referential type recurses until the stack is exhausted.
    """
    counts: Counter[str] = Counter()
    _count_fields(root, provider, counts)
    _LOGGER.debug("Usage counts for %s: %s", root.name, dict(counts))
    return MappingProxyType(dict(counts))


def _count_fields(
    descriptor: TypeDescriptor, provider: TypeDescriptorProvider, counts: Counter[str]
) -> None:
    for field in descriptor.fields:
        if field.kind is FieldKind.RECORD:
            _count_record(field.declared_type, provider, counts)
        elif field.kind is FieldKind.LIST and field.element_kind is FieldKind.RECORD:
            _count_record(field.element_type, provider, counts)


def _count_record(
    record_type: object, provider: TypeDescriptorProvider, counts: Counter[str]
) -> None:
    nested = provider.describe(record_type)
    counts[nested.name] += 1
    _count_fields(nested, provider, counts)
