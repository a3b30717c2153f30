"""Type descriptor provider exports."""

from .dataclass_introspection import (
    DESCRIPTION_METADATA_KEY,
    FORMAT_METADATA_KEY,
    DataclassDescriptorProvider,
)
from .descriptor_models import (
    FieldAnnotations,
    FieldDescriptor,
    FieldKind,
    TypeDescriptor,
    TypeDescriptorProvider,
)
from .metadata_registry import SchemaMetadataRegistry, default_registry
from .type_resolution import TypeResolutionError, resolve_record_type

__all__ = [
    "DESCRIPTION_METADATA_KEY",
    "FORMAT_METADATA_KEY",
    "DataclassDescriptorProvider",
    "FieldAnnotations",
    "FieldDescriptor",
    "FieldKind",
    "TypeDescriptor",
    "TypeDescriptorProvider",
    "SchemaMetadataRegistry",
    "default_registry",
    "TypeResolutionError",
    "resolve_record_type",
]
