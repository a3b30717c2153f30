"""Generate JSON Schema documents from dataclass record types."""

import logging

from .document_encoding import encode_schema_document
from .schema_generation import generate_schema
from .schema_nodes import SchemaDocument
from .type_descriptors import SchemaMetadataRegistry, default_registry

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SchemaDocument",
    "SchemaMetadataRegistry",
    "default_registry",
    "encode_schema_document",
    "generate_schema",
]
