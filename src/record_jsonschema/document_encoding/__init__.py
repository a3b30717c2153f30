"""Schema document encoding exports."""

from .schema_document_codec import (
    SchemaDecodingError,
    decode_schema_document,
    document_to_dict,
    encode_schema_document,
    node_to_dict,
    write_schema_document,
)

__all__ = [
    "SchemaDecodingError",
    "decode_schema_document",
    "document_to_dict",
    "encode_schema_document",
    "node_to_dict",
    "write_schema_document",
]
