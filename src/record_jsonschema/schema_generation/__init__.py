"""Schema generation exports."""

from .schema_builder import ARRAY_ITEM_DESCRIPTION, PRIMITIVE_TYPE_TAGS, SchemaBuilder
from .schema_generator import generate_schema
from .usage_counter import count_type_usages

__all__ = [
    "ARRAY_ITEM_DESCRIPTION",
    "PRIMITIVE_TYPE_TAGS",
    "SchemaBuilder",
    "count_type_usages",
    "generate_schema",
]
