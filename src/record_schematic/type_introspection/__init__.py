"""Type introspection exports."""

from .annotation_reader import (
    TAG_METADATA_KEY,
    TypeIntrospectionError,
    describe,
    json_field,
    json_tag,
)
from .tag_parsing import FieldTag, parse_tag, to_snake_case
from .type_descriptors import FieldDescriptor, TypeDescriptor, TypeKind

__all__ = [
    "FieldDescriptor",
    "FieldTag",
    "TAG_METADATA_KEY",
    "TypeDescriptor",
    "TypeIntrospectionError",
    "TypeKind",
    "describe",
    "json_field",
    "json_tag",
    "parse_tag",
    "to_snake_case",
]
