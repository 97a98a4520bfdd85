"""Generate JSON Schema documents from typed record definitions."""

import logging

from .schema_generation import (
    DEFAULT_DIALECT,
    Primitive,
    PropertyDefinition,
    Schema,
    generate_properties,
    generate_required,
    generate_schema,
)
from .schema_writing import SchemaWriteError, write_schema_files
from .type_introspection import (
    FieldDescriptor,
    TypeDescriptor,
    TypeKind,
    describe,
    json_field,
    json_tag,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_DIALECT",
    "FieldDescriptor",
    "Primitive",
    "PropertyDefinition",
    "Schema",
    "SchemaWriteError",
    "TypeDescriptor",
    "TypeKind",
    "describe",
    "generate_properties",
    "generate_required",
    "generate_schema",
    "json_field",
    "json_tag",
    "write_schema_files",
]
