"""Schema generation exports."""

from .definition_table import DEFINITIONS_POINTER_PREFIX, DefinitionTable
from .record_walker import WalkContext, build_field_property, build_properties
from .required_fields import TAGS_KEY, is_required, required_keys
from .schema_assembler import (
    DEFAULT_DIALECT,
    assemble_schema,
    generate_properties,
    generate_required,
    generate_schema,
)
from .schema_models import PropertyDefinition, Schema
from .type_classifier import DEFAULT_ALIASES, Classification, Primitive, TypeClassifier

__all__ = [
    "Classification",
    "DEFAULT_ALIASES",
    "DEFAULT_DIALECT",
    "DEFINITIONS_POINTER_PREFIX",
    "DefinitionTable",
    "Primitive",
    "PropertyDefinition",
    "Schema",
    "TAGS_KEY",
    "TypeClassifier",
    "WalkContext",
    "assemble_schema",
    "build_field_property",
    "build_properties",
    "generate_properties",
    "generate_required",
    "generate_schema",
    "is_required",
    "required_keys",
]
