"""Top-level schema generation entry points."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from record_schematic.type_introspection import TypeDescriptor, describe

from .record_walker import WalkContext, build_properties
from .required_fields import required_keys
from .schema_models import OBJECT_TYPE, PropertyDefinition, Schema
from .type_classifier import Primitive, TypeClassifier

DEFAULT_DIALECT = "http://json-schema.org/draft-07/schema#"


def generate_schema(
    root_type: Any,
    title: str,
    dialect: str = DEFAULT_DIALECT,
    *,
    aliases: Mapping[str, Primitive] | None = None,
) -> Schema:
    """Generate a complete JSON Schema for a record type.

    Args:
      root_type: A dataclass (or any annotation `describe` understands) or a
        prebuilt `TypeDescriptor`.
      title: Value of the schema `title` keyword.
      dialect: Value of the `$schema` keyword, written verbatim.
      aliases: Extra type-name to primitive mappings for the classifier.

    Returns:
      The assembled schema. `definitions` is only populated when at least one
      composite was hoisted.
    """
    return assemble_schema(
        _as_descriptor(root_type), title, dialect, classifier=TypeClassifier(aliases)
    )


def assemble_schema(
    descriptor: TypeDescriptor,
    title: str,
    dialect: str,
    *,
    classifier: TypeClassifier | None = None,
) -> Schema:
    context = WalkContext(classifier=classifier or TypeClassifier())
    properties, _ = build_properties(descriptor, context)
    schema = Schema(
        schema=dialect,
        title=title,
        type=OBJECT_TYPE,
        required=required_keys(descriptor, context.classifier),
        properties=properties,
    )
    if context.definitions.definitions:
        schema.definitions = dict(context.definitions.definitions)
    return schema


def generate_properties(
    root_type: Any, *, aliases: Mapping[str, Primitive] | None = None
) -> dict[str, PropertyDefinition]:
    """Return only the root property mapping; hoisted definitions are dropped."""
    context = WalkContext(classifier=TypeClassifier(aliases))
    properties, _ = build_properties(_as_descriptor(root_type), context)
    return properties


def generate_required(
    root_type: Any, *, aliases: Mapping[str, Primitive] | None = None
) -> list[str]:
    return required_keys(_as_descriptor(root_type), TypeClassifier(aliases))


def _as_descriptor(root_type: Any) -> TypeDescriptor:
    if isinstance(root_type, TypeDescriptor):
        return root_type
    return describe(root_type)
