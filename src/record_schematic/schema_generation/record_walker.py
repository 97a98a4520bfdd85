"""Recursive property walk over composite types."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass, field

from record_schematic.type_introspection.type_descriptors import (
    FieldDescriptor,
    TypeDescriptor,
    TypeKind,
)

from .definition_table import DefinitionTable
from .required_fields import required_keys
from .schema_models import ARRAY_TYPE, OBJECT_TYPE, PropertyDefinition
from .type_classifier import Classification, TypeClassifier

logger = logging.getLogger(__name__)


@dataclass
class WalkContext:
    """State shared by every recursive call of one root-type walk."""

    classifier: TypeClassifier = field(default_factory=TypeClassifier)
    definitions: DefinitionTable = field(default_factory=DefinitionTable)
    visited: set[Hashable] = field(default_factory=set)


def build_properties(
    descriptor: TypeDescriptor, context: WalkContext, branch_counter: int = 0
) -> tuple[dict[str, PropertyDefinition], list[str]]:
    """Expand a composite (or a sequence/pointer of one) into properties and required keys.

    `context.visited` holds the composites on the current expansion path. A
    composite already on that path is not expanded again once the branch
    counter exceeds 1, which cuts self-referencing chains after one repeat.
    Anything that is not composite-shaped yields empty results.
    """
    target = _expansion_target(descriptor)
    if target is None:
        return {}, []

    key = target.key
    if key in context.visited and branch_counter > 1:
        logger.debug("Stopped recursive expansion of %s", target.name or "<anonymous>")
        return {}, []

    entered = key not in context.visited
    context.visited.add(key)
    try:
        properties = _walk_fields(target, context, branch_counter)
    finally:
        if entered:
            context.visited.discard(key)

    return properties, required_keys(descriptor, context.classifier)


def _expansion_target(descriptor: TypeDescriptor) -> TypeDescriptor | None:
    """Return the composite a descriptor expands into, if any."""
    if descriptor.kind is TypeKind.COMPOSITE:
        return descriptor
    current = descriptor.unwrap_pointer()
    if current.kind is TypeKind.SEQUENCE and current.element is not None:
        current = current.element.unwrap_pointer()
    if current.kind is TypeKind.COMPOSITE:
        return current
    return None


def _walk_fields(
    composite: TypeDescriptor, context: WalkContext, branch_counter: int
) -> dict[str, PropertyDefinition]:
    properties: dict[str, PropertyDefinition] = {}
    for field_descriptor in composite.fields:
        if field_descriptor.omit_entirely:
            continue
        key = field_descriptor.external_key
        if key in properties:
            logger.warning("Duplicate property key %r in %s; last field wins", key, composite.name)
        # Every sibling starts again from this level's counter.
        properties[key] = build_field_property(field_descriptor, context, branch_counter + 1)
    return properties


def build_field_property(
    field_descriptor: FieldDescriptor, context: WalkContext, branch_counter: int
) -> PropertyDefinition:
    """Build the property definition for a single field."""
    reference = context.definitions.lookup(field_descriptor)
    if reference is not None:
        return reference

    classification = context.classifier.classify(field_descriptor.type)
    nested: dict[str, PropertyDefinition] = {}
    required: list[str] = []
    if not classification.terminal:
        nested, required = build_properties(field_descriptor.type, context, branch_counter)

    if context.definitions.should_hoist(field_descriptor.type, nested):
        return context.definitions.hoist(field_descriptor, nested, required)

    sequence = _sequence_shape(field_descriptor.type)
    if sequence is not None and classification.json_type == ARRAY_TYPE:
        return _array_property(field_descriptor.name, sequence, nested, context)
    return _object_property(field_descriptor.name, classification, nested, required)


def _sequence_shape(descriptor: TypeDescriptor) -> TypeDescriptor | None:
    current = descriptor.unwrap_pointer()
    return current if current.kind is TypeKind.SEQUENCE else None


def _array_property(
    description: str,
    sequence: TypeDescriptor,
    nested: dict[str, PropertyDefinition],
    context: WalkContext,
) -> PropertyDefinition:
    if nested:
        items = PropertyDefinition(type=OBJECT_TYPE, description=description, properties=nested)
    else:
        items = _terminal_item(description, sequence.element, context)
    return PropertyDefinition(type=ARRAY_TYPE, description=description, items=items)


def _terminal_item(
    description: str, element: TypeDescriptor | None, context: WalkContext
) -> PropertyDefinition:
    """Item definition for elements that are not expanded."""
    if element is None:
        return PropertyDefinition(description=description)
    classification = context.classifier.classify(element)
    inner = _sequence_shape(element)
    if inner is not None and classification.json_type == ARRAY_TYPE:
        return PropertyDefinition(
            type=ARRAY_TYPE,
            description=description,
            items=_terminal_item(description, inner.element, context),
        )
    return PropertyDefinition(
        type=classification.json_type,
        description=description,
        format=classification.format,
    )


def _object_property(
    description: str,
    classification: Classification,
    nested: dict[str, PropertyDefinition],
    required: list[str],
) -> PropertyDefinition:
    if not nested:
        return PropertyDefinition(
            type=classification.json_type,
            description=description,
            format=classification.format,
        )
    return PropertyDefinition(
        type=OBJECT_TYPE,
        description=description,
        required=list(required),
        properties=nested,
    )
