"""Shared `$defs` table for composites reused across a schema."""

from __future__ import annotations

import logging
from collections.abc import Hashable

from record_schematic.type_introspection.type_descriptors import (
    FieldDescriptor,
    TypeDescriptor,
    TypeKind,
)

from .schema_models import OBJECT_TYPE, PropertyDefinition

logger = logging.getLogger(__name__)

DEFINITIONS_POINTER_PREFIX = "#/$defs/"
HOIST_MIN_PROPERTIES = 3
ANONYMOUS_NAME_PREFIX = "AnonymousStruct"


class DefinitionTable:
    """Hoisted definitions collected during one root-type walk."""

    def __init__(self) -> None:
        self.definitions: dict[str, PropertyDefinition] = {}
        self._names: dict[Hashable, str] = {}
        self._anonymous_count = 0

    def __len__(self) -> int:
        return len(self.definitions)

    def lookup(self, field: FieldDescriptor) -> PropertyDefinition | None:
        """Return a reference when the field's composite is already hoisted."""
        if field.type.kind is not TypeKind.COMPOSITE:
            return None
        name = self._names.get(field.type.key)
        if name is None:
            return None
        return _reference(name, field)

    def should_hoist(
        self, field_type: TypeDescriptor, nested: dict[str, PropertyDefinition]
    ) -> bool:
        """Only by-value composites with more than two properties are hoisted."""
        return field_type.kind is TypeKind.COMPOSITE and len(nested) >= HOIST_MIN_PROPERTIES

    def hoist(
        self,
        field: FieldDescriptor,
        nested: dict[str, PropertyDefinition],
        required: list[str],
    ) -> PropertyDefinition:
        """Store the field's composite once and return a reference to it."""
        name = self._names.get(field.type.key)
        if name is None:
            name = self._claim_name(field.type)
            self.definitions[name] = PropertyDefinition(
                type=OBJECT_TYPE,
                description=field.name,
                required=list(required),
                properties=nested,
            )
            logger.debug("Hoisted %s into $defs as %s", field.type.name or "<anonymous>", name)
        return _reference(name, field)

    def _claim_name(self, descriptor: TypeDescriptor) -> str:
        base = descriptor.short_name
        if not base:
            base = f"{ANONYMOUS_NAME_PREFIX}{self._anonymous_count}"
            self._anonymous_count += 1
        name = base
        suffix = 2
        while name in self.definitions:
            name = f"{base}{suffix}"
            suffix += 1
        self._names[descriptor.key] = name
        return name


def _reference(name: str, field: FieldDescriptor) -> PropertyDefinition:
    return PropertyDefinition(ref=DEFINITIONS_POINTER_PREFIX + name, description=field.name)
