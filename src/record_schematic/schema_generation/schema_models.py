"""Schema generation entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

OBJECT_TYPE = "object"
ARRAY_TYPE = "array"


@dataclass
class PropertyDefinition:
    """One property node of a JSON Schema document."""

    type: str = ""
    description: str = ""
    format: str = ""
    required: list[str] = field(default_factory=list)
    items: PropertyDefinition | None = None
    properties: dict[str, PropertyDefinition] = field(default_factory=dict)
    ref: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Render the node, leaving out every empty member."""
        rendered: dict[str, Any] = {}
        if self.type:
            rendered["type"] = self.type
        if self.description:
            rendered["description"] = self.description
        if self.format:
            rendered["format"] = self.format
        if self.required:
            rendered["required"] = list(self.required)
        if self.items is not None:
            rendered["items"] = self.items.to_dict()
        if self.properties:
            rendered["properties"] = _render_mapping(self.properties)
        if self.ref:
            rendered["$ref"] = self.ref
        return rendered


@dataclass
class Schema:
    """Complete JSON Schema document for one root record type."""

    schema: str
    title: str
    type: str = OBJECT_TYPE
    required: list[str] = field(default_factory=list)
    properties: dict[str, PropertyDefinition] = field(default_factory=dict)
    definitions: dict[str, PropertyDefinition] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        rendered: dict[str, Any] = {
            "$schema": self.schema,
            "title": self.title,
            "type": self.type,
        }
        if self.required:
            rendered["required"] = list(self.required)
        rendered["properties"] = _render_mapping(self.properties)
        if self.definitions:
            rendered["$defs"] = _render_mapping(self.definitions)
        return rendered


def _render_mapping(mapping: dict[str, PropertyDefinition]) -> dict[str, Any]:
    return {key: definition.to_dict() for key, definition in mapping.items()}
