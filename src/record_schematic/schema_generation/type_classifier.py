"""Map type descriptors to JSON Schema primitives."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from record_schematic.type_introspection.type_descriptors import TypeDescriptor, TypeKind

from .schema_models import ARRAY_TYPE, OBJECT_TYPE


@dataclass(frozen=True)
class Primitive:
    """JSON Schema `type` keyword plus optional `format` refinement."""

    json_type: str
    format: str = ""


@dataclass(frozen=True)
class Classification:
    """Classifier verdict; `terminal` is False when the walker must expand the type."""

    json_type: str
    format: str
    terminal: bool


_KIND_PRIMITIVES: dict[TypeKind, Primitive] = {
    TypeKind.STRING: Primitive("string"),
    TypeKind.UUID: Primitive("string", "uuid"),
    TypeKind.TIMESTAMP: Primitive("string", "date-time"),
    TypeKind.DATE: Primitive("string", "date"),
    TypeKind.NUMBER: Primitive("number"),
    TypeKind.INTEGER: Primitive("integer"),
    TypeKind.BOOLEAN: Primitive("boolean"),
    TypeKind.BYTES: Primitive("string", "byte"),
    TypeKind.ANY: Primitive(""),
    TypeKind.MAPPING: Primitive(OBJECT_TYPE),
    # Channels and callables only get a placeholder type.
    TypeKind.CALLABLE: Primitive("string"),
    TypeKind.CHANNEL: Primitive("string"),
}

DEFAULT_ALIASES: dict[str, Primitive] = {
    "datetime.time": Primitive("string", "time"),
    "datetime.timedelta": Primitive("string", "duration"),
    "ipaddress.IPv4Address": Primitive("string", "ipv4"),
    "ipaddress.IPv6Address": Primitive("string", "ipv6"),
    "pathlib.Path": Primitive("string"),
    "pathlib.PurePath": Primitive("string"),
}


class TypeClassifier:
    """Resolve descriptors through the alias table first, then by kind."""

    def __init__(self, aliases: Mapping[str, Primitive] | None = None) -> None:
        self._aliases: dict[str, Primitive] = {**DEFAULT_ALIASES, **(aliases or {})}

    @property
    def aliases(self) -> Mapping[str, Primitive]:
        return self._aliases

    def classify(self, descriptor: TypeDescriptor) -> Classification:
        alias = self._aliases.get(descriptor.name) if descriptor.name else None
        if alias is not None:
            return Classification(alias.json_type, alias.format, terminal=True)

        kind = descriptor.kind
        if kind is TypeKind.POINTER:
            target = descriptor.unwrap_pointer()
            if target is descriptor:
                return Classification("", "", terminal=True)
            return self.classify(target)
        if kind is TypeKind.SEQUENCE:
            element = descriptor.element.unwrap_pointer() if descriptor.element else None
            expandable = element is not None and element.kind is TypeKind.COMPOSITE
            return Classification(ARRAY_TYPE, "", terminal=not expandable)
        if kind is TypeKind.COMPOSITE:
            return Classification(OBJECT_TYPE, "", terminal=False)

        primitive = _KIND_PRIMITIVES[kind]
        return Classification(primitive.json_type, primitive.format, terminal=True)
