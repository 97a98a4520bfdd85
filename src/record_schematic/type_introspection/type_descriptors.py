"""Type introspection entities."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from enum import Enum

from .tag_parsing import FieldTag, parse_tag, to_snake_case


class TypeKind(str, Enum):
    """Structural kinds recognized by the schema generator."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    BYTES = "bytes"
    TIMESTAMP = "timestamp"
    DATE = "date"
    UUID = "uuid"
    ANY = "any"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    POINTER = "pointer"
    COMPOSITE = "composite"
    CALLABLE = "callable"
    CHANNEL = "channel"


FieldLoader = Callable[[], Iterable["FieldDescriptor"]]


class TypeDescriptor:
    """Structural description of one type.

    Composite descriptors resolve their fields lazily so that a type may refer
    to itself, directly or through other composites.
    """

    def __init__(
        self,
        kind: TypeKind,
        *,
        name: str = "",
        element: TypeDescriptor | None = None,
        fields: Iterable[FieldDescriptor] | FieldLoader | None = None,
        identity: Hashable | None = None,
    ) -> None:
        self.kind = kind
        self.name = name
        self.element = element
        self.identity = identity
        self._fields: tuple[FieldDescriptor, ...] | None = None
        self._load_fields: FieldLoader | None = None
        if callable(fields):
            self._load_fields = fields
        elif fields is not None:
            self._fields = tuple(fields)

    @classmethod
    def scalar(cls, kind: TypeKind, name: str = "") -> TypeDescriptor:
        return cls(kind, name=name)

    @classmethod
    def pointer_to(cls, target: TypeDescriptor) -> TypeDescriptor:
        return cls(TypeKind.POINTER, element=target)

    @classmethod
    def sequence_of(cls, element: TypeDescriptor, name: str = "") -> TypeDescriptor:
        return cls(TypeKind.SEQUENCE, name=name, element=element)

    @classmethod
    def composite(
        cls,
        name: str = "",
        fields: Iterable[FieldDescriptor] | FieldLoader | None = None,
        identity: Hashable | None = None,
    ) -> TypeDescriptor:
        """Build a composite descriptor; an empty name marks an anonymous shape."""
        return cls(TypeKind.COMPOSITE, name=name, fields=fields, identity=identity)

    @property
    def key(self) -> Hashable:
        """Identity used for visited-set membership and definition lookups."""
        return self.identity if self.identity is not None else self

    @property
    def short_name(self) -> str:
        return self.name.rsplit(".", 1)[-1]

    @property
    def fields(self) -> tuple[FieldDescriptor, ...]:
        if self.kind is not TypeKind.COMPOSITE:
            return ()
        if self._fields is None:
            loader = self._load_fields
            self._fields = tuple(loader()) if loader is not None else ()
            self._load_fields = None
        return self._fields

    def define_fields(self, fields: Iterable[FieldDescriptor]) -> None:
        """Attach fields after construction, for builder-made recursive types."""
        self._fields = tuple(fields)
        self._load_fields = None

    def unwrap_pointer(self) -> TypeDescriptor:
        """Return the pointer target, or the descriptor itself for non-pointers."""
        if self.kind is TypeKind.POINTER and self.element is not None:
            return self.element
        return self

    def __repr__(self) -> str:
        label = self.name or "<anonymous>"
        if self.element is not None:
            return f"TypeDescriptor({self.kind.value}, {label}, element={self.element!r})"
        return f"TypeDescriptor({self.kind.value}, {label})"


@dataclass(frozen=True)
class FieldDescriptor:
    """One declared field of a composite type."""

    name: str
    type: TypeDescriptor
    tag: FieldTag

    @classmethod
    def build(cls, name: str, type_: TypeDescriptor, tag: str = "") -> FieldDescriptor:
        return cls(name=name, type=type_, tag=parse_tag(tag))

    @property
    def external_key(self) -> str:
        return self.tag.key or to_snake_case(self.name)

    @property
    def omit_entirely(self) -> bool:
        return self.tag.omit_entirely

    @property
    def omit_if_empty(self) -> bool:
        return self.tag.omit_if_empty
