"""Build type descriptors from Python type annotations."""

from __future__ import annotations

import asyncio
import collections.abc
import dataclasses
import datetime
import decimal
import inspect
import queue
import types
import typing
import uuid
from enum import Enum
from typing import (
    Annotated,
    Any,
    ClassVar,
    Final,
    Literal,
    NotRequired,
    Required,
    TypeVar,
    Union,
)

from .tag_parsing import FieldTag, parse_tag
from .type_descriptors import FieldDescriptor, TypeDescriptor, TypeKind

TAG_METADATA_KEY = "json"

_SCALAR_KINDS: dict[type, TypeKind] = {
    bool: TypeKind.BOOLEAN,
    int: TypeKind.INTEGER,
    float: TypeKind.NUMBER,
    decimal.Decimal: TypeKind.NUMBER,
    str: TypeKind.STRING,
    bytes: TypeKind.BYTES,
    bytearray: TypeKind.BYTES,
    memoryview: TypeKind.BYTES,
    datetime.datetime: TypeKind.TIMESTAMP,
    datetime.date: TypeKind.DATE,
    uuid.UUID: TypeKind.UUID,
}

_SEQUENCE_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.deque,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Collection,
    collections.abc.Iterable,
)

_MAPPING_ORIGINS = (
    dict,
    collections.OrderedDict,
    collections.defaultdict,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
)

_CHANNEL_TYPES: tuple[type, ...] = (queue.Queue, queue.SimpleQueue, asyncio.Queue)

_NONE_TYPE = type(None)

# Declaration qualifiers wrap the annotated type without changing it.
_QUALIFIERS = (Required, NotRequired, Final)


class TypeIntrospectionError(Exception):
    """Raised when annotations of a type cannot be resolved."""


def json_field(
    key: str = "", *, omitempty: bool = False, skip: bool = False, **kwargs: Any
) -> Any:
    """Declare a dataclass field carrying a `json` tag.

    >>> @dataclass
    ... class Event:
    ...     event_id: str = json_field("id")
    ...     note: str = json_field(omitempty=True, default="")
    """
    tag = "-" if skip else key + (",omitempty" if omitempty else "")
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG_METADATA_KEY] = tag
    return dataclasses.field(metadata=metadata, **kwargs)


def json_tag(tag: str) -> FieldTag:
    """Parse a tag for use as `Annotated[...]` metadata."""
    return parse_tag(tag)


def describe(tp: Any) -> TypeDescriptor:
    """Describe a Python type (usually a dataclass) for schema generation."""
    return _AnnotationReader().read(tp)


class _AnnotationReader:
    """Turns annotations into descriptors, sharing one descriptor per class."""

    def __init__(self) -> None:
        self._composites: dict[Any, TypeDescriptor] = {}

    def read(self, tp: Any) -> TypeDescriptor:
        if tp is Any or tp is object or tp is None or tp is _NONE_TYPE:
            return TypeDescriptor.scalar(TypeKind.ANY)
        if isinstance(tp, TypeVar | str | typing.ForwardRef):
            return TypeDescriptor.scalar(TypeKind.ANY)
        if isinstance(tp, typing.NewType):
            return self._read_new_type(tp)

        origin = typing.get_origin(tp)
        if origin is not None:
            return self._read_generic(tp, origin, typing.get_args(tp))
        if isinstance(tp, type):
            return self._read_class(tp)
        return TypeDescriptor.scalar(TypeKind.ANY)

    def _read_new_type(self, tp: Any) -> TypeDescriptor:
        inner = self.read(tp.__supertype__)
        if inner.kind is TypeKind.COMPOSITE:
            return inner
        return TypeDescriptor(
            inner.kind, name=f"{tp.__module__}.{tp.__name__}", element=inner.element
        )

    def _read_generic(self, tp: Any, origin: Any, args: tuple[Any, ...]) -> TypeDescriptor:
        if origin is Annotated or origin in _QUALIFIERS:
            return self.read(args[0])
        if origin is Union or origin is types.UnionType:
            members = [arg for arg in args if arg is not _NONE_TYPE]
            if len(members) == 1:
                return TypeDescriptor.pointer_to(self.read(members[0]))
            return TypeDescriptor.scalar(TypeKind.ANY)
        if origin is Literal:
            return self.read(type(args[0])) if args else TypeDescriptor.scalar(TypeKind.ANY)
        if origin is ClassVar:
            return self.read(args[0]) if args else TypeDescriptor.scalar(TypeKind.ANY)
        if origin is collections.abc.Callable:
            return TypeDescriptor.scalar(TypeKind.CALLABLE, name="callable")
        if origin in _MAPPING_ORIGINS:
            return TypeDescriptor.scalar(TypeKind.MAPPING, name=_qualified_name(origin))
        if origin in _SEQUENCE_ORIGINS:
            return TypeDescriptor.sequence_of(
                self.read(_sequence_element(origin, args)), name=_qualified_name(origin)
            )
        if isinstance(origin, type):
            return self._read_class(origin)
        return TypeDescriptor.scalar(TypeKind.ANY, name=str(tp))

    def _read_class(self, tp: type) -> TypeDescriptor:
        name = _qualified_name(tp)
        if issubclass(tp, Enum):
            return TypeDescriptor.scalar(_enum_kind(tp), name=name)
        if dataclasses.is_dataclass(tp) or typing.is_typeddict(tp) or _is_named_tuple(tp):
            return self._composite(tp)
        for base in tp.__mro__:
            kind = _SCALAR_KINDS.get(base)
            if kind is not None:
                return TypeDescriptor.scalar(kind, name=name)
        if issubclass(tp, _CHANNEL_TYPES):
            return TypeDescriptor.scalar(TypeKind.CHANNEL, name=name)
        if issubclass(tp, collections.abc.Mapping):
            return TypeDescriptor.scalar(TypeKind.MAPPING, name=name)
        if issubclass(tp, (collections.abc.Sequence, collections.abc.Set)):
            return TypeDescriptor.sequence_of(TypeDescriptor.scalar(TypeKind.ANY), name=name)
        if tp is types.FunctionType or tp is collections.abc.Callable:
            return TypeDescriptor.scalar(TypeKind.CALLABLE, name=name)
        if _declares_fields(tp):
            return self._composite(tp)
        return TypeDescriptor.scalar(TypeKind.ANY, name=name)

    def _composite(self, tp: type) -> TypeDescriptor:
        cached = self._composites.get(tp)
        if cached is not None:
            return cached
        descriptor = TypeDescriptor.composite(
            _qualified_name(tp), fields=lambda: self._read_fields(tp), identity=tp
        )
        self._composites[tp] = descriptor
        return descriptor

    def _read_fields(self, tp: type) -> list[FieldDescriptor]:
        try:
            hints = typing.get_type_hints(tp, include_extras=True)
        except (NameError, TypeError) as exc:
            raise TypeIntrospectionError(
                f"Cannot resolve annotations of {_qualified_name(tp)}: {exc}"
            ) from exc

        if dataclasses.is_dataclass(tp):
            return [
                FieldDescriptor(
                    name=field.name,
                    type=self.read(hints.get(field.name, field.type)),
                    tag=_dataclass_field_tag(field, hints.get(field.name)),
                )
                for field in dataclasses.fields(tp)
            ]
        keyed = typing.is_typeddict(tp)
        return [
            FieldDescriptor(
                name=name,
                type=self.read(hint),
                tag=_annotated_tag(hint, optional=keyed and _is_optional_key(tp, name, hint)),
            )
            for name, hint in hints.items()
            if typing.get_origin(hint) is not ClassVar and (keyed or not name.startswith("_"))
        ]


def _dataclass_field_tag(field: dataclasses.Field[Any], hint: Any) -> FieldTag:
    if TAG_METADATA_KEY in field.metadata:
        return parse_tag(field.metadata[TAG_METADATA_KEY])
    return _annotated_tag(hint)


def _annotated_tag(hint: Any, *, optional: bool = False) -> FieldTag:
    tag = FieldTag()
    hint = _strip_qualifiers(hint)
    if typing.get_origin(hint) is Annotated:
        for extra in hint.__metadata__:
            if isinstance(extra, FieldTag):
                tag = extra
                break
    if optional and not tag.omit_if_empty:
        return dataclasses.replace(tag, omit_if_empty=True)
    return tag


def _strip_qualifiers(hint: Any) -> Any:
    while typing.get_origin(hint) in _QUALIFIERS:
        hint = typing.get_args(hint)[0]
    return hint


def _is_optional_key(tp: Any, name: str, hint: Any) -> bool:
    # String annotations hide NotRequired from __optional_keys__, so check the hint too.
    if typing.get_origin(hint) is NotRequired:
        return True
    if typing.get_origin(hint) is Required:
        return False
    return name in getattr(tp, "__optional_keys__", frozenset())


def _is_named_tuple(tp: type) -> bool:
    return issubclass(tp, tuple) and hasattr(tp, "_fields")


def _declares_fields(tp: type) -> bool:
    """True for plain classes (and models) that annotate instance attributes."""
    return any(inspect.get_annotations(base) for base in tp.__mro__ if base is not object)


def _sequence_element(origin: Any, args: tuple[Any, ...]) -> Any:
    if not args:
        return Any
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        return args[0] if len(set(args)) == 1 else Any
    return args[0]


def _enum_kind(tp: type[Enum]) -> TypeKind:
    if issubclass(tp, str):
        return TypeKind.STRING
    if issubclass(tp, bool):
        return TypeKind.BOOLEAN
    if issubclass(tp, int):
        return TypeKind.INTEGER
    if issubclass(tp, float):
        return TypeKind.NUMBER
    return TypeKind.STRING


def _qualified_name(tp: Any) -> str:
    module = getattr(tp, "__module__", "")
    qualname = getattr(tp, "__qualname__", getattr(tp, "__name__", str(tp)))
    if module in ("builtins", ""):
        return qualname
    return f"{module}.{qualname}"
