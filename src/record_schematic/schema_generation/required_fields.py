"""Required-field derivation for composite types."""

from __future__ import annotations

from record_schematic.type_introspection.type_descriptors import (
    FieldDescriptor,
    TypeDescriptor,
    TypeKind,
)

from .type_classifier import TypeClassifier

# Event envelopes always carry their tags, even when declared optional.
TAGS_KEY = "tags"


def required_keys(
    descriptor: TypeDescriptor | None, classifier: TypeClassifier | None = None
) -> list[str]:
    """Return the mandatory external keys of a composite, in declaration order.

    Fields are required unless they are dropped, sequence-shaped, untyped,
    optional, or tagged `omitempty`. An optional field keyed `tags` stays required.
    When several fields share an external key the last one decides, matching
    the property mapping. Non-composite types have no required keys.
    """
    if descriptor is None:
        return []
    composite = descriptor.unwrap_pointer()
    if composite.kind is not TypeKind.COMPOSITE:
        return []

    classifier = classifier or TypeClassifier()
    verdicts: dict[str, bool] = {}
    for field in composite.fields:
        if not field.omit_entirely:
            verdicts[field.external_key] = is_required(field, classifier)
    return [key for key, required in verdicts.items() if required]


def is_required(field: FieldDescriptor, classifier: TypeClassifier | None = None) -> bool:
    if field.omit_entirely:
        return False
    kind = field.type.kind
    if kind is TypeKind.SEQUENCE:
        return False
    if kind is TypeKind.ANY and not _has_schema_type(field.type, classifier):
        return False
    if kind is TypeKind.POINTER:
        return field.external_key == TAGS_KEY
    return not field.omit_if_empty


def _has_schema_type(descriptor: TypeDescriptor, classifier: TypeClassifier | None) -> bool:
    """Untyped values count only when an alias gives them a JSON type."""
    return bool((classifier or TypeClassifier()).classify(descriptor).json_type)
