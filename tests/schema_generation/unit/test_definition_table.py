"""Definition table tests."""

from __future__ import annotations

from record_schematic.schema_generation.definition_table import DefinitionTable
from record_schematic.schema_generation.schema_models import PropertyDefinition
from record_schematic.type_introspection import FieldDescriptor, TypeDescriptor, TypeKind


def _nested(count: int) -> dict[str, PropertyDefinition]:
    return {f"key_{index}": PropertyDefinition(type="string") for index in range(count)}


def _composite_field(name: str, composite: TypeDescriptor) -> FieldDescriptor:
    return FieldDescriptor.build(name, composite)


def test_hoists_only_by_value_composites_with_more_than_two_properties() -> None:
    table = DefinitionTable()
    composite = TypeDescriptor.composite("pkg.Address")

    assert table.should_hoist(composite, _nested(3)) is True
    assert table.should_hoist(composite, _nested(2)) is False
    assert table.should_hoist(TypeDescriptor.pointer_to(composite), _nested(5)) is False
    assert table.should_hoist(TypeDescriptor.sequence_of(composite), _nested(5)) is False


def test_hoist_stores_definition_once_and_returns_reference() -> None:
    table = DefinitionTable()
    composite = TypeDescriptor.composite("pkg.Address")

    first = table.hoist(_composite_field("Home", composite), _nested(3), ["key_0"])
    second = table.hoist(_composite_field("Work", composite), _nested(4), [])

    assert list(table.definitions) == ["Address"]
    assert table.definitions["Address"].to_dict() == {
        "type": "object",
        "description": "Home",
        "required": ["key_0"],
        "properties": {
            "key_0": {"type": "string"},
            "key_1": {"type": "string"},
            "key_2": {"type": "string"},
        },
    }
    assert first.to_dict() == {"description": "Home", "$ref": "#/$defs/Address"}
    assert second.to_dict() == {"description": "Work", "$ref": "#/$defs/Address"}


def test_lookup_finds_already_hoisted_composites_only() -> None:
    table = DefinitionTable()
    composite = TypeDescriptor.composite("pkg.Address")
    field = _composite_field("Home", composite)

    assert table.lookup(field) is None
    table.hoist(field, _nested(3), [])
    reference = table.lookup(_composite_field("Other", composite))

    assert reference is not None
    assert reference.ref == "#/$defs/Address"
    assert reference.description == "Other"


def test_anonymous_composites_receive_synthesized_names() -> None:
    table = DefinitionTable()
    first = TypeDescriptor.composite()
    second = TypeDescriptor.composite()

    table.hoist(_composite_field("First", first), _nested(3), [])
    table.hoist(_composite_field("Second", second), _nested(3), [])

    assert list(table.definitions) == ["AnonymousStruct0", "AnonymousStruct1"]


def test_distinct_types_sharing_a_short_name_get_distinct_entries() -> None:
    table = DefinitionTable()
    billing = TypeDescriptor.composite("billing.Address")
    shipping = TypeDescriptor.composite("shipping.Address")

    table.hoist(_composite_field("Billing", billing), _nested(3), [])
    reference = table.hoist(_composite_field("Shipping", shipping), _nested(3), [])

    assert list(table.definitions) == ["Address", "Address2"]
    assert reference.ref == "#/$defs/Address2"


def test_lookup_ignores_non_composite_fields() -> None:
    table = DefinitionTable()
    field = FieldDescriptor.build("Name", TypeDescriptor.scalar(TypeKind.STRING))

    assert table.lookup(field) is None
