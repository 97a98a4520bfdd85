"""Field tag parsing tests."""

from __future__ import annotations

import pytest
from record_schematic.type_introspection.tag_parsing import FieldTag, parse_tag, to_snake_case


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("PascalCaseField", "pascal_case_field"),
        ("XMLHttpRequest", "x_m_l_http_request"),
        ("IOHandler", "i_o_handler"),
        ("camelCase", "camel_case"),
        ("already_snake", "already_snake"),
        ("ID", "i_d"),
    ],
)
def test_to_snake_case_splits_every_uppercase_character(name: str, expected: str) -> None:
    assert to_snake_case(name) == expected


def test_parse_tag_reads_key_and_omitempty_modifier() -> None:
    assert parse_tag("event_id,omitempty") == FieldTag(key="event_id", omit_if_empty=True)


def test_parse_tag_without_modifiers_keeps_field_mandatory() -> None:
    assert parse_tag("event_id") == FieldTag(key="event_id")


def test_parse_tag_with_only_modifier_falls_back_to_field_name() -> None:
    tag = parse_tag(",omitempty")

    assert tag.key == ""
    assert tag.omit_if_empty is True


def test_parse_tag_ignores_unknown_modifiers() -> None:
    tag = parse_tag("count,string")

    assert tag == FieldTag(key="count")


def test_bare_dash_omits_field_entirely() -> None:
    assert parse_tag("-").omit_entirely is True


def test_dash_with_comma_names_field_dash() -> None:
    tag = parse_tag("-,")

    assert tag.omit_entirely is False
    assert tag.key == "-"


@pytest.mark.parametrize("raw", [None, ""])
def test_missing_tag_yields_empty_tag(raw: str | None) -> None:
    assert parse_tag(raw) == FieldTag()
