"""Field tag parsing and key naming helpers."""

from __future__ import annotations

from dataclasses import dataclass

OMIT_ENTIRELY_MARKER = "-"
OMIT_IF_EMPTY_MODIFIER = "omitempty"


@dataclass(frozen=True)
class FieldTag:
    """Parsed field tag: external key plus modifiers."""

    key: str = ""
    omit_if_empty: bool = False
    omit_entirely: bool = False


def parse_tag(tag: str | None) -> FieldTag:
    """Parse a `key,modifier,...` tag string.

    A bare `-` drops the field; `-,` keeps it under the literal key `-`.
    """
    if not tag:
        return FieldTag()
    if tag == OMIT_ENTIRELY_MARKER:
        return FieldTag(omit_entirely=True)

    key, *modifiers = tag.split(",")
    return FieldTag(
        key=key.strip(),
        omit_if_empty=OMIT_IF_EMPTY_MODIFIER in (modifier.strip() for modifier in modifiers),
    )


def to_snake_case(name: str) -> str:
    """Convert PascalCase or camelCase to snake_case.

    Every uppercase character after the first position gets its own
    underscore: `XMLHttpRequest` becomes `x_m_l_http_request`.
    """
    parts: list[str] = []
    for index, char in enumerate(name):
        if char.isupper():
            if index > 0:
                parts.append("_")
            parts.append(char.lower())
        else:
            parts.append(char)
    return "".join(parts)
