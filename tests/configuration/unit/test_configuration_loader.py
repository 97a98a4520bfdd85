"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from record_schematic.configuration.loader import (
    DEFAULT_OUTPUT_DIR,
    ConfigurationError,
    load_configuration,
    resolve_type_reference,
)
from record_schematic.schema_generation import DEFAULT_DIALECT, Primitive


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schematic.yaml",
        """
schemas:
  event.name:
    type: "events:EventStruct"
    title: "Cute Event Name"
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.output_dir == Path(DEFAULT_OUTPUT_DIR)
    assert configuration.dialect == DEFAULT_DIALECT
    assert configuration.import_paths == ()
    assert configuration.type_aliases == {}
    assert len(configuration.schemas) == 1
    target = configuration.schemas[0]
    assert target.name == "event.name"
    assert target.type_reference == "events:EventStruct"
    assert target.title == "Cute Event Name"
    assert target.dialect == DEFAULT_DIALECT


def test_loads_json_configuration_with_overrides(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schematic.json",
        json.dumps(
            {
                "output_dir": "out",
                "dialect": "https://json-schema.org/draft/2020-12/schema",
                "import_paths": ["src"],
                "type_aliases": {
                    "events.EventName": "string",
                    "net.Host": {"type": "string", "format": "hostname"},
                },
                "schemas": {
                    "first": {"type": "events:First", "title": "First"},
                    "second": {
                        "type": "events:Second",
                        "title": "Second",
                        "dialect": "http://json-schema.org/draft-07/schema#",
                    },
                },
            }
        ),
    )

    configuration = load_configuration(config_path)

    assert configuration.output_dir == (tmp_path / "out").resolve()
    assert configuration.import_paths == ((tmp_path / "src").resolve(),)
    assert configuration.type_aliases == {
        "events.EventName": Primitive("string"),
        "net.Host": Primitive("string", "hostname"),
    }
    dialects = [target.dialect for target in configuration.schemas]
    assert dialects == [
        "https://json-schema.org/draft/2020-12/schema",
        "http://json-schema.org/draft-07/schema#",
    ]


def test_errors_when_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_errors_when_root_is_not_a_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "schematic.yaml", "- just\n- a list\n")

    with pytest.raises(ConfigurationError, match="mapping"):
        load_configuration(config_path)


def test_errors_when_yaml_is_malformed(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "schematic.yaml", "schemas: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Failed to parse"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("schemas_section", "message"),
    [
        (None, "schemas"),
        ({}, "at least one"),
        ({"event": "events:Event"}, "schemas.event"),
        ({"event": {"title": "Event"}}, "schemas.event.type"),
        ({"event": {"type": "events:Event", "title": " "}}, "schemas.event.title"),
        ({"event": {"type": "events:Event", "title": "Event", "dialect": 7}}, "dialect"),
    ],
)
def test_errors_when_schema_targets_invalid(
    tmp_path: Path, schemas_section: object, message: str
) -> None:
    config_path = _write_file(
        tmp_path / "schematic.yaml", yaml.safe_dump({"schemas": schemas_section})
    )

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)


@pytest.mark.parametrize(
    "aliases",
    [
        ["not", "a", "mapping"],
        {"events.EventName": {"type": 3}},
        {"events.EventName": 12},
    ],
)
def test_errors_when_type_aliases_invalid(tmp_path: Path, aliases: object) -> None:
    config = {
        "type_aliases": aliases,
        "schemas": {"event": {"type": "events:Event", "title": "Event"}},
    }
    config_path = _write_file(tmp_path / "schematic.yaml", yaml.safe_dump(config))

    with pytest.raises(ConfigurationError, match="type_aliases"):
        load_configuration(config_path)


def test_resolve_type_reference_imports_nested_attributes(tmp_path: Path) -> None:
    _write_file(
        tmp_path / "resolver_fixture_models.py",
        "class Outer:\n    class Inner:\n        pass\n",
    )

    resolved = resolve_type_reference("resolver_fixture_models:Outer.Inner", (tmp_path,))

    assert resolved.__qualname__ == "Outer.Inner"


@pytest.mark.parametrize(
    ("reference", "message"),
    [
        ("no_separator", "package.module:TypeName"),
        (":Missing", "package.module:TypeName"),
        ("module_that_does_not_exist_anywhere:Type", "Cannot import"),
        ("json:NoSuchThing", "does not exist"),
    ],
)
def test_resolve_type_reference_errors(reference: str, message: str) -> None:
    with pytest.raises(ConfigurationError, match=message):
        resolve_type_reference(reference)
