"""Configuration loader service."""

from __future__ import annotations

import importlib
import sys
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import yaml

from record_schematic.schema_generation.schema_assembler import DEFAULT_DIALECT
from record_schematic.schema_generation.type_classifier import Primitive

from .runtime_settings import GeneratorConfig, SchemaTarget

DEFAULT_OUTPUT_DIR = "/tmp/schemas/"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> GeneratorConfig:
    """Load and validate the generator configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.parent
    dialect = _optional_string(parsed.get("dialect"), "dialect") or DEFAULT_DIALECT
    output_dir = _optional_string(parsed.get("output_dir"), "output_dir") or DEFAULT_OUTPUT_DIR
    return GeneratorConfig(
        path=path,
        output_dir=_resolve_path(base_path, output_dir),
        dialect=dialect,
        import_paths=_parse_import_paths(parsed.get("import_paths"), base_path),
        type_aliases=_parse_type_aliases(parsed.get("type_aliases")),
        schemas=_parse_schemas_section(parsed.get("schemas"), default_dialect=dialect),
    )


def resolve_type_reference(reference: str, import_paths: Sequence[Path] = ()) -> Any:
    """Import the object named by a `package.module:Attribute` reference."""
    module_name, separator, attribute_path = reference.partition(":")
    if not separator or not module_name.strip() or not attribute_path.strip():
        raise ConfigurationError(
            f"Type reference '{reference}' must look like 'package.module:TypeName'."
        )

    with _importable_from(import_paths):
        try:
            target: Any = importlib.import_module(module_name.strip())
        except ImportError as exc:
            raise ConfigurationError(f"Cannot import module for '{reference}': {exc}") from exc

    for attribute in attribute_path.strip().split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise ConfigurationError(f"Type reference '{reference}' does not exist.") from exc
    return target


@contextmanager
def _importable_from(import_paths: Sequence[Path]) -> Iterator[None]:
    added = [str(entry) for entry in import_paths if str(entry) not in sys.path]
    sys.path[:0] = added
    try:
        yield
    finally:
        for entry in added:
            if entry in sys.path:
                sys.path.remove(entry)


def _parse_schemas_section(value: Any, *, default_dialect: str) -> tuple[SchemaTarget, ...]:
    section = _require_mapping(value, "schemas")
    if not section:
        raise ConfigurationError("schemas must define at least one schema.")

    targets: list[SchemaTarget] = []
    for name, definition in section.items():
        schema_name = _require_non_empty_string(name, "schemas key")
        label = f"schemas.{schema_name}"
        entry = _require_mapping(definition, label)
        type_reference = _require_non_empty_string(entry.get("type"), f"{label}.type")
        title = _require_non_empty_string(entry.get("title"), f"{label}.title")
        dialect = _optional_string(entry.get("dialect"), f"{label}.dialect") or default_dialect
        targets.append(
            SchemaTarget(
                name=schema_name,
                type_reference=type_reference,
                title=title,
                dialect=dialect,
            )
        )
    return tuple(targets)


def _parse_type_aliases(value: Any) -> dict[str, Primitive]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError("type_aliases must be a mapping.")

    aliases: dict[str, Primitive] = {}
    for name, definition in value.items():
        type_name = _require_non_empty_string(name, "type_aliases key")
        label = f"type_aliases.{type_name}"
        if isinstance(definition, str):
            aliases[type_name] = Primitive(definition.strip())
            continue
        entry = _require_mapping(definition, label)
        json_type = entry.get("type", "")
        if not isinstance(json_type, str):
            raise ConfigurationError(f"{label}.type must be a string.")
        json_format = _optional_string(entry.get("format"), f"{label}.format") or ""
        aliases[type_name] = Primitive(json_type.strip(), json_format)
    return aliases


def _parse_import_paths(value: Any, base_path: Path) -> tuple[Path, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Sequence):
        raise ConfigurationError("import_paths must be a string or list of strings.")
    paths: list[Path] = []
    for item in value:
        entry = _require_non_empty_string(item, "import_paths entry")
        paths.append(_resolve_path(base_path, entry))
    return tuple(paths)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
