"""Schema file writer service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from record_schematic.schema_generation.schema_models import Schema

logger = logging.getLogger(__name__)

SCHEMA_FILE_SUFFIX = ".json"


class SchemaWriteError(Exception):
    """Raised when generated schemas cannot be written."""


class DirectoryCreationError(SchemaWriteError):
    """Raised when the destination directory cannot be created."""


class SchemaSerializationError(SchemaWriteError):
    """Raised when a schema cannot be serialized to JSON."""


class SchemaFileWriteError(SchemaWriteError):
    """Raised when a schema file cannot be written."""


def build_file_name(schema_name: str) -> str:
    """Map a schema name such as `event.name` to `event_name.json`."""
    return schema_name.replace(".", "_") + SCHEMA_FILE_SUFFIX


def write_schema_files(schemas: Mapping[str, Schema], destination: Path | str) -> list[Path]:
    """Write one indented JSON file per schema into the destination directory.

    Args:
      schemas: Schema name to generated schema.
      destination: Output directory; created recursively when missing.

    Returns:
      Paths of the written files, in input order.

    Raises:
      DirectoryCreationError: If the directory cannot be created.
      SchemaSerializationError: If a schema cannot be serialized.
      SchemaFileWriteError: If a file cannot be written.
    """
    directory = Path(destination)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(
            f"Cannot create schema output directory {directory}: {exc}"
        ) from exc

    written: list[Path] = []
    for name, schema in schemas.items():
        try:
            rendered = json.dumps(schema.to_dict(), indent=2)
        except (TypeError, ValueError) as exc:
            raise SchemaSerializationError(f"Cannot serialize schema {name}: {exc}") from exc

        output_path = directory / build_file_name(name)
        try:
            output_path.write_text(rendered + "\n", encoding="utf-8")
        except OSError as exc:
            raise SchemaFileWriteError(f"Cannot write schema file {output_path}: {exc}") from exc
        logger.info("Wrote schema %s to %s", name, output_path)
        written.append(output_path)
    return written
