"""Schema generation run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path

from record_schematic.configuration import (
    ConfigurationError,
    GeneratorConfig,
    load_configuration,
    resolve_type_reference,
)
from record_schematic.schema_generation import Schema, generate_schema
from record_schematic.schema_writing import SchemaWriteError, write_schema_files
from record_schematic.type_introspection import TypeIntrospectionError

from .run_contracts import GenerationOutcome, GenerationRequest

logger = logging.getLogger(__name__)

SchemaWriter = Callable[[Mapping[str, Schema], Path], list[Path]]


class GenerationRunError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_schema_generation_run(
    request: GenerationRequest, *, schema_writer: SchemaWriter | None = None
) -> GenerationOutcome:
    """Load configuration, generate every configured schema, and write the files."""
    writer = schema_writer or write_schema_files
    try:
        configuration = load_configuration(request.config_path)
        schemas = generate_configured_schemas(configuration)
    except (ConfigurationError, TypeIntrospectionError) as exc:
        raise GenerationRunError(str(exc)) from exc

    output_dir = Path(request.output_dir) if request.output_dir else configuration.output_dir
    try:
        written = writer(schemas, output_dir)
    except SchemaWriteError as exc:
        raise GenerationRunError(f"There was an error during file writing: {exc}") from exc

    logger.info("Generated %d schema file(s) in %s", len(written), output_dir)
    return GenerationOutcome(output_dir=output_dir, written_paths=tuple(written))


def generate_configured_schemas(configuration: GeneratorConfig) -> dict[str, Schema]:
    """Generate one schema per configured target, keyed by schema name."""
    schemas: dict[str, Schema] = {}
    for target in configuration.schemas:
        root_type = resolve_type_reference(target.type_reference, configuration.import_paths)
        schemas[target.name] = generate_schema(
            root_type,
            target.title,
            target.dialect,
            aliases=configuration.type_aliases,
        )
    return schemas
