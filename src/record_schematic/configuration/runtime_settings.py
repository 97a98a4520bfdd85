"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from record_schematic.schema_generation.type_classifier import Primitive


@dataclass(frozen=True)
class SchemaTarget:
    """One schema to generate: output name, root type reference and metadata."""

    name: str
    type_reference: str
    title: str
    dialect: str


@dataclass(frozen=True)
class GeneratorConfig:
    """Top-level configuration aggregate."""

    path: Path
    output_dir: Path
    dialect: str
    import_paths: tuple[Path, ...]
    type_aliases: Mapping[str, Primitive]
    schemas: tuple[SchemaTarget, ...]
