"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schematic.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration for record-schematic.
# Replace every <REQUIRED> placeholder before running generate.
# Remove <OPTIONAL> entries you do not need.

# Directory receiving one <schema_name>.json file per schema.
output_dir: "/tmp/schemas/"
# Default $schema dialect for every schema below.
dialect: "http://json-schema.org/draft-07/schema#"

# Directories (relative to this file) searched when importing record types.
import_paths:
  - "<OPTIONAL>"

# Map fully qualified type names to JSON Schema primitives.
# type_aliases:
#   myapp.events.EventName:
#     type: string
#     format: "<OPTIONAL>"

schemas:
  # Dots in the schema name become underscores in the file name.
  event.name:
    type: "<REQUIRED>"   # package.module:RecordType
    title: "<REQUIRED>"
    # dialect: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
