"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import (
    DEFAULT_OUTPUT_DIR,
    ConfigurationError,
    load_configuration,
    resolve_type_reference,
)
from .runtime_settings import GeneratorConfig, SchemaTarget

__all__ = [
    "GeneratorConfig",
    "SchemaTarget",
    "ConfigurationError",
    "load_configuration",
    "resolve_type_reference",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_OUTPUT_DIR",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
