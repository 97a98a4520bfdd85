"""Schema writing exports."""

from .schema_file_writer import (
    DirectoryCreationError,
    SchemaFileWriteError,
    SchemaSerializationError,
    SchemaWriteError,
    build_file_name,
    write_schema_files,
)

__all__ = [
    "DirectoryCreationError",
    "SchemaFileWriteError",
    "SchemaSerializationError",
    "SchemaWriteError",
    "build_file_name",
    "write_schema_files",
]
