"""Run execution domain exports."""

from .generation_run_use_case import (
    GenerationRunError,
    execute_schema_generation_run,
    generate_configured_schemas,
)
from .run_contracts import GenerationOutcome, GenerationRequest

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "GenerationRunError",
    "execute_schema_generation_run",
    "generate_configured_schemas",
]
