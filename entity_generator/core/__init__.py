"""Core data models and shared types."""

from entity_generator.core.config import config
from entity_generator.core.exceptions import (
    ConfigurationError,
    EntityGenerationError,
    EntityWriteError,
    ValidationError,
    WorkbookReadError,
)
from entity_generator.core.schemas import (
    BuildResult,
    Diagnostic,
    DiagnosticKind,
    EntityModel,
    FieldDescriptor,
    SheetNameMatch,
    SheetNameParseResult,
    ValidationResult,
    Worksheet,
)

__all__ = [
    "BuildResult",
    "Diagnostic",
    "DiagnosticKind",
    "EntityModel",
    "FieldDescriptor",
    "SheetNameMatch",
    "SheetNameParseResult",
    "ValidationResult",
    "Worksheet",
    "EntityGenerationError",
    "WorkbookReadError",
    "EntityWriteError",
    "ConfigurationError",
    "ValidationError",
    "config",
]
