"""Custom exception classes for the entity generator."""

from __future__ import annotations

from pathlib import Path


class EntityGenerationError(Exception):
    """Base exception for entity generation errors.

    All custom exceptions in the entity generator inherit from this class.
    """

    pass


class WorkbookReadError(EntityGenerationError):
    """Error while reading the source workbook.

    Raised when the workbook exists but cannot be opened or iterated.

    Args:
        path: Path of the workbook that failed to load
        cause: The underlying exception raised by the reader
    """

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read workbook '{path}': {cause}")


class EntityWriteError(EntityGenerationError):
    """Error while writing generated output to disk.

    Args:
        path: Destination path that could not be written
        cause: The underlying I/O exception
    """

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write '{path}': {cause}")


class ValidationError(EntityGenerationError):
    """Error during export document validation.

    Raised when the exported JSON document does not match the entity
    document schema.

    Args:
        errors: List of validation error messages
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Entity document validation failed: {'; '.join(errors)}")


class ConfigurationError(EntityGenerationError):
    """Error in application configuration.

    Raised when a configuration value read from the environment is missing
    or cannot be parsed.

    Args:
        variable_name: The name of the configuration variable that caused the error
    """

    def __init__(self, variable_name: str) -> None:
        self.variable_name = variable_name
        message = f"Configuration variable '{variable_name}' is missing or invalid"
        super().__init__(message)
