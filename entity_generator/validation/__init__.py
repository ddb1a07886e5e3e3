"""Export document validation."""

from entity_generator.validation.schema_validator import SchemaValidator

__all__ = ["SchemaValidator"]
