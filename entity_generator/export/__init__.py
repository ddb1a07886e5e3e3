"""Entity JSON export."""

from entity_generator.export.schema_exporter import SchemaExporter

__all__ = ["SchemaExporter"]
