"""Storage type mapping."""

from entity_generator.mapping.type_mapper import resolve_field, resolve_language_type

__all__ = ["resolve_field", "resolve_language_type"]
