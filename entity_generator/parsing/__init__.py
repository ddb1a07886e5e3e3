"""Worksheet parsing components."""

from entity_generator.parsing.entity_builder import EntityModelBuilder, extract_prefix
from entity_generator.parsing.field_parser import parse_fields
from entity_generator.parsing.sheet_name_parser import parse_sheet_name

__all__ = ["EntityModelBuilder", "extract_prefix", "parse_fields", "parse_sheet_name"]
