"""
Entity Generator

A Python package for generating Entity Framework entity classes and a JSON
entity description from a workbook that documents one table per worksheet.
"""

from entity_generator.cli.generator import EntityGenerator

__all__ = ["EntityGenerator"]
