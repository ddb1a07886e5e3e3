"""Workbook input and generated file output."""

from entity_generator.io.output_manager import OutputManager
from entity_generator.io.workbook_reader import read_worksheets

__all__ = ["OutputManager", "read_worksheets"]
