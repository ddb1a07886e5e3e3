"""Workbook reading via openpyxl."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from entity_generator.core.constants import FIELD_COLUMN_COUNT
from entity_generator.core.exceptions import WorkbookReadError
from entity_generator.core.schemas import Worksheet
from entity_generator.logger import logger


def read_worksheets(workbook_path: Path) -> Iterator[Worksheet]:
    """Yield the worksheets of a workbook in tab order.

    Only the first nine columns are read. Cells come back as evaluated values
    (formulas are not returned).

    Args:
        workbook_path: Path to an .xlsx workbook

    Yields:
        One Worksheet per sheet

    Raises:
        FileNotFoundError: If the workbook does not exist
        WorkbookReadError: If the workbook cannot be opened or read
    """
    if not workbook_path.exists():
        raise FileNotFoundError(f"Workbook not found: {workbook_path}")

    logger.info("Reading workbook: %s", workbook_path)
    try:
        workbook = load_workbook(workbook_path, read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, OSError, KeyError, ValueError) as e:
        raise WorkbookReadError(workbook_path, e) from e

    try:
        for sheet in workbook.worksheets:
            try:
                rows = tuple(
                    tuple(row)
                    for row in sheet.iter_rows(
                        max_col=FIELD_COLUMN_COUNT, values_only=True
                    )
                )
            except (OSError, KeyError, ValueError) as e:
                raise WorkbookReadError(workbook_path, e) from e
            logger.debug("Read worksheet %s (%d rows)", sheet.title, len(rows))
            yield Worksheet(title=sheet.title, rows=rows)
    finally:
        workbook.close()
