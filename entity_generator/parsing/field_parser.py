"""Field definitions read from a worksheet's row grid."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from entity_generator.core.constants import FIELD_COLUMN_COUNT, FLAG_TRUE, HEADER_ROWS
from entity_generator.core.schemas import FieldDescriptor

# | Column Name | Column TypeName | 資料長度 | Comment | Comment補充說明 | Example | PK | Required | 備註 |
#       0              1               2          3            4              5      6      7        8
NAME, DECLARED_TYPE, LENGTH, COMMENT, COMMENT_EXTRA, EXAMPLE, PK, REQUIRED, REMARK = range(
    FIELD_COLUMN_COUNT
)


def cell_text(value: Any) -> str | None:
    """Convert a cell value to text, keeping empty cells as None.

    Integral floats lose their fractional part so a numeric ``1`` flag cell
    reads as ``"1"``.
    """
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _pad(row: Sequence[Any]) -> list[Any]:
    cells = list(row[:FIELD_COLUMN_COUNT])
    cells.extend([None] * (FIELD_COLUMN_COUNT - len(cells)))
    return cells


def parse_row(row: Sequence[Any]) -> FieldDescriptor | None:
    """Build an unresolved field from one row, or None for a blank name cell."""
    cells = [cell_text(value) for value in _pad(row)]

    name = cells[NAME]
    if name is None or not name.strip():
        return None

    return FieldDescriptor(
        name=name,
        declared_type=cells[DECLARED_TYPE] or "",
        length=cells[LENGTH],
        comment=cells[COMMENT] or "",
        comment_extra=cells[COMMENT_EXTRA],
        example=cells[EXAMPLE],
        is_primary_key=cells[PK] == FLAG_TRUE,
        is_required=cells[REQUIRED] == FLAG_TRUE,
        remark=cells[REMARK],
    )


def parse_fields(rows: Iterable[Sequence[Any]]) -> list[FieldDescriptor]:
    """Parse every data row of a worksheet grid.

    The header row is skipped. Rows without a name are left out but do not end
    the scan.

    Args:
        rows: Worksheet rows in order, header included

    Returns:
        Unresolved field descriptors in row order
    """
    fields: list[FieldDescriptor] = []
    for index, row in enumerate(rows):
        if index < HEADER_ROWS:
            continue
        field = parse_row(row)
        if field is not None:
            fields.append(field)
    return fields
