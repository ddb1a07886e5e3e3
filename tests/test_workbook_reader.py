"""Tests for reading worksheets from .xlsx workbooks."""

from pathlib import Path

import pytest

from entity_generator.core.exceptions import WorkbookReadError
from entity_generator.io.workbook_reader import read_worksheets


def test_reads_worksheets_in_tab_order(workbook_path):
    worksheets = list(read_worksheets(workbook_path))

    assert [w.title for w in worksheets] == [
        "Bga_Material(料件項目)",
        "NoUnderscoreNoParens",
        "Bga_Order_Line(訂單明細)",
        "Sys_User(使用者帳號資料說明",
    ]


def test_rows_include_header_and_nine_columns(workbook_path):
    material = next(read_worksheets(workbook_path))

    assert material.rows[0][0] == "Column Name"
    assert material.rows[1][0] == "PK_Material"
    assert all(len(row) <= 9 for row in material.rows)


def test_missing_workbook(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(read_worksheets(tmp_path / "missing.xlsx"))


def test_invalid_workbook(tmp_path):
    path = tmp_path / "broken.xlsx"
    path.write_text("not a workbook", encoding="utf-8")

    with pytest.raises(WorkbookReadError) as exc_info:
        list(read_worksheets(path))

    assert exc_info.value.path == Path(path)
