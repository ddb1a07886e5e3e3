"""Shared test fixtures and configuration."""

# Set test environment variables BEFORE any imports that might trigger config loading
import os  # noqa: E402

os.environ.setdefault("ENTITY_GEN_PROJECT_ROOT", ".")

import shutil
import tempfile
from pathlib import Path
from typing import Any

import pytest
from openpyxl import Workbook

from entity_generator.core.schemas import EntityModel, FieldDescriptor, Worksheet
from entity_generator.mapping.type_mapper import resolve_field

HEADER = (
    "Column Name",
    "Column TypeName",
    "資料長度",
    "Comment",
    "Comment補充說明",
    "Example",
    "PK",
    "Required",
    "備註",
)

MATERIAL_ROWS = [
    ("PK_Material", "bigint", None, "主鍵", None, None, "1", "1", None),
    ("Mat_Code", "nvarchar(50)", "50", "料號", None, "A001", None, "1", None),
    ("Mat_Name", "nvarchar(100)", "100", "品名", None, None, None, None, "顯示用"),
    ("Mat_Status", "nvarchar(1)", "1", "狀態", "Y:啟用 N:停用", "Y", None, "1", None),
    ("Mat_Price", "decimal(10,4)", None, "單價", None, None, None, None, None),
    ("Mat_CreateId", "bigint", None, "建立者ID", None, None, None, "1", None),
    ("Mat_CreateCode", "nvarchar(50)", None, "建立者代碼", None, None, None, "1", None),
    ("Mat_CreateDate", "datetime", None, "建立時間", None, None, None, "1", None),
    ("Mat_CreateIp", "nvarchar(50)", None, "建立者IP", None, None, None, "1", None),
    ("Mat_EditId", "bigint", None, "異動者ID", None, None, None, None, None),
    ("Mat_EditCode", "nvarchar(50)", None, "異動者代碼", None, None, None, None, None),
    ("Mat_EditDate", "datetime", None, "異動時間", None, None, None, None, None),
    ("Mat_EditIp", "nvarchar(50)", None, "異動者IP", None, None, None, None, None),
]

ORDER_LINE_ROWS = [
    ("PK_OrderLine", "bigint", None, "主鍵", None, None, "1", "1", None),
    ("FK_Order", "bigint", None, "訂單主鍵", None, None, None, "1", None),
    ("Ol_Qty", "int", None, "數量", None, "10", None, "1", None),
    ("Ol_CreateId", "bigint", None, "建立者ID", None, None, None, "1", None),
]


class WorksheetTestHelper:
    """Helper class for creating test worksheets and fields."""

    @staticmethod
    def worksheet(title: str, rows: list[tuple[Any, ...]]) -> Worksheet:
        """Create a worksheet with the standard header row."""
        return Worksheet(title=title, rows=(HEADER, *rows))

    @staticmethod
    def field(name: str, declared_type: str = "nvarchar(50)", **kwargs: Any) -> FieldDescriptor:
        """Create a resolved field."""
        return resolve_field(
            FieldDescriptor(name=name, declared_type=declared_type, **kwargs)
        )

    @staticmethod
    def write_workbook(path: Path, sheets: dict[str, list[tuple[Any, ...]]]) -> Path:
        """Write an .xlsx workbook with one worksheet per entry."""
        workbook = Workbook()
        workbook.remove(workbook.active)
        for title, rows in sheets.items():
            sheet = workbook.create_sheet(title)
            sheet.append(HEADER)
            for row in rows:
                sheet.append(row)
        workbook.save(path)
        return path


@pytest.fixture
def helper():
    """Provide the worksheet helper for tests."""
    return WorksheetTestHelper()


@pytest.fixture
def material_worksheet():
    """Header table worksheet with key, business and audit columns."""
    return WorksheetTestHelper.worksheet("Bga_Material(料件項目)", MATERIAL_ROWS)


@pytest.fixture
def order_line_worksheet():
    """Detail table worksheet with a foreign key column."""
    return WorksheetTestHelper.worksheet("Bga_Order_Line(訂單明細)", ORDER_LINE_ROWS)


@pytest.fixture
def material_entity(material_worksheet):
    """Entity built from the material worksheet."""
    from entity_generator.parsing.entity_builder import EntityModelBuilder

    entity = EntityModelBuilder().build(material_worksheet)
    assert isinstance(entity, EntityModel)
    return entity


@pytest.fixture
def order_line_entity(order_line_worksheet):
    """Entity built from the order line worksheet."""
    from entity_generator.parsing.entity_builder import EntityModelBuilder

    entity = EntityModelBuilder().build(order_line_worksheet)
    assert isinstance(entity, EntityModel)
    return entity


@pytest.fixture
def temp_project_root():
    """Create a temporary project root directory."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    shutil.rmtree(temp_dir)


@pytest.fixture
def workbook_path(tmp_path):
    """Workbook with a header table, a detail table, a truncated and a bad title."""
    return WorksheetTestHelper.write_workbook(
        tmp_path / "schema.xlsx",
        {
            "Bga_Material(料件項目)": MATERIAL_ROWS,
            "NoUnderscoreNoParens": MATERIAL_ROWS,
            "Bga_Order_Line(訂單明細)": ORDER_LINE_ROWS,
            "Sys_User(使用者帳號資料說明": [
                ("PK_User", "uniqueidentifier", None, "主鍵", None, None, 1, 1, None),
                ("Usr_Account", "varchar(30)", None, "帳號", None, None, None, 1, None),
            ],
        },
    )
