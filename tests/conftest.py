# Shared pytest fixtures
from __future__ import annotations
from pathlib import Path

import pytest
from openpyxl import Workbook

from sheet_reader import GridBuilder, WorkbookData, locate_header


def build_grid(rows):
    return GridBuilder.from_rows(rows).build()


def build_view(rows, sheet_name="Sheet1"):
    grid = build_grid(rows)
    location = locate_header(grid)
    assert location is not None, "fixture rows have no locatable header"
    return WorkbookData(grid, location, sheet_name=sheet_name)


@pytest.fixture()
def make_view():
    return build_view


@pytest.fixture()
def orders_view():
    # 第 1 行标题、第 2 行空、第 3 行表头，数据从第 4 行开始
    return build_view([
        ["Orders 2024", None, None],
        [None, None, None],
        ["Item", "Qty", "Price"],
        ["Bolt", 42, 0.25],
        ["Nut", "abc", 1.0],
        [None, None, None],
        ["Washer", None, 3.5],
    ])


@pytest.fixture()
def make_xlsx(tmp_path: Path):
    """sheets: {sheet 名: 行列表}，None 单元格不写入"""
    def _make(name: str, sheets: dict, hidden_rows: dict | None = None) -> Path:
        wb = Workbook()
        wb.remove(wb.active)
        for sheet, rows in sheets.items():
            ws = wb.create_sheet(sheet)
            for r, row in enumerate(rows, start=1):
                for c, value in enumerate(row, start=1):
                    if value is not None:
                        ws.cell(row=r, column=c, value=value)
            for r in (hidden_rows or {}).get(sheet, []):
                ws.row_dimensions[r].hidden = True
        path = tmp_path / name
        wb.save(path)
        return path
    return _make


@pytest.fixture()
def make_csv(tmp_path: Path):
    def _make(name: str, text: str, encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return path
    return _make
