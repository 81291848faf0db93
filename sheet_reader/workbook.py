"""
表格视图 - 表头 + 原始网格，按列名访问数据行
"""
import os
from typing import Dict, Iterator, List, Optional, Union

import pandas as pd

from .grid_builder import RawGrid, cell_to_string
from .models import HeaderLocation
from .row import RowData
from .config import ReaderConfig


class WorkbookData:
    """
    一个 sheet 的表格视图（构建后只读）

    first_row / last_row: 数据行范围，1-based 闭区间（表头行之后）
    first_col / last_col: 网格包围盒的列范围，0-based 闭区间
    """

    def __init__(self, grid: RawGrid, location: HeaderLocation,
                 sheet_name: Optional[str] = None, source: Optional[str] = None):
        self.grid = grid
        self.header: Dict[str, int] = dict(location.header_map)
        self.header_row = location.header_row
        self.first_row = location.first_row
        self.last_row = location.last_row
        self.first_col = location.first_col
        self.last_col = location.last_col
        self.sheet_name = sheet_name
        self.source = source

    # ========== 加载入口 ==========
    @classmethod
    def from_path(cls, path: Union[str, os.PathLike],
                  config: Optional[ReaderConfig] = None) -> "WorkbookData":
        """读取第一个能找到表头的 sheet"""
        from .loader import load_workbook_data
        return load_workbook_data(path, config=config)

    @classmethod
    def from_path_with_sheet_name(cls, path: Union[str, os.PathLike], sheet_name: str,
                                  config: Optional[ReaderConfig] = None) -> "WorkbookData":
        """读取指定 sheet"""
        from .loader import load_workbook_data
        return load_workbook_data(path, sheet_name=sheet_name, config=config)

    # ========== 访问 ==========
    @property
    def columns(self) -> List[str]:
        """表头列名（按列顺序，重名只保留生效的那一列）"""
        return sorted(self.header, key=self.header.__getitem__)

    def get(self, row_number: int, column: str) -> Optional[str]:
        """
        取单元格字符串
        行号越界、列名未知、坐标在包围盒外时返回 None；包围盒内的空白单元格返回 ""
        """
        if row_number < self.first_row or row_number > self.last_row:
            return None

        col_number = self.header.get(column)
        if col_number is None:
            return None

        grid_row = row_number - 1
        if not self.grid.contains(grid_row, col_number):
            return None

        return cell_to_string(self.grid.get_value(grid_row, col_number))

    def is_row_empty(self, row_number: int) -> bool:
        """表头中所有列都无值或为空串"""
        return all(not self.get(row_number, column) for column in self.header)

    def iter_rows(self) -> Iterator[RowData]:
        """按行号升序产出 RowData，每次调用都从 first_row 重新开始"""
        for row_number in range(self.first_row, self.last_row + 1):
            yield RowData(self, row_number)

    def __iter__(self) -> Iterator[RowData]:
        return self.iter_rows()

    def __len__(self) -> int:
        return max(self.last_row - self.first_row + 1, 0)

    def to_dataframe(self, skip_empty: bool = True) -> pd.DataFrame:
        """
        导出为 DataFrame（值为字符串或 None），索引为源文件行号
        """
        records = []
        numbers = []
        for row in self.iter_rows():
            if skip_empty and row.is_empty():
                continue
            records.append(row.to_dict())
            numbers.append(row.number)
        return pd.DataFrame(records, index=pd.Index(numbers, name="row"),
                            columns=self.columns, dtype=object)

    def __repr__(self):
        return (f"WorkbookData(sheet={self.sheet_name!r}, header_row={self.header_row}, "
                f"rows={self.first_row}..{self.last_row}, cols={self.first_col}..{self.last_col})")
