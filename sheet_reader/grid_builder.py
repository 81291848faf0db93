"""
网格构建器 - 构建占用矩阵与包围盒，提供按坐标取值
"""
import math
from datetime import date, datetime, time
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .constants import BOOL_TRUE_TEXT, BOOL_FALSE_TEXT


def cell_to_string(value: Any) -> str:
    """
    单元格值 → 字符串
    缺失/NaN 为空串；布尔为 true/false；整数值的浮点数不带小数部分；日期为 ISO 格式
    """
    if value is None or value is pd.NaT:
        return ""
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool):
        return BOOL_TRUE_TEXT if value else BOOL_FALSE_TEXT
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def _is_absent(value: Any) -> bool:
    if value is None or value is pd.NaT:
        return True
    return isinstance(value, (float, np.floating)) and math.isnan(value)


class RawGrid:
    """
    单元格网格，坐标 0-based (row, col)。
    包围盒外的单元格视为缺失（absent）；包围盒内的空白单元格按空字符串读取。
    """

    def __init__(self, df: pd.DataFrame, start: Optional[Tuple[int, int]],
                 end: Optional[Tuple[int, int]]):
        self.df = df
        self.start = start
        self.end = end

    @property
    def is_empty(self) -> bool:
        return self.start is None

    @property
    def height(self) -> int:
        if self.start is None:
            return 0
        return self.end[0] - self.start[0] + 1

    @property
    def width(self) -> int:
        if self.start is None:
            return 0
        return self.end[1] - self.start[1] + 1

    def contains(self, row: int, col: int) -> bool:
        """坐标是否落在包围盒内"""
        if self.start is None:
            return False
        return self.start[0] <= row <= self.end[0] and self.start[1] <= col <= self.end[1]

    def get_value(self, row: int, col: int) -> Any:
        """按绝对坐标取值，包围盒外或缺失返回 None"""
        if not self.contains(row, col):
            return None
        value = self.df.iat[row, col]
        return None if _is_absent(value) else value

    def rows(self) -> Iterator[Tuple[int, List[Any]]]:
        """
        逐行遍历包围盒
        产出: (行坐标, 包围盒宽度的值列表)
        """
        if self.start is None:
            return
        r0, c0 = self.start
        r1, c1 = self.end
        for r in range(r0, r1 + 1):
            yield r, [self.get_value(r, c) for c in range(c0, c1 + 1)]

    def __repr__(self):
        return f"RawGrid(start={self.start}, end={self.end})"


class GridBuilder:
    """由原始 DataFrame 构建 RawGrid"""

    def __init__(self, df: pd.DataFrame, metadata: Optional[Dict[str, Any]] = None):
        self.df = df.astype(object) if not df.empty else df
        self.metadata = metadata or {}
        self.n_rows, self.n_cols = df.shape

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]],
                  metadata: Optional[Dict[str, Any]] = None) -> "GridBuilder":
        """由行列表构建（不等长的行以 None 补齐）"""
        data = [list(row) for row in rows]
        if not data:
            return cls(pd.DataFrame(), metadata)
        max_len = max(len(row) for row in data)
        data = [row + [None] * (max_len - len(row)) for row in data]
        return cls(pd.DataFrame(data, dtype=object), metadata)

    def build_occupancy_matrix(self) -> np.ndarray:
        """
        构建占用矩阵 O[r, c]: 有值（包括空字符串）为 1，缺失为 0
        """
        if self.df.empty:
            O = np.zeros((self.n_rows, self.n_cols), dtype=np.int8)
        else:
            O = self.df.notna().to_numpy().astype(np.int8)

        # 隐藏行列视为缺失
        hidden_rows = self.metadata.get("hidden_rows", set())
        hidden_cols = self.metadata.get("hidden_cols", set())

        for r in hidden_rows:
            if 0 <= r < self.n_rows:
                O[r, :] = 0

        for c in hidden_cols:
            if 0 <= c < self.n_cols:
                O[:, c] = 0

        return O

    def build(self) -> RawGrid:
        """计算包围盒并返回 RawGrid"""
        O = self.build_occupancy_matrix()
        if O.size == 0 or not O.any():
            return RawGrid(self.df, None, None)

        occupied_rows = np.flatnonzero(O.any(axis=1))
        occupied_cols = np.flatnonzero(O.any(axis=0))

        df = self.df
        if not O.all():
            # 隐藏的单元格置为缺失
            df = df.where(O.astype(bool), None)

        start = (int(occupied_rows[0]), int(occupied_cols[0]))
        end = (int(occupied_rows[-1]), int(occupied_cols[-1]))
        return RawGrid(df, start, end)
