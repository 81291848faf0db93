"""
表头定位器 - 找到第一行"满宽"的行作为表头
"""
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence

from .grid_builder import RawGrid, cell_to_string
from .models import HeaderLocation


def row_strings(values: Sequence[Any]) -> List[str]:
    """整行转字符串"""
    return [cell_to_string(v) for v in values]


def count_filled(cells: Sequence[str]) -> int:
    """非空字符串单元格数量"""
    return sum(1 for s in cells if s)


def build_header_map(cells: Sequence[str], first_col: int = 0) -> Dict[str, int]:
    """
    列名 → 列索引
    重名时后出现的列覆盖前面的
    """
    header_map = {}
    for offset, name in enumerate(cells):
        header_map[name] = first_col + offset
    return header_map


def find_duplicate_columns(cells: Sequence[str]) -> List[str]:
    """返回重复出现的列名（按首次出现顺序）"""
    counts = Counter(cells)
    return [name for name in dict.fromkeys(cells) if counts[name] > 1]


def locate_header(grid: RawGrid) -> Optional[HeaderLocation]:
    """
    扫描网格定位表头行

    从包围盒第一行开始，第一个非空单元格数 >= 包围盒列宽的行即为表头；
    前面的标题行、合并单元格行通常填不满整行，会被跳过。
    找不到时返回 None（不是异常）。
    """
    if grid.is_empty:
        return None

    first_row0, first_col0 = grid.start
    last_row0, last_col0 = grid.end
    min_cols = last_col0 - first_col0 + 1

    for r, values in grid.rows():
        cells = row_strings(values)
        if count_filled(cells) >= min_cols:
            # 行号对外为 1-based
            return HeaderLocation(
                header_map=build_header_map(cells, first_col0),
                header_row=r + 1,
                first_row=r + 2,
                last_row=last_row0 + 1,
                first_col=first_col0,
                last_col=last_col0,
            )

    return None
