"""
行句柄 - 引用 WorkbookData 的某一行
"""
from typing import TYPE_CHECKING, Any, Dict, Optional

from .converters import convert
from .exceptions import NoValueError, ParseError

if TYPE_CHECKING:
    from .workbook import WorkbookData


class RowData:
    """
    某一行的轻量引用，不复制数据
    每次取值都经由 WorkbookData 重新做边界检查
    """

    __slots__ = ("source", "row_number")

    def __init__(self, source: "WorkbookData", row_number: int):
        self.source = source
        self.row_number = row_number

    @property
    def number(self) -> int:
        """源文件中的行号（1-based）"""
        return self.row_number

    def get_optional(self, column: str) -> Optional[str]:
        """取列值，列名未知或行越界时返回 None，不抛异常"""
        return self.source.get(self.row_number, column)

    def get(self, column: str) -> str:
        """取列值，列名未知或行越界时抛出 NoValueError；空白单元格返回空串"""
        value = self.source.get(self.row_number, column)
        if value is None:
            raise NoValueError(column, self.row_number)
        return value

    def parse(self, column: str, target: Any = str) -> Any:
        """
        取列值并转换为 target 类型
        target: int/float/bool/Decimal/date/datetime/str 或任意接收字符串的可调用对象
        """
        value = self.get(column)
        try:
            return convert(value, target)
        except ValueError:
            raise ParseError(column, value, target, self.row_number)

    def is_empty(self) -> bool:
        return self.source.is_row_empty(self.row_number)

    def to_dict(self) -> Dict[str, Optional[str]]:
        """列名 → 值（无值为 None）"""
        return {column: self.get_optional(column) for column in self.source.columns}

    def __eq__(self, other):
        if not isinstance(other, RowData):
            return NotImplemented
        return self.source is other.source and self.row_number == other.row_number

    def __hash__(self):
        return hash((id(self.source), self.row_number))

    def __repr__(self):
        return f"RowData(row={self.row_number})"
