"""
异常与错误模型
"""
from typing import Any, Optional
from .models import ErrorCode


class SheetReaderError(Exception):
    """异常基类"""
    def __init__(self, code: ErrorCode, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.code = code
        self.hint = hint


class InvalidArgumentError(SheetReaderError):
    def __init__(self, message: str = "Invalid argument", hint: Optional[str] = None):
        super().__init__(ErrorCode.INVALID_ARGUMENT, message, hint)


# ========== 加载阶段 ==========
class DecoderError(SheetReaderError):
    """底层表格解码失败（文件损坏、格式不支持、读取失败等）"""
    def __init__(self, message: str = "Failed to decode workbook", hint: Optional[str] = None,
                 code: ErrorCode = ErrorCode.DECODER):
        super().__init__(code, message, hint)


class UnsupportedFormatError(DecoderError):
    def __init__(self, message: str = "Unsupported file format", hint: Optional[str] = None):
        super().__init__(message, hint, code=ErrorCode.UNSUPPORTED_FORMAT)


class WorkbookEmptyError(SheetReaderError):
    """所有 sheet 都找不到表头"""
    def __init__(self, filename: str):
        super().__init__(ErrorCode.WORKBOOK_EMPTY, f"No data found in '{filename}'")
        self.filename = filename


class SheetEmptyError(SheetReaderError):
    """指定 sheet 找不到表头"""
    def __init__(self, filename: str, sheet_name: str):
        super().__init__(
            ErrorCode.SHEET_EMPTY,
            f"No data found in sheet '{sheet_name}' in '{filename}'",
        )
        self.filename = filename
        self.sheet_name = sheet_name


# ========== 行访问阶段 ==========
class NoValueError(SheetReaderError):
    """列不存在或单元格无值"""
    def __init__(self, column: str, row_number: Optional[int] = None):
        message = f"No value for column '{column}'"
        if row_number is not None:
            message += f" in row {row_number}"
        super().__init__(ErrorCode.NO_VALUE, message)
        self.column = column
        self.row_number = row_number


class ParseError(SheetReaderError):
    """单元格有值但无法转换为目标类型"""
    def __init__(self, column: str, value: str, target: Any = None, row_number: Optional[int] = None):
        target_name = getattr(target, "__name__", repr(target)) if target is not None else "value"
        message = f"Failed to parse column '{column}' value {value!r} as {target_name}"
        if row_number is not None:
            message += f" in row {row_number}"
        super().__init__(ErrorCode.PARSE, message)
        self.column = column
        self.value = value
        self.target = target
        self.row_number = row_number
