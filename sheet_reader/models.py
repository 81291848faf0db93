"""
数据类与枚举定义
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Any
from enum import Enum


# ========== 枚举 ==========
class FileFormat(str, Enum):
    xlsx = "xlsx"
    xlsm = "xlsm"
    xlsb = "xlsb"
    xls = "xls"
    ods = "ods"
    csv = "csv"


class LogLevel(str, Enum):
    INFO = "INFO"
    DEBUG = "DEBUG"
    WARN = "WARN"
    ERROR = "ERROR"


class ErrorCode(str, Enum):
    INVALID_ARGUMENT = "InvalidArgumentError"
    UNSUPPORTED_FORMAT = "UnsupportedFormatError"
    DECODER = "DecoderError"
    WORKBOOK_EMPTY = "WorkbookEmptyError"
    SHEET_EMPTY = "SheetEmptyError"
    NO_VALUE = "NoValueError"
    PARSE = "ParseError"


# ========== 表头定位结果 ==========
@dataclass(frozen=True)
class HeaderLocation:
    """
    header_map: 列名 → 列索引（0-based，与网格列坐标一致）。
    header_row / first_row / last_row: 1-based 行号，first_row 为表头下一行。
    first_col / last_col: 网格包围盒的列边界（0-based，闭区间）。
    """
    header_map: Dict[str, int]
    header_row: int
    first_row: int
    last_row: int
    first_col: int
    last_col: int


# ========== 日志事件 ==========
@dataclass
class LogEvent:
    ts: str                 # "2025-11-09T14:30:12Z"
    lvl: LogLevel
    event: str              # 例如: "run.start","sheet.scan","header.detect"
    file: Optional[str] = None
    format: Optional[FileFormat] = None
    sheet: Optional[str] = None
    message: Optional[str] = None
    metrics: Optional[Dict[str, Any]] = None
    error_code: Optional[ErrorCode] = None
