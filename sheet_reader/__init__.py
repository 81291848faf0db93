"""
Sheet Reader - 自动定位表头、按列名读取表格数据
"""

__version__ = "1.0.0"

from .loader import load_workbook_data, load_sheet
from .workbook import WorkbookData
from .row import RowData
from .header_locator import locate_header
from .grid_builder import GridBuilder, RawGrid, cell_to_string
from .file_reader import open_workbook, detect_format, WorkbookSource
from .config import ReaderConfig
from .models import (
    FileFormat,
    LogLevel,
    ErrorCode,
    HeaderLocation,
)
from .exceptions import (
    SheetReaderError,
    InvalidArgumentError,
    DecoderError,
    UnsupportedFormatError,
    WorkbookEmptyError,
    SheetEmptyError,
    NoValueError,
    ParseError,
)

__all__ = [
    "load_workbook_data",
    "load_sheet",
    "WorkbookData",
    "RowData",
    "locate_header",
    "GridBuilder",
    "RawGrid",
    "cell_to_string",
    "open_workbook",
    "detect_format",
    "WorkbookSource",
    "ReaderConfig",
    "FileFormat",
    "LogLevel",
    "ErrorCode",
    "HeaderLocation",
    "SheetReaderError",
    "InvalidArgumentError",
    "DecoderError",
    "UnsupportedFormatError",
    "WorkbookEmptyError",
    "SheetEmptyError",
    "NoValueError",
    "ParseError",
]
