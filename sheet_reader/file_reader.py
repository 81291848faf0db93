"""
文件读取器 - 支持 xlsx/xlsm/xlsb/xls/ods/csv

对外只暴露三件事：sheet 名列表、按 sheet 名取 RawGrid、单元格转字符串
"""
import codecs
import csv
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import pandas as pd
from openpyxl import load_workbook
from openpyxl.utils import column_index_from_string
try:
    import pyxlsb
except ImportError:
    pyxlsb = None

from .config import ReaderConfig
from .constants import CSV_SHEET_NAME, EXTENSION_FORMATS
from .exceptions import DecoderError, UnsupportedFormatError
from .grid_builder import GridBuilder, RawGrid, cell_to_string
from .models import FileFormat


def detect_format(file_path: Union[str, os.PathLike]) -> FileFormat:
    """按扩展名检测文件格式"""
    ext = Path(file_path).suffix.lower()
    if ext not in EXTENSION_FORMATS:
        raise UnsupportedFormatError(f"Unsupported file extension: {ext or '<none>'}")
    return FileFormat(EXTENSION_FORMATS[ext])


class WorkbookSource:
    """
    工作簿解码器基类
    子类实现 sheet_names() 和 _read_frame()，返回 (DataFrame, metadata)
    """

    format: FileFormat

    def __init__(self, file_path: Union[str, os.PathLike], config: Optional[ReaderConfig] = None):
        self.file_path = str(file_path)
        self.config = config or ReaderConfig()

    def sheet_names(self) -> List[str]:
        raise NotImplementedError

    def _read_frame(self, sheet_name: str) -> Tuple[pd.DataFrame, Dict[str, Any]]:
        raise NotImplementedError

    def read_sheet(self, sheet_name: str) -> RawGrid:
        """读取 sheet 为 RawGrid（行 0 对应文件第 1 行）"""
        if sheet_name not in self.sheet_names():
            raise DecoderError(f"Sheet '{sheet_name}' not found in '{self.file_path}'")
        try:
            df, metadata = self._read_frame(sheet_name)
        except DecoderError:
            raise
        except Exception as e:
            raise DecoderError(f"Failed to read sheet '{sheet_name}' from '{self.file_path}': {e}") from e
        return GridBuilder(self._truncate(df), metadata).build()

    @staticmethod
    def cell_to_string(value: Any) -> str:
        return cell_to_string(value)

    def _truncate(self, df: pd.DataFrame) -> pd.DataFrame:
        if self.config.max_rows is not None:
            df = df.iloc[:self.config.max_rows]
        if self.config.max_cols is not None:
            df = df.iloc[:, :self.config.max_cols]
        return df

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class XlsxSource(WorkbookSource):
    """xlsx / xlsm（openpyxl）"""

    def __init__(self, file_path, config=None, format: FileFormat = FileFormat.xlsx):
        super().__init__(file_path, config)
        self.format = format
        try:
            # 普通模式才能读取行列隐藏信息
            self.wb = load_workbook(self.file_path, data_only=True, read_only=False)
        except Exception as e:
            raise DecoderError(f"Failed to read xlsx file: {e}") from e

    def sheet_names(self) -> List[str]:
        return list(self.wb.sheetnames)

    def _read_frame(self, sheet_name):
        ws = self.wb[sheet_name]
        max_row = ws.max_row or 0
        max_col = ws.max_column or 0
        if self.config.max_rows:
            max_row = min(max_row, self.config.max_rows)
        if self.config.max_cols:
            max_col = min(max_col, self.config.max_cols)

        data = [list(row) for row in ws.iter_rows(min_row=1, max_row=max_row, min_col=1,
                                                    max_col=max_col, values_only=True)]
        df = pd.DataFrame(data, dtype=object) if data else pd.DataFrame()

        metadata = {
            "hidden_rows": set(),
            "hidden_cols": set(),
        }
        if not self.config.include_hidden:
            for idx, dim in ws.row_dimensions.items():
                if dim.hidden:
                    metadata["hidden_rows"].add(idx - 1)  # 0-based
            for key, dim in ws.column_dimensions.items():
                if not dim.hidden:
                    continue
                c0 = dim.min or column_index_from_string(key)
                c1 = dim.max or c0
                for c in range(c0, c1 + 1):
                    metadata["hidden_cols"].add(c - 1)  # 0-based
        return df, metadata

    def close(self):
        self.wb.close()


class XlsbSource(WorkbookSource):
    """xlsb（pyxlsb）"""

    format = FileFormat.xlsb

    def __init__(self, file_path, config=None):
        super().__init__(file_path, config)
        if pyxlsb is None:
            raise DecoderError("pyxlsb library not installed. Install with: pip install pyxlsb")
        try:
            with pyxlsb.open_workbook(self.file_path) as wb:
                self._sheets = list(wb.sheets)
        except Exception as e:
            raise DecoderError(f"Failed to read xlsb file: {e}") from e

    def sheet_names(self) -> List[str]:
        return list(self._sheets)

    def _read_frame(self, sheet_name):
        with pyxlsb.open_workbook(self.file_path) as wb:
            with wb.get_sheet(sheet_name) as ws:
                data = [[item.v for item in row] for row in ws.rows()]
        return GridBuilder.from_rows(data).df, {}


class PandasExcelSource(WorkbookSource):
    """xls / ods（pandas.ExcelFile，引擎由 pandas 选择）"""

    def __init__(self, file_path, config=None, format: FileFormat = FileFormat.xls):
        super().__init__(file_path, config)
        self.format = format
        try:
            self.xls = pd.ExcelFile(self.file_path)
        except ImportError as e:
            raise DecoderError(f"Missing reader engine for {format.value} files: {e}",
                               hint="pip install sheet-reader[legacy]") from e
        except Exception as e:
            raise DecoderError(f"Failed to read {format.value} file: {e}") from e

    def sheet_names(self) -> List[str]:
        return [str(name) for name in self.xls.sheet_names]

    def _read_frame(self, sheet_name):
        # 只把空单元格视为缺失，"NA" 等文本保持原样
        df = self.xls.parse(sheet_name, header=None, dtype=object,
                            keep_default_na=False, na_values=[""])
        return df, {}

    def close(self):
        self.xls.close()


class CsvSource(WorkbookSource):
    """csv（单个逻辑 sheet）"""

    format = FileFormat.csv

    def __init__(self, file_path, config=None):
        super().__init__(file_path, config)
        # 尝试多种编码，同时统计最大字段数（标题行的字段数可能少于表头）
        width = None
        last_error = None
        for encoding in self.config.csv_encodings:
            try:
                width = self._count_fields(encoding)
                self.encoding = encoding
                break
            except UnicodeDecodeError as e:
                last_error = e
                continue
            except (OSError, csv.Error) as e:
                raise DecoderError(f"Failed to read CSV file: {e}") from e
        if width is None:
            raise DecoderError(f"Failed to decode CSV file with encodings: "
                               f"{self.config.csv_encodings}. Last error: {last_error}")
        self._width = width

    def _count_fields(self, encoding: str) -> int:
        with open(self.file_path, encoding=encoding, newline="") as f:
            return max((len(row) for row in csv.reader(f)), default=0)

    def sheet_names(self) -> List[str]:
        return [CSV_SHEET_NAME]

    def _read_frame(self, sheet_name):
        if self._width == 0:
            return pd.DataFrame(), {}
        # utf-8-sig 兼容带 BOM 的文件
        encoding = "utf-8-sig" if codecs.lookup(self.encoding).name == "utf-8" else self.encoding
        # 空字段为缺失；空行保留，行号与源文件一致
        df = pd.read_csv(self.file_path, header=None, names=range(self._width), dtype=object,
                         keep_default_na=False, na_values=[""], skip_blank_lines=False,
                         encoding=encoding)
        return df, {}


def open_workbook(file_path: Union[str, os.PathLike], config: Optional[ReaderConfig] = None,
                  format: Optional[FileFormat] = None) -> WorkbookSource:
    """
    统一入口：按格式打开工作簿
    返回的 WorkbookSource 可作为上下文管理器使用
    """
    if format is None:
        format = detect_format(file_path)

    if format in (FileFormat.xlsx, FileFormat.xlsm):
        return XlsxSource(file_path, config, format)
    elif format == FileFormat.xlsb:
        return XlsbSource(file_path, config)
    elif format in (FileFormat.xls, FileFormat.ods):
        return PandasExcelSource(file_path, config, format)
    elif format == FileFormat.csv:
        return CsvSource(file_path, config)
    else:
        raise UnsupportedFormatError(f"Unsupported format: {format}")
