"""
加载入口 - 打开工作簿、定位表头、构建 WorkbookData
"""
import os
from pathlib import Path
from typing import Optional, Union

from .config import ReaderConfig
from .exceptions import DecoderError, SheetEmptyError, WorkbookEmptyError
from .file_reader import WorkbookSource, detect_format, open_workbook
from .header_locator import find_duplicate_columns, locate_header, row_strings
from .logger import DualLogger
from .models import LogLevel
from .preprocessor import FilePreprocessor
from .workbook import WorkbookData


def load_workbook_data(
    file_path: Union[str, os.PathLike],
    sheet_name: Optional[str] = None,
    config: Optional[ReaderConfig] = None
) -> WorkbookData:
    """
    统一入口函数

    Args:
        file_path: 工作簿路径
        sheet_name: 指定 sheet；为 None 时按顺序取第一个能找到表头的 sheet
        config: 配置对象

    Returns:
        WorkbookData

    Raises:
        WorkbookEmptyError: 所有 sheet 都找不到表头
        SheetEmptyError: 指定 sheet 不存在或找不到表头
        DecoderError: 文件不存在、格式不支持、解码失败
    """
    if config is None:
        config = ReaderConfig()

    filename = os.fspath(file_path)
    logger = DualLogger(config.log_dir, config.log_level)

    try:
        file_format = detect_format(file_path)
        logger.log("run.start", file=Path(filename).name, format=file_format, sheet=sheet_name)

        FilePreprocessor(config, logger).preprocess_file(file_path, file_format)

        with open_workbook(file_path, config, file_format) as source:
            sheet_names = source.sheet_names()
            logger.log("file.loaded", file=Path(filename).name, format=file_format,
                       metrics={"sheets": sheet_names})

            if sheet_name is None:
                data = _first_sheet_with_header(source, sheet_names, filename, logger)
                if data is None:
                    raise WorkbookEmptyError(filename)
            elif sheet_name not in sheet_names:
                # 不存在的 sheet 与没有表头的 sheet 同样视为无数据
                logger.log("header.missing", sheet=sheet_name, message="sheet not found")
                raise SheetEmptyError(filename, sheet_name)
            else:
                data = load_sheet(source, sheet_name, filename, logger)
                if data is None:
                    raise SheetEmptyError(filename, sheet_name)

        logger.log("run.end", sheet=data.sheet_name,
                   metrics={"header_row": data.header_row, "rows": len(data)})
        return data

    except Exception as e:
        logger.log("error", level=LogLevel.ERROR, message=str(e),
                   error_code=getattr(e, "code", None))
        raise
    finally:
        logger.close()


def _first_sheet_with_header(source: WorkbookSource, sheet_names, filename: str,
                             logger: DualLogger) -> Optional[WorkbookData]:
    for name in sheet_names:
        try:
            data = load_sheet(source, name, filename, logger)
        except DecoderError as e:
            # 单个 sheet 解码失败时继续尝试下一个
            logger.log("sheet.skip", level=LogLevel.WARN, sheet=name, message=str(e),
                       error_code=e.code)
            continue
        if data is not None:
            return data
    return None


def load_sheet(source: WorkbookSource, sheet_name: str, filename: Optional[str] = None,
               logger: Optional[DualLogger] = None) -> Optional[WorkbookData]:
    """
    解码单个 sheet 并定位表头
    找不到表头返回 None；解码失败抛出 DecoderError
    """
    if logger is None:
        logger = DualLogger()

    grid = source.read_sheet(sheet_name)
    logger.log("sheet.scan", level=LogLevel.DEBUG, sheet=sheet_name,
               metrics={"start": grid.start, "end": grid.end})

    location = locate_header(grid)
    if location is None:
        logger.log("header.missing", sheet=sheet_name,
                   metrics={"rows": grid.height, "cols": grid.width})
        return None

    header_cells = row_strings([
        grid.get_value(location.header_row - 1, c)
        for c in range(location.first_col, location.last_col + 1)
    ])
    duplicates = find_duplicate_columns(header_cells)
    if duplicates:
        logger.log("header.duplicate", level=LogLevel.WARN, sheet=sheet_name,
                   message="later column wins",
                   metrics={"columns": duplicates})

    logger.log("header.detect", sheet=sheet_name,
               metrics={"header_row": location.header_row,
                        "first_row": location.first_row,
                        "last_row": location.last_row,
                        "cols": len(location.header_map)})

    return WorkbookData(grid, location, sheet_name=sheet_name, source=filename)
