"""
常量定义
"""

# CSV 读取时依次尝试的编码
CSV_ENCODINGS = ["utf-8", "gbk", "gb2312", "latin-1"]

# CSV 文件只有一个逻辑 sheet
CSV_SHEET_NAME = "__csv__"

# 文件扩展名 -> 格式
EXTENSION_FORMATS = {
    ".xlsx": "xlsx",
    ".xlsm": "xlsm",
    ".xlsb": "xlsb",
    ".xls": "xls",
    ".ods": "ods",
    ".csv": "csv",
}

# 读取限制（None 表示不限制）
DEFAULT_MAX_ROWS = None
DEFAULT_MAX_COLS = None
DEFAULT_MAX_FILE_SIZE_MB = 100.0
DEFAULT_INCLUDE_HIDDEN = True

# 布尔值文本
BOOL_TRUE_TEXT = "true"
BOOL_FALSE_TEXT = "false"

# 日志
LOGGER_NAME = "sheet_reader"
LOG_TXT_FILE = "run.log.txt"
LOG_JSONL_FILE = "run.log.jsonl"
LOG_TS_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
