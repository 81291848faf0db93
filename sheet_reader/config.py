"""
配置类定义
"""
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .models import LogLevel
from .exceptions import InvalidArgumentError
from .constants import (
    CSV_ENCODINGS,
    DEFAULT_MAX_ROWS,
    DEFAULT_MAX_COLS,
    DEFAULT_MAX_FILE_SIZE_MB,
    DEFAULT_INCLUDE_HIDDEN,
)


@dataclass
class ReaderConfig:
    # 读取
    include_hidden: bool = DEFAULT_INCLUDE_HIDDEN  # False 时隐藏行列视为缺失（仅 xlsx）
    max_rows: Optional[int] = DEFAULT_MAX_ROWS    # 最大读取行数，超过会截断
    max_cols: Optional[int] = DEFAULT_MAX_COLS    # 最大读取列数，超过会截断
    max_file_size_mb: float = DEFAULT_MAX_FILE_SIZE_MB  # 超过会警告
    csv_encodings: List[str] = field(default_factory=lambda: list(CSV_ENCODINGS))

    # 日志
    log_level: LogLevel = LogLevel.INFO
    log_dir: Optional[str] = None  # 设置后同时写出 txt + jsonl 日志文件

    def __post_init__(self):
        if isinstance(self.log_level, str) and not isinstance(self.log_level, LogLevel):
            try:
                self.log_level = LogLevel(self.log_level.upper())
            except ValueError:
                raise InvalidArgumentError(f"Unknown log level: {self.log_level}")
        for name in ("max_rows", "max_cols"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise InvalidArgumentError(f"{name} must be positive, got {value}")
        if not self.csv_encodings:
            raise InvalidArgumentError("csv_encodings must not be empty")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReaderConfig":
        """从字典构建配置，未知键报错"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidArgumentError(f"Unknown config keys: {unknown}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "ReaderConfig":
        """从 YAML 文件加载配置"""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise InvalidArgumentError(f"Failed to load config '{path}': {e}")
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"Config '{path}' must be a mapping")
        return cls.from_dict(data)
