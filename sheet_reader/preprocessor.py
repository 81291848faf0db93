"""
文件预处理器 - 打开前检查路径和文件大小
"""
import os
from pathlib import Path
from typing import Dict, Optional, Union

from .config import ReaderConfig
from .exceptions import DecoderError
from .logger import DualLogger
from .models import FileFormat, LogLevel


class FilePreprocessor:
    """文件预处理器"""

    def __init__(self, config: ReaderConfig, logger: Optional[DualLogger] = None):
        self.config = config
        self.logger = logger

    def preprocess_file(self, file_path: Union[str, os.PathLike],
                        format: Optional[FileFormat] = None) -> Dict:
        """
        预处理文件：检查是否存在、文件大小
        返回预处理信息字典；文件不存在时抛出 DecoderError
        """
        path = Path(file_path)
        if not path.is_file():
            raise DecoderError(f"File not found: {path}")

        info = {
            "file_path": str(path),
            "file_size_mb": 0.0,
            "warnings": [],
        }

        file_size_mb = path.stat().st_size / (1024 * 1024)
        info["file_size_mb"] = file_size_mb

        if file_size_mb > self.config.max_file_size_mb:
            warning = f"文件大小 {file_size_mb:.2f}MB 超过建议值 {self.config.max_file_size_mb}MB，处理可能较慢"
            info["warnings"].append(warning)
            if self.logger:
                self.logger.log("preprocess.warning", level=LogLevel.WARN, file=path.name,
                                format=format, message=warning)

        if self.logger:
            self.logger.log("preprocess.complete", level=LogLevel.DEBUG, file=path.name,
                            format=format,
                            metrics={
                                "file_size_mb": round(file_size_mb, 2),
                                "warnings_count": len(info["warnings"]),
                            })

        return info
