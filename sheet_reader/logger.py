"""
日志系统 - 标准 logging + 可选的文本/JSONL 文件
"""
import json
import logging
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional, Dict, Any
from .models import LogEvent, LogLevel, FileFormat, ErrorCode
from .constants import LOGGER_NAME, LOG_TXT_FILE, LOG_JSONL_FILE, LOG_TS_FORMAT

_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class DualLogger:
    """双格式日志记录器（文本 + JSONL）

    未指定 log_dir 时只输出到 ``sheet_reader`` logger，由调用方决定 handler。
    """

    def __init__(self, log_dir: Optional[Path] = None, log_level: LogLevel = LogLevel.INFO):
        self.log_dir = Path(log_dir) if log_dir is not None else None
        self.log_level = log_level
        self.txt_logger = logging.getLogger(LOGGER_NAME)
        self.txt_handler = None
        self.jsonl_path = None
        self.jsonl_file = None

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

            # 文本日志
            self.txt_handler = logging.FileHandler(self.log_dir / LOG_TXT_FILE, encoding="utf-8")
            self.txt_handler.setLevel(_LEVELS[log_level])
            self.txt_handler.setFormatter(logging.Formatter(
                "[%(asctime)s %(levelname)s] %(message)s",
                datefmt=LOG_TS_FORMAT
            ))
            self.txt_logger.addHandler(self.txt_handler)
            self.txt_logger.setLevel(_LEVELS[log_level])

            # JSONL 日志
            self.jsonl_path = self.log_dir / LOG_JSONL_FILE
            self.jsonl_file = open(self.jsonl_path, "a", encoding="utf-8")

    def log(self, event: str, level: LogLevel = LogLevel.INFO, file: Optional[str] = None,
            format: Optional[FileFormat] = None, sheet: Optional[str] = None,
            message: Optional[str] = None, metrics: Optional[Dict[str, Any]] = None,
            error_code: Optional[ErrorCode] = None):
        """
        记录日志事件
        """
        if _LEVELS[level] < _LEVELS[self.log_level]:
            return

        ts = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")

        log_event = LogEvent(
            ts=ts,
            lvl=level,
            event=event,
            file=file,
            format=format,
            sheet=sheet,
            message=message,
            metrics=metrics,
            error_code=error_code,
        )

        if self.jsonl_file is not None:
            self.jsonl_file.write(json.dumps(self._to_json(log_event), ensure_ascii=False) + "\n")
            self.jsonl_file.flush()

        self.txt_logger.log(_LEVELS[level], self._to_text(log_event))

    def _to_json(self, log_event: LogEvent) -> Dict[str, Any]:
        json_obj = {
            "ts": log_event.ts,
            "lvl": log_event.lvl.value,
            "event": log_event.event,
        }
        if log_event.file:
            json_obj["file"] = log_event.file
        if log_event.format:
            json_obj["format"] = log_event.format.value
        if log_event.sheet:
            json_obj["sheet"] = log_event.sheet
        if log_event.message:
            json_obj["message"] = log_event.message
        if log_event.metrics:
            json_obj["metrics"] = self._convert_to_json_serializable(log_event.metrics)
        if log_event.error_code:
            json_obj["error_code"] = log_event.error_code.value
        return json_obj

    def _to_text(self, log_event: LogEvent) -> str:
        parts = [f"{log_event.event}"]
        if log_event.file:
            parts.append(f"file={log_event.file}")
        if log_event.format:
            parts.append(f"format={log_event.format.value}")
        if log_event.sheet:
            parts.append(f"sheet={log_event.sheet}")
        if log_event.message:
            parts.append(log_event.message)
        if log_event.metrics:
            metrics_converted = self._convert_to_json_serializable(log_event.metrics)
            metrics_str = " ".join(f"{k}={v}" for k, v in metrics_converted.items())
            if metrics_str:
                parts.append(metrics_str)
        return " ".join(parts)

    def _convert_to_json_serializable(self, obj):
        """
        将 numpy/pandas 类型转换为 JSON 可序列化的 Python 原生类型
        """
        import numpy as np
        import pandas as pd

        if isinstance(obj, dict):
            return {k: self._convert_to_json_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [self._convert_to_json_serializable(item) for item in obj]
        elif isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.bool_):
            return bool(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        elif obj is None or (isinstance(obj, float) and pd.isna(obj)):
            return None
        return obj

    def close(self):
        """关闭日志文件并移除 handler"""
        if self.txt_handler is not None:
            self.txt_logger.removeHandler(self.txt_handler)
            self.txt_handler.close()
            self.txt_handler = None
        if self.jsonl_file is not None:
            self.jsonl_file.close()
            self.jsonl_file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
