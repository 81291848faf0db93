from __future__ import annotations
import json
import logging
from pathlib import Path

import numpy as np

from sheet_reader.logger import DualLogger
from sheet_reader.models import FileFormat, LogLevel


def test_jsonl_and_text_output(tmp_path: Path):
    with DualLogger(tmp_path, LogLevel.INFO) as logger:
        logger.log("header.detect", file="a.xlsx", format=FileFormat.xlsx, sheet="S",
                   metrics={"header_row": np.int64(3), "start": (0, 1)})
        logger.log("sheet.scan", level=LogLevel.DEBUG, sheet="S")

    lines = (tmp_path / "run.log.jsonl").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    event = json.loads(lines[0])
    assert event["event"] == "header.detect"
    assert event["lvl"] == "INFO"
    assert event["format"] == "xlsx"
    assert event["metrics"] == {"header_row": 3, "start": [0, 1]}
    assert event["ts"].endswith("Z")

    text = (tmp_path / "run.log.txt").read_text(encoding="utf-8")
    assert "header.detect file=a.xlsx format=xlsx sheet=S header_row=3" in text
    assert "sheet.scan" not in text


def test_close_detaches_file_handler(tmp_path: Path):
    logger = DualLogger(tmp_path)
    handler = logger.txt_handler
    assert handler in logging.getLogger("sheet_reader").handlers
    logger.close()
    assert handler not in logging.getLogger("sheet_reader").handlers
    assert logger.jsonl_file is None


def test_without_log_dir_only_uses_logging(tmp_path: Path, caplog):
    logger = DualLogger()
    with caplog.at_level(logging.WARNING, logger="sheet_reader"):
        logger.log("preprocess.warning", level=LogLevel.WARN, message="big file")
    logger.close()
    assert logger.jsonl_path is None
    assert [r.getMessage() for r in caplog.records] == ["preprocess.warning big file"]
    assert caplog.records[0].levelno == logging.WARNING
