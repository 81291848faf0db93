from __future__ import annotations
import logging
from pathlib import Path

import pytest

from sheet_reader import DecoderError, ReaderConfig
from sheet_reader.logger import DualLogger
from sheet_reader.preprocessor import FilePreprocessor


def test_reports_size(tmp_path: Path):
    path = tmp_path / "data.csv"
    path.write_bytes(b"a,b\n1,2\n")
    info = FilePreprocessor(ReaderConfig()).preprocess_file(path)
    assert info["file_path"] == str(path)
    assert info["file_size_mb"] > 0
    assert info["warnings"] == []


def test_large_file_warns_but_continues(tmp_path: Path, caplog):
    path = tmp_path / "data.csv"
    path.write_bytes(b"x" * 2048)
    config = ReaderConfig(max_file_size_mb=0.001)
    with caplog.at_level(logging.WARNING, logger="sheet_reader"):
        info = FilePreprocessor(config, DualLogger()).preprocess_file(path)
    assert len(info["warnings"]) == 1
    assert any(r.getMessage().startswith("preprocess.warning") for r in caplog.records)


def test_missing_file(tmp_path: Path):
    with pytest.raises(DecoderError, match="File not found"):
        FilePreprocessor(ReaderConfig()).preprocess_file(tmp_path / "nope.xlsx")


def test_directory_is_not_a_file(tmp_path: Path):
    with pytest.raises(DecoderError):
        FilePreprocessor(ReaderConfig()).preprocess_file(tmp_path)
