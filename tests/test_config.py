from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tidydocs_pipeline.config import get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TIDYDOCS_INPUT_ENCODING",
        "TIDYDOCS_OUTPUT_DIR",
        "TIDYDOCS_LOG_LEVEL",
        "TIDYDOCS_LOG_PATH",
        "TIDYDOCS_DASK_SCHEDULER",
    ):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.input_encoding == "utf-8-sig"
    assert s.output_dir == Path("data/cleaned")
    assert s.log_level == logging.INFO
    assert s.log_path == Path("logs/pipeline.log")
    assert s.batch_scheduler == "threads"


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TIDYDOCS_LOG_LEVEL", "debug")
    monkeypatch.setenv("TIDYDOCS_LOG_PATH", "")
    monkeypatch.setenv("TIDYDOCS_DASK_SCHEDULER", "synchronous")
    s = get_settings()
    assert s.log_level == logging.DEBUG
    assert s.log_path is None
    assert s.batch_scheduler == "synchronous"


def test_unknown_log_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TIDYDOCS_LOG_LEVEL", "LOUD")
    with pytest.raises(RuntimeError):
        get_settings()


def test_unknown_scheduler_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TIDYDOCS_LOG_LEVEL", "INFO")
    monkeypatch.setenv("TIDYDOCS_DASK_SCHEDULER", "cluster")
    with pytest.raises(RuntimeError):
        get_settings()
