from __future__ import annotations

import logging
from pathlib import Path

from tidydocs_pipeline.logging_config import configure_logging


def test_configure_logging_adds_stream_handler() -> None:
    # Ensure configuring logging doesn't raise and attaches a StreamHandler
    configure_logging(None)
    root = logging.getLogger()
    assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)


def test_configure_logging_writes_file(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "pipeline.log"
    configure_logging(log_path, level=logging.DEBUG)
    logging.getLogger("tidydocs_pipeline.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()
    assert "hello file" in log_path.read_text(encoding="utf-8")
    configure_logging(None)


def test_configure_logging_quiets_dask_but_not_package() -> None:
    configure_logging(None, level=logging.DEBUG)
    assert logging.getLogger("tidydocs_pipeline").getEffectiveLevel() == logging.DEBUG
    assert logging.getLogger("dask").getEffectiveLevel() == logging.WARNING

    configure_logging(None, level=logging.ERROR)
    assert logging.getLogger("dask").getEffectiveLevel() == logging.ERROR
    configure_logging(None)
