"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the pipeline's environment variables (including a check that
`TIDYDOCS_LOG_LEVEL` names a real logging level).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

BATCH_SCHEDULERS = ("threads", "processes", "synchronous")


@dataclass(frozen=True)
class Settings:
    """Container for pipeline configuration read from the environment.

    Attributes:
        input_encoding: Text encoding used when reading CSV files.
        output_dir: Directory where cleaned CSVs and stats are written.
        log_level: Numeric logging level.
        log_path: Optional log file; None disables file logging.
        batch_scheduler: Dask scheduler used for multi-file cleaning.
    """
    input_encoding: str
    output_dir: Path
    log_level: int
    log_path: Path | None
    batch_scheduler: str


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `TIDYDOCS_LOG_LEVEL` or `TIDYDOCS_DASK_SCHEDULER`
            holds an unknown value.
    """
    input_encoding = os.getenv("TIDYDOCS_INPUT_ENCODING", "utf-8-sig").strip() or "utf-8-sig"
    output_dir = Path(os.getenv("TIDYDOCS_OUTPUT_DIR", "data/cleaned"))
    level_name = os.getenv("TIDYDOCS_LOG_LEVEL", "INFO").strip().upper()
    log_path_raw = os.getenv("TIDYDOCS_LOG_PATH", "logs/pipeline.log").strip()
    batch_scheduler = os.getenv("TIDYDOCS_DASK_SCHEDULER", "threads").strip().lower()

    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise RuntimeError(
            f"TIDYDOCS_LOG_LEVEL={level_name!r} is not a logging level "
            "(example: 'INFO' or 'DEBUG')."
        )

    if batch_scheduler not in BATCH_SCHEDULERS:
        raise RuntimeError(
            f"TIDYDOCS_DASK_SCHEDULER must be one of {', '.join(BATCH_SCHEDULERS)}; "
            f"got {batch_scheduler!r}."
        )

    return Settings(
        input_encoding=input_encoding,
        output_dir=output_dir,
        log_level=log_level,
        log_path=Path(log_path_raw) if log_path_raw else None,
        batch_scheduler=batch_scheduler,
    )
