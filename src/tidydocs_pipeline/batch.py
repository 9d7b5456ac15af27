"""Clean many CSV files side by side with Dask.

Module notes:
- Each file is read and cleaned in its own delayed task; tasks share nothing.
- Results come back in input order as (path, CleaningResult) pairs.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, cast

from dask import delayed, compute  # type: ignore[attr-defined]

from tidydocs_pipeline.ingest.load_text import read_csv_text
from tidydocs_pipeline.models import CleaningResult
from tidydocs_pipeline.pipeline import clean_csv_text

log = logging.getLogger(__name__)


def _clean_file(path: Path, encoding: str) -> CleaningResult:
    """Runs inside a worker (delayed task)."""
    return clean_csv_text(read_csv_text(path, encoding=encoding))


def clean_files(
    paths: list[Path],
    encoding: str = "utf-8-sig",
    scheduler: str = "threads",
) -> list[tuple[Path, CleaningResult]]:
    """Clean every file in `paths` and return results in the same order.

    Args:
        paths: CSV files to clean.
        encoding: Text encoding passed to the loader.
        scheduler: Dask scheduler name ("threads", "processes" or "synchronous").

    Raises:
        ValueError: if any path is not a `.csv` file.
        FileNotFoundError: if any path is missing.
    """
    if not paths:
        return []

    log.info("Cleaning %d file(s) with the %s scheduler", len(paths), scheduler)

    tasks = [delayed(_clean_file)(p, encoding) for p in paths]
    results = cast(Any, compute)(*tasks, scheduler=scheduler)

    return list(zip(paths, results))
