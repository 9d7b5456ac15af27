"""Read CSV files from disk as text for the cleaning pipeline."""

from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger(__name__)

CSV_SUFFIX = ".csv"


def read_csv_text(path: Path, encoding: str = "utf-8-sig") -> str:
    """Return the decoded content of a `.csv` file.

    Args:
        path: Path to the CSV file.
        encoding: Text encoding; the default strips a UTF-8 byte-order mark.

    Raises:
        ValueError: if the file does not carry a `.csv` suffix.
        FileNotFoundError: if the file does not exist.
    """
    if path.suffix.lower() != CSV_SUFFIX:
        raise ValueError(f"Please select a CSV file (got {path.name!r})")
    if not path.exists():
        raise FileNotFoundError(path)

    text = path.read_text(encoding=encoding)
    log.info("Read %s (%d characters)", path, len(text))
    return text
