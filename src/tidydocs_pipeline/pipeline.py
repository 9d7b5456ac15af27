"""End-to-end cleaning of one CSV text blob.

`clean_csv_text` chains tokenize → repair → normalize → finalize. It performs
no I/O and never raises on malformed input: the worst case is an empty
Dataset with the counters explaining what was dropped.
"""
from __future__ import annotations

import logging

from tidydocs_pipeline.clean.finalize import finalize_rows
from tidydocs_pipeline.clean.normalize import normalize_rows
from tidydocs_pipeline.clean.repair import repair_rows
from tidydocs_pipeline.clean.schema import resolve_schema
from tidydocs_pipeline.ingest.tokenize import tokenize_csv
from tidydocs_pipeline.models import CleaningResult, CleaningStats

log = logging.getLogger(__name__)


def clean_csv_text(text: str) -> CleaningResult:
    """Clean raw CSV text into a Dataset plus statistics.

    Args:
        text: Full decoded file content.

    Returns:
        CleaningResult with the cleaned dataset and frozen statistics.
    """
    tokens = tokenize_csv(text)
    schema = resolve_schema(tokens.header)
    stats = CleaningStats(original_rows=len(tokens.rows))

    log.info(
        "Cleaning %d rows: date=%s description=%s amount=%s",
        stats.original_rows,
        _column_label(schema.header, schema.date_index),
        _column_label(schema.header, schema.description_index),
        _column_label(schema.header, schema.amount_index),
    )

    rows, stats = repair_rows(tokens.rows, schema, stats)
    rows, stats = normalize_rows(rows, schema, stats)
    dataset, stats = finalize_rows(rows, schema, stats)

    log.info(
        "Cleaning complete: original=%d cleaned=%d removed_blank=%d repaired=%d invalid_dates=%d",
        stats.original_rows,
        stats.cleaned_rows,
        stats.removed_blank,
        stats.repaired_rows,
        stats.invalid_dates,
    )
    return CleaningResult(dataset=dataset, stats=stats)


def _column_label(header: tuple[str, ...], index: int | None) -> str:
    return repr(header[index]) if index is not None else "none"
