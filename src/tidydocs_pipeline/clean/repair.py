"""Repair stage: fold overflow fields into the description and drop blank rows.

Rows are aligned to the header: missing trailing fields become empty strings
and fields beyond the header width are treated as overflow. Overflow is
joined with ", " onto the first description column; a row left without both
a date and a description is dropped.
"""
from __future__ import annotations

import logging
from typing import NamedTuple

from tidydocs_pipeline.clean.schema import ColumnSchema
from tidydocs_pipeline.models import CleaningStats

log = logging.getLogger(__name__)

OVERFLOW_SEPARATOR = ", "


class AlignedRow(NamedTuple):
    values: list[str]
    overflow: list[str]


def align_row(fields: list[str], width: int) -> AlignedRow:
    """Pad or split a tokenized row to the header width."""
    values = list(fields[:width])
    if len(values) < width:
        values.extend([""] * (width - len(values)))
    return AlignedRow(values=values, overflow=list(fields[width:]))


def merge_overflow(values: list[str], overflow: list[str], schema: ColumnSchema) -> list[str]:
    """Append overflow to the description column; discard it if there is none."""
    if schema.description_index is None:
        return values
    idx = schema.description_index
    extra = OVERFLOW_SEPARATOR.join(overflow)
    current = values[idx].strip()
    merged = f"{current}{OVERFLOW_SEPARATOR}{extra}" if current else extra
    out = list(values)
    out[idx] = merged.strip()
    return out


def repair_rows(
    rows: list[list[str]],
    schema: ColumnSchema,
    stats: CleaningStats,
) -> tuple[list[list[str]], CleaningStats]:
    """Repair tokenized data rows.

    Args:
        rows: Raw data rows from the tokenizer.
        schema: Resolved header roles.
        stats: Accumulator on entry.

    Returns:
        A tuple of (kept rows aligned to the header, updated stats).
    """
    kept: list[list[str]] = []
    repaired = 0
    removed = 0

    for row_no, fields in enumerate(rows, start=1):
        values, overflow = align_row(fields, schema.width)

        if overflow:
            values = merge_overflow(values, overflow, schema)
            repaired += 1
            log.debug("Data row %d: merged %d overflow field(s)", row_no, len(overflow))

        if schema.is_blank(values):
            removed += 1
            log.debug("Data row %d: dropped, no date and no description", row_no)
            continue

        kept.append(values)

    log.info("Repair pass: kept=%d repaired=%d removed=%d", len(kept), repaired, removed)
    return kept, stats.bump(repaired_rows=repaired, removed_blank=removed)
