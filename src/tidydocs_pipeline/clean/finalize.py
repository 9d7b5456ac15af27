"""Final filter over normalized rows.

This pass guarantees no blank or incomplete row reaches a renderer: rows that
are entirely empty, or that lack a date or a description, are dropped and
counted in `removed_blank` on top of the repair stage's count. Amounts of the
rows that survive are summed into `total_amount`.
"""
from __future__ import annotations

import logging

from tidydocs_pipeline.clean.normalize import NormalizedRow
from tidydocs_pipeline.clean.schema import ColumnSchema
from tidydocs_pipeline.models import CleaningStats, Dataset, Record

log = logging.getLogger(__name__)


def finalize_rows(
    rows: list[NormalizedRow],
    schema: ColumnSchema,
    stats: CleaningStats,
) -> tuple[Dataset, CleaningStats]:
    """Build the output Dataset from normalized rows.

    Returns:
        A tuple of (dataset, stats with `removed_blank`, `total_amount` and
        `cleaned_rows` updated).
    """
    records: list[Record] = []
    dropped = 0
    total = 0.0

    for values, amount in rows:
        if all(not v.strip() for v in values):
            dropped += 1
            continue

        trimmed = tuple(v.strip() for v in values)

        if not schema.is_complete(trimmed):
            dropped += 1
            log.debug("Final filter: dropped incomplete row %r", trimmed)
            continue

        records.append(Record(columns=schema.header, values=trimmed))
        if amount is not None:
            total += amount

    dataset = Dataset(columns=schema.header, records=tuple(records))
    stats = stats.bump(removed_blank=dropped, total_amount=total).model_copy(
        update={"cleaned_rows": len(records)}
    )

    log.info("Final filter: kept=%d dropped=%d total=%.2f", len(records), dropped, total)
    return dataset, stats
