"""Field normalization rules and the per-row normalize pass.

Each column receives exactly one rule, fixed by its `ColumnRole`:

- date: parsed with pandas and rendered as `YYYY-MM-DD`; unparseable text is
  kept as-is and flags the row.
- currency: rendered as `$1,234.50`, with `$0.00` for empty or unparseable
  input.
- boolean: `Yes` for yes/y/true/1, `No` for everything else.
- text: unquoted and trimmed only.

The pass also parses the first amount column of each row for the running
total.
"""
from __future__ import annotations

import logging
from typing import NamedTuple

import pandas as pd

from tidydocs_pipeline.aggregate.totals import format_currency, parse_amount
from tidydocs_pipeline.clean.schema import ColumnRole, ColumnSchema
from tidydocs_pipeline.models import CleaningStats

log = logging.getLogger(__name__)

TRUTHY = frozenset({"yes", "y", "true", "1"})
DATE_FORMAT = "%Y-%m-%d"
# pandas resolves these against the clock; they are not calendar dates
RELATIVE_DATE_WORDS = frozenset({"now", "today"})


class NormalizedField(NamedTuple):
    value: str
    is_valid: bool


def unquote(value: str) -> str:
    """Trim and strip one layer of surrounding double quotes.

    Inner doubled quotes are unescaped to a single `"`.
    """
    trimmed = value.strip()
    if len(trimmed) > 1 and trimmed.startswith('"') and trimmed.endswith('"'):
        return trimmed[1:-1].replace('""', '"')
    return trimmed


def normalize_date(value: str) -> NormalizedField:
    if not value.strip():
        return NormalizedField("", True)

    trimmed = value.strip()
    if trimmed.lower() in RELATIVE_DATE_WORDS:
        return NormalizedField(trimmed, False)

    try:
        ts = pd.to_datetime(trimmed, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        ts = pd.NaT

    if pd.isna(ts):
        return NormalizedField(trimmed, False)

    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC")
    return NormalizedField(ts.strftime(DATE_FORMAT), True)


def normalize_amount(value: str) -> str:
    if not value.strip():
        return format_currency(0.0)
    amount = parse_amount(value)
    if amount is None:
        return format_currency(0.0)
    return format_currency(amount)


def normalize_paid(value: str) -> str:
    return "Yes" if value.strip().lower() in TRUTHY else "No"


def normalize_value(value: str, role: ColumnRole) -> NormalizedField:
    """Unquote, trim and apply the rule for `role`.

    Returns:
        NormalizedField whose `is_valid` is only ever False for date columns.
    """
    cleaned = unquote(value).strip()

    if role is ColumnRole.DATE:
        return normalize_date(cleaned)
    if role is ColumnRole.CURRENCY:
        return NormalizedField(normalize_amount(cleaned), True)
    if role is ColumnRole.BOOLEAN:
        return NormalizedField(normalize_paid(cleaned), True)
    return NormalizedField(cleaned, True)


class NormalizedRow(NamedTuple):
    values: list[str]
    amount: float | None


def row_amount(values: list[str], schema: ColumnSchema) -> float | None:
    """Numeric value of the row's first amount column, if any."""
    if schema.amount_index is None or not values[schema.amount_index]:
        return None
    return parse_amount(values[schema.amount_index])


def normalize_rows(
    rows: list[list[str]],
    schema: ColumnSchema,
    stats: CleaningStats,
) -> tuple[list[NormalizedRow], CleaningStats]:
    """Normalize every field of every repaired row.

    Each row carries the parsed value of its first amount column so the
    final filter can add it to the running total once the row is kept.

    Args:
        rows: Rows aligned to the header by the repair stage.
        schema: Resolved header roles.
        stats: Accumulator on entry.

    Returns:
        A tuple of (normalized rows, stats with `invalid_dates` updated).
    """
    out: list[NormalizedRow] = []
    invalid_rows = 0

    for values in rows:
        normalized: list[str] = []
        has_invalid_date = False

        for value, role in zip(values, schema.roles):
            result = normalize_value(value, role)
            if not result.is_valid and result.value != "":
                has_invalid_date = True
            normalized.append(result.value)

        if has_invalid_date:
            invalid_rows += 1

        out.append(NormalizedRow(normalized, row_amount(normalized, schema)))

    log.info("Normalize pass: rows=%d invalid_dates=%d", len(out), invalid_rows)
    return out, stats.bump(invalid_dates=invalid_rows)
