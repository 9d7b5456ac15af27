"""Currency parsing, formatting and the running amount total.

Amounts are read leniently: thousands separators and any character that is
not a digit, `.` or `-` are discarded, then the longest leading decimal
number is taken. Anything without such a prefix has no numeric value.
"""
from __future__ import annotations

import re

from tidydocs_pipeline.models import CleaningStats

_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER_RE = re.compile(r"^-?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_amount(value: str) -> float | None:
    """Parse currency-like text into a float.

    Examples:
        "1,234.5" -> 1234.5, "$-12.00" -> -12.0, "abc" -> None, "" -> None.
    """
    cleaned = _NON_NUMERIC_RE.sub("", value.replace(",", ""))
    m = _LEADING_NUMBER_RE.match(cleaned)
    if not m:
        return None
    return float(m.group(0))


def format_currency(amount: float) -> str:
    """Render `amount` as dollars with two decimals and `,` grouping."""
    return f"${amount:,.2f}"


def format_total(stats: CleaningStats) -> str:
    """Total amount as shown in report headers (e.g. "$1,234.50")."""
    return format_currency(stats.total_amount)
