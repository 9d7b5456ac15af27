"""Column-role resolution.

The header is scanned once and every column index is tagged with the
normalization rule it receives. The first date, description and amount
columns (by header order) are remembered for the completeness check and the
running total.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class ColumnRole(str, Enum):
    DATE = "date"
    CURRENCY = "currency"
    BOOLEAN = "boolean"
    TEXT = "text"


def is_date_column(name: str) -> bool:
    return "date" in name.lower()


def is_description_column(name: str) -> bool:
    lowered = name.lower()
    return "description" in lowered or "desc" in lowered


def is_amount_column(name: str) -> bool:
    lowered = name.lower()
    return "amount" in lowered or "price" in lowered


def is_paid_column(name: str) -> bool:
    return "paid" in name.lower()


def role_for(name: str) -> ColumnRole:
    """Pick the rule for a column name: date, then currency, then boolean."""
    if is_date_column(name):
        return ColumnRole.DATE
    if is_amount_column(name):
        return ColumnRole.CURRENCY
    if is_paid_column(name):
        return ColumnRole.BOOLEAN
    return ColumnRole.TEXT


def _first_index(header: tuple[str, ...], predicate: Callable[[str], bool]) -> int | None:
    for i, name in enumerate(header):
        if predicate(name):
            return i
    return None


@dataclass(frozen=True)
class ColumnSchema:
    """Roles for one header, computed once and shared by every row.

    Attributes:
        header: Ordered column names (duplicates allowed).
        roles: Normalization rule per column index.
        date_index: First column whose name contains "date".
        description_index: First column whose name contains "description"/"desc".
        amount_index: First column whose name contains "amount"/"price".
    """
    header: tuple[str, ...]
    roles: tuple[ColumnRole, ...]
    date_index: int | None
    description_index: int | None
    amount_index: int | None

    @property
    def width(self) -> int:
        return len(self.header)

    def is_complete(self, values: tuple[str, ...] | list[str]) -> bool:
        """True when both the date and the description field are non-empty."""
        return not _is_blank(values, self.date_index) and not _is_blank(
            values, self.description_index
        )

    def is_blank(self, values: tuple[str, ...] | list[str]) -> bool:
        """True when both the date and the description field are empty."""
        return _is_blank(values, self.date_index) and _is_blank(
            values, self.description_index
        )


def _is_blank(values: tuple[str, ...] | list[str], index: int | None) -> bool:
    if index is None or index >= len(values):
        return True
    return values[index].strip() == ""


def resolve_schema(header: list[str] | tuple[str, ...]) -> ColumnSchema:
    """Resolve the column roles for a header."""
    names = tuple(header)
    return ColumnSchema(
        header=names,
        roles=tuple(role_for(name) for name in names),
        date_index=_first_index(names, is_date_column),
        description_index=_first_index(names, is_description_column),
        amount_index=_first_index(names, is_amount_column),
    )
