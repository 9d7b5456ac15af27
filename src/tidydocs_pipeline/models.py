"""Pydantic models shared by the pipeline stages.

These models define the cleaned records, the dataset handed to rendering
collaborators, and the statistics accumulator threaded through every stage.
"""

from __future__ import annotations

from typing import Iterator

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Record(BaseModel):
    """One cleaned row as an ordered column-name → value mapping.

    Column names may repeat when the input header is malformed; lookups by
    name return the first column carrying that name.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")
    columns: tuple[str, ...]
    values: tuple[str, ...]

    @model_validator(mode="after")
    def _check_widths(self) -> "Record":
        if len(self.columns) != len(self.values):
            raise ValueError("columns and values must have the same length")
        return self

    def get(self, name: str, default: str | None = None) -> str | None:
        for col, val in zip(self.columns, self.values):
            if col == name:
                return val
        return default

    def __getitem__(self, name: str) -> str:
        value = self.get(name)
        if value is None:
            raise KeyError(name)
        return value

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(zip(self.columns, self.values))

    def to_dict(self) -> dict[str, str]:
        """Plain dict view (first column wins for duplicate names)."""
        out: dict[str, str] = {}
        for col, val in self.items():
            out.setdefault(col, val)
        return out


class Dataset(BaseModel):
    """Ordered sequence of records sharing one header schema."""
    model_config = ConfigDict(frozen=True, extra="forbid")
    columns: tuple[str, ...] = ()
    records: tuple[Record, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.records

    def __len__(self) -> int:
        return len(self.records)

    def to_pandas(self) -> pd.DataFrame:
        """Materialize the dataset as a pandas DataFrame of strings.

        Duplicate header names are kept as duplicate DataFrame columns.
        """
        rows = [list(r.values) for r in self.records]
        return pd.DataFrame(rows, columns=list(self.columns), dtype=str)


class CleaningStats(BaseModel):
    """Counters collected while cleaning one input.

    Attributes:
        original_rows: Data rows produced by the tokenizer (header and blank
            lines excluded).
        cleaned_rows: Records in the final dataset.
        total_amount: Sum of the first amount/price column over kept rows.
        removed_blank: Rows dropped for missing date/description, counted at
            both the repair and the final filter stage.
        repaired_rows: Rows whose overflow fields were merged.
        invalid_dates: Rows with at least one unparseable date.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")
    original_rows: int = Field(0, ge=0)
    cleaned_rows: int = Field(0, ge=0)
    total_amount: float = 0.0
    removed_blank: int = Field(0, ge=0)
    repaired_rows: int = Field(0, ge=0)
    invalid_dates: int = Field(0, ge=0)

    def bump(self, **deltas: float) -> "CleaningStats":
        """Return a copy with each named counter increased by its delta."""
        update = {name: getattr(self, name) + delta for name, delta in deltas.items()}
        return self.model_copy(update=update)


class CleaningResult(BaseModel):
    """Pipeline output: the cleaned dataset and its frozen statistics."""
    model_config = ConfigDict(frozen=True, extra="forbid")
    dataset: Dataset
    stats: CleaningStats
