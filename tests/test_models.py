from __future__ import annotations

import pytest
from pydantic import ValidationError

from tidydocs_pipeline.models import CleaningStats, Dataset, Record


def test_record_lookup_with_duplicate_columns() -> None:
    rec = Record(columns=("Date", "Note", "Note"), values=("2024-01-01", "a", "b"))
    assert rec["Note"] == "a"
    assert list(rec.items()) == [("Date", "2024-01-01"), ("Note", "a"), ("Note", "b")]
    assert rec.to_dict() == {"Date": "2024-01-01", "Note": "a"}
    assert rec.get("Missing") is None
    with pytest.raises(KeyError):
        rec["Missing"]


def test_record_rejects_mismatched_widths() -> None:
    with pytest.raises(ValidationError):
        Record(columns=("a", "b"), values=("1",))


def test_record_is_frozen() -> None:
    rec = Record(columns=("a",), values=("1",))
    with pytest.raises(ValidationError):
        rec.values = ("2",)


def test_dataset_to_pandas_keeps_header_order() -> None:
    ds = Dataset(
        columns=("Date", "Description"),
        records=(Record(columns=("Date", "Description"), values=("2024-01-01", "x")),),
    )
    df = ds.to_pandas()
    assert list(df.columns) == ["Date", "Description"]
    assert df.iloc[0]["Description"] == "x"


def test_empty_dataset_to_pandas() -> None:
    df = Dataset(columns=("Date",)).to_pandas()
    assert df.empty
    assert list(df.columns) == ["Date"]


def test_stats_bump_returns_new_copy() -> None:
    stats = CleaningStats(removed_blank=1)
    bumped = stats.bump(removed_blank=2, total_amount=1.5)
    assert stats.removed_blank == 1
    assert bumped.removed_blank == 3
    assert bumped.total_amount == 1.5


def test_stats_rejects_negative_counts() -> None:
    with pytest.raises(ValidationError):
        CleaningStats(original_rows=-1)
