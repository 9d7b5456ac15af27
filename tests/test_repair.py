from __future__ import annotations

from tidydocs_pipeline.clean.repair import align_row, repair_rows
from tidydocs_pipeline.clean.schema import ColumnRole, resolve_schema
from tidydocs_pipeline.models import CleaningStats


def test_resolve_schema_first_match_wins_and_precedence() -> None:
    schema = resolve_schema(["Paid Date", "Desc", "Description", "Price", "Amount", "Paid", "Notes"])
    assert schema.date_index == 0
    assert schema.description_index == 1
    assert schema.amount_index == 3
    assert schema.roles == (
        ColumnRole.DATE,
        ColumnRole.TEXT,
        ColumnRole.TEXT,
        ColumnRole.CURRENCY,
        ColumnRole.CURRENCY,
        ColumnRole.BOOLEAN,
        ColumnRole.TEXT,
    )


def test_align_row_pads_and_collects_overflow() -> None:
    assert align_row(["a"], 3) == (["a", "", ""], [])
    assert align_row(["a", "b", "c", "d"], 2) == (["a", "b"], ["c", "d"])


def test_overflow_is_merged_into_description() -> None:
    schema = resolve_schema(["Date", "Description", "Amount"])
    rows, stats = repair_rows(
        [["2024-01-01", "Lunch", "12", "with client", "downtown"]],
        schema,
        CleaningStats(),
    )
    assert rows == [["2024-01-01", "Lunch, with client, downtown", "12"]]
    assert stats.repaired_rows == 1


def test_overflow_into_empty_description_has_no_leading_separator() -> None:
    schema = resolve_schema(["Date", "Description", "Amount"])
    rows, _ = repair_rows(
        [["2024-01-01", "", "12", "late fee"], ["2024-01-02", "   ", "3", "tip"]],
        schema,
        CleaningStats(),
    )
    assert rows[0][1] == "late fee"
    assert rows[1][1] == "tip"


def test_overflow_without_description_column_is_discarded() -> None:
    schema = resolve_schema(["Date", "Amount"])
    rows, stats = repair_rows([["2024-01-01", "5", "junk"]], schema, CleaningStats())
    assert rows == [["2024-01-01", "5"]]
    assert stats.repaired_rows == 1


def test_rows_missing_both_date_and_description_are_dropped() -> None:
    schema = resolve_schema(["Date", "Description", "Amount"])
    rows, stats = repair_rows(
        [["", "  ", "4"], ["2024-01-01", "", ""], ["", "Note", ""]],
        schema,
        CleaningStats(removed_blank=1),
    )
    assert rows == [["2024-01-01", "", ""], ["", "Note", ""]]
    assert stats.removed_blank == 2
