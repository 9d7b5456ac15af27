from __future__ import annotations

from tidydocs_pipeline.ingest.tokenize import split_fields, tokenize_csv


def test_split_fields_respects_quotes_and_escapes() -> None:
    assert split_fields('a,"b,c",d') == ["a", "b,c", "d"]
    assert split_fields('"say ""hi""",x') == ['say "hi"', "x"]
    assert split_fields("a,,") == ["a", "", ""]


def test_tokenize_skips_blank_lines_and_keeps_ragged_rows() -> None:
    text = "Date,Description,Amount\r\n\r\n2024-01-01,Coffee\n   \n2024-01-02,Tea,3,extra\n"
    tokens = tokenize_csv(text)
    assert tokens.header == ["Date", "Description", "Amount"]
    assert tokens.rows == [
        ["2024-01-01", "Coffee"],
        ["2024-01-02", "Tea", "3", "extra"],
    ]


def test_tokenize_trims_header_names() -> None:
    tokens = tokenize_csv(" Date , Description \n2024-01-01,x\n")
    assert tokens.header == ["Date", "Description"]


def test_tokenize_empty_input() -> None:
    tokens = tokenize_csv("\n  \n")
    assert tokens.header == []
    assert tokens.rows == []
