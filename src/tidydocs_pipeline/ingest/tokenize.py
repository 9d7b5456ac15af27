"""Quote-aware CSV tokenizer.

`tokenize_csv` splits raw text into a header and data rows. It never rejects
input: ragged rows are passed through untouched and left for the repair stage.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

log = logging.getLogger(__name__)


class TokenizedCsv(NamedTuple):
    header: list[str]
    rows: list[list[str]]


def split_fields(line: str) -> list[str]:
    """Split one line on commas that sit outside double quotes.

    Quotes toggle the quoted state and are not emitted; a doubled quote
    inside a quoted span yields one literal `"`.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)

    while i < n:
        ch = line[i]
        if ch == '"':
            if in_quotes and i + 1 < n and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1

    fields.append("".join(current))
    return fields


def tokenize_csv(text: str) -> TokenizedCsv:
    """Tokenize CSV text into a header and data rows.

    Lines that are blank after trimming are skipped. The first remaining line
    is the header (names trimmed); every later line becomes a data row.

    Args:
        text: Full decoded file content.

    Returns:
        TokenizedCsv with an empty header and no rows for blank input.
    """
    result: list[list[str]] = []

    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if not line.strip():
            continue
        result.append(split_fields(line))

    if not result:
        log.debug("Tokenizer received no non-blank lines")
        return TokenizedCsv(header=[], rows=[])

    header = [name.strip() for name in result[0]]
    rows = result[1:]
    log.debug("Tokenized %d data rows under %d header columns", len(rows), len(header))
    return TokenizedCsv(header=header, rows=rows)
