"""
Delimited text parsing.

Responsibilities:
- BOM stripping
- delimiter detection from the first line
- single-pass RFC-4180 style field scanning
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List

from .rules import BOM, DEFAULT_DELIMITER, DELIMITER_CANDIDATES

Row = List[str]

_FIRST_LINE_BREAK = re.compile(r"\r?\n")


@dataclass(frozen=True)
class ParsedText:
    delimiter: str = DEFAULT_DELIMITER
    rows: List[Row] = field(default_factory=list)


def detect_delimiter(text: str) -> str:
    """
    Pick the candidate that occurs most often in the first line.

    Ties keep the earlier candidate; a line without any candidate is comma.
    """
    first_line = _FIRST_LINE_BREAK.split(text, maxsplit=1)[0]

    delimiter = DEFAULT_DELIMITER
    best = 0
    for candidate in DELIMITER_CANDIDATES:
        count = first_line.count(candidate)
        if count > best:
            best = count
            delimiter = candidate
    return delimiter


def _end_of_field(text: str, i: int, delimiter: str) -> tuple[int, bool]:
    """
    Consume what follows a field. Returns the new cursor and whether the row ended.
    """
    n = len(text)
    if i >= n:
        return i, True
    ch = text[i]
    if ch == delimiter:
        return i + 1, False
    if ch == "\r":
        i += 1
        if i < n and text[i] == "\n":
            i += 1
        return i, True
    if ch == "\n":
        return i + 1, True
    # stray text after a closing quote starts the next field of the same row
    return i, False


def parse_text(text: str) -> ParsedText:
    """
    Parse delimited text into rows of string fields.

    Rules:
    - A single leading BOM is dropped.
    - Quoted fields keep their content verbatim, `""` is a literal quote.
    - Unquoted fields are trimmed.
    - A row holding exactly one empty field is dropped (blank lines).
    """
    if text.startswith(BOM):
        text = text[1:]

    delimiter = detect_delimiter(text)
    rows: List[Row] = []
    i = 0
    n = len(text)

    while i < n:
        row: Row = []
        row_done = False
        while i < n and not row_done:
            if text[i] == '"':
                i += 1
                chunks: List[str] = []
                while i < n:
                    close = text.find('"', i)
                    if close == -1:
                        chunks.append(text[i:])
                        i = n
                        break
                    chunks.append(text[i:close])
                    if close + 1 < n and text[close + 1] == '"':
                        chunks.append('"')
                        i = close + 2
                    else:
                        i = close + 1
                        break
                row.append("".join(chunks))
            else:
                start = i
                while i < n and text[i] not in (delimiter, "\r", "\n"):
                    i += 1
                row.append(text[start:i].strip())
            i, row_done = _end_of_field(text, i, delimiter)

        if row and not (len(row) == 1 and row[0] == ""):
            rows.append(row)

    return ParsedText(delimiter=delimiter, rows=rows)
