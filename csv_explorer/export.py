"""
CSV serialization of a (filtered, sorted) view.

Output is comma-delimited, CRLF-terminated and prefixed with a BOM so
spreadsheet applications detect UTF-8.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Sequence

from .rules import BOM, EXPORT_DELIMITER, EXPORT_LINE_TERMINATOR
from .table import cell

_NEEDS_QUOTES = (",", '"', "\n", "\r")
_CSV_SUFFIX = re.compile(r"\.csv$", re.IGNORECASE)


def escape_field(value: Any) -> str:
    s = "" if value is None else str(value)
    if any(ch in s for ch in _NEEDS_QUOTES):
        return '"' + s.replace('"', '""') + '"'
    return s


def serialize(headers: Sequence[str], rows: Iterable[Sequence]) -> str:
    """
    Render headers and rows as CSV text.

    Every row is written for the header positions only: short rows get empty
    fields, extra fields are dropped.
    """
    lines = [EXPORT_DELIMITER.join(escape_field(h) for h in headers)]
    width = len(headers)
    for row in rows:
        lines.append(
            EXPORT_DELIMITER.join(escape_field(cell(row, c)) for c in range(width))
        )
    return BOM + EXPORT_LINE_TERMINATOR.join(lines)


def export_filename(filename: str) -> str:
    return f"{_CSV_SUFFIX.sub('', filename or '')}_filtered.csv"
