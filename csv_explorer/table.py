from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from .parser import Row
from .rules import HEADER_PLACEHOLDER


@dataclass(frozen=True)
class Table:
    """
    Header names plus the data body.

    Rows are not rectangularized; a missing field reads as an empty string.
    """
    headers: List[str] = field(default_factory=list)
    data: List[Row] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.headers)


def build_table(rows: Sequence[Row]) -> Table:
    """First row becomes the header row, empty header names get a placeholder."""
    if not rows:
        return Table()

    headers = [
        name or HEADER_PLACEHOLDER.format(i + 1)
        for i, name in enumerate(rows[0])
    ]
    return Table(headers=headers, data=list(rows[1:]))


def cell(row: Sequence, index: int) -> str:
    if index < len(row):
        value = row[index]
        return "" if value is None else value
    return ""
