from __future__ import annotations

from typing import List, Optional, Sequence

from .parser import Row
from .table import cell


def filter_rows(
    data: Sequence[Row],
    headers: Optional[Sequence[str]],
    global_search: Optional[str],
    col_filters: Optional[Sequence[Optional[str]]],
) -> List[Row]:
    """
    Keep rows matching the global search and every per-column filter.

    Matching is a case-insensitive substring test; empty filters match
    everything. Filters beyond the header count are ignored.
    """
    needle = (global_search or "").lower()
    col_needles = [(f or "").lower() for f in (col_filters or [])]
    col_count = len(headers) if headers else 0
    active = [
        (c, f) for c, f in enumerate(col_needles[:col_count]) if f
    ]

    def keep(row: Row) -> bool:
        if needle and not any(
            needle in ("" if value is None else value).lower() for value in row
        ):
            return False
        return all(f in cell(row, c).lower() for c, f in active)

    return [row for row in data if keep(row)]
