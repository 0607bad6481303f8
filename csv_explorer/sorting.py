from __future__ import annotations

import math
import unicodedata
from typing import Callable, Literal, Mapping, Optional, Sequence

from natsort import natsort_keygen, ns

from .coltypes import ColumnType, date_timestamp, leading_float
from .parser import Row
from .table import cell

SortDirection = Literal["asc", "desc", "none"]


def _fold(value: str) -> str:
    # drop accents so "é" and "e" compare equal, case is handled by natsort
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


_natural_key = natsort_keygen(key=_fold, alg=ns.IGNORECASE)


def _number_key(value: str) -> float:
    number = leading_float(value)
    return -math.inf if math.isnan(number) else number


def _date_key(value: str) -> float:
    stamp = date_timestamp(value)
    return -math.inf if math.isnan(stamp) else stamp


_KEYS: dict[ColumnType, Callable[[str], object]] = {
    ColumnType.NUMBER: _number_key,
    ColumnType.DATE: _date_key,
    ColumnType.STRING: _natural_key,
}


def sort_rows(
    rows: Sequence[Row],
    sort_col: int,
    sort_dir: SortDirection,
    col_types: Optional[Mapping[int, ColumnType]],
) -> list[Row]:
    """
    Return a new list ordered by one column according to its detected type.

    Unparseable numbers and dates sort as negative infinity, so they come
    first ascending and last descending. Equal keys keep their input order.
    """
    if sort_col < 0 or sort_dir == "none":
        return list(rows)

    # unknown or missing types compare as strings
    key = _KEYS.get((col_types or {}).get(sort_col), _natural_key)

    return sorted(
        rows,
        key=lambda row: key(cell(row, sort_col).strip()),
        reverse=sort_dir == "desc",
    )
