from __future__ import annotations

import math
from typing import List, Sequence, TypeVar, Union

from .rules import ELLIPSIS, EN_DASH

T = TypeVar("T")

PageEntry = Union[int, str]


def page_slice(rows: Sequence[T], page: int, page_size: int) -> List[T]:
    """page_size 0 means everything; pages past the end are empty."""
    if page_size == 0:
        return list(rows)
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(rows[start:start + page_size])


def total_pages(count: int, page_size: int) -> int:
    if page_size == 0:
        return 1
    return max(1, math.ceil(count / page_size))


def page_list(current: int, total: int) -> List[PageEntry]:
    """
    Compact page-button list: first and last page, the neighbours of the
    current page, and ELLIPSIS markers for the skipped runs.

    >>> page_list(10, 20)
    [1, '…', 9, 10, 11, '…', 20]
    """
    if total <= 7:
        return list(range(1, total + 1))

    result: List[PageEntry] = [1]

    def add_ellipsis() -> None:
        if result[-1] != ELLIPSIS:
            result.append(ELLIPSIS)

    if current > 3:
        add_ellipsis()
    result.extend(range(max(2, current - 1), min(total - 1, current + 1) + 1))
    if current < total - 2:
        add_ellipsis()
    result.append(total)
    return result


def row_info(page: int, page_size: int, matched: int, overall: int) -> str:
    """Status line such as '51–100 of 120 (500 total) rows'."""
    if page_size == 0 or matched == 0:
        shown = str(matched)
    else:
        start = (page - 1) * page_size + 1
        end = min(page * page_size, matched)
        shown = f"{start}{EN_DASH}{end}"

    text = f"{shown} of {matched}"
    if matched != overall:
        text += f" ({overall} total)"
    return text + " rows"
