"""
View state and its transitions.

The state is an immutable value: every user action produces a new state via
reduce_view, and derive_view recomputes the filtered, sorted and paged view
from the loaded table. Search, filter and sort changes always go back to page 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .coltypes import ColumnType
from .filtering import filter_rows
from .paging import PageEntry, page_list, page_slice, row_info, total_pages
from .parser import Row
from .rules import DEFAULT_PAGE_SIZE
from .sorting import SortDirection, sort_rows
from .table import Table


class ViewState(BaseModel):
    model_config = ConfigDict(frozen=True)

    global_search: str = ""
    col_filters: List[str] = Field(default_factory=list)
    sort_col: int = Field(default=-1, ge=-1)
    sort_dir: SortDirection = "none"
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=0, description="0 shows every row")


class ViewAction(BaseModel):
    type: Literal[
        "set_search",
        "clear_search",
        "set_column_filter",
        "toggle_sort",
        "goto_page",
        "set_page_size",
    ]
    column: Optional[int] = Field(default=None, ge=0)
    value: str = ""
    page: Optional[int] = None
    page_size: Optional[int] = Field(default=None, ge=0)


def initial_view(column_count: int, page_size: int) -> ViewState:
    return ViewState(col_filters=[""] * column_count, page_size=page_size)


def _next_sort(state: ViewState, column: int) -> tuple[int, SortDirection]:
    # cycle per column: asc -> desc -> unsorted
    if state.sort_col != column:
        return column, "asc"
    if state.sort_dir == "asc":
        return column, "desc"
    return -1, "none"


def reduce_view(state: ViewState, action: ViewAction, column_count: int) -> ViewState:
    """Apply one action and return the new state; the input is left untouched."""
    if action.type == "set_search":
        return state.model_copy(update={"global_search": action.value, "page": 1})

    if action.type == "clear_search":
        return state.model_copy(update={"global_search": "", "page": 1})

    if action.type in ("set_column_filter", "toggle_sort"):
        if action.column is None or action.column >= column_count:
            return state

        if action.type == "toggle_sort":
            sort_col, sort_dir = _next_sort(state, action.column)
            return state.model_copy(
                update={"sort_col": sort_col, "sort_dir": sort_dir, "page": 1}
            )

        filters = list(state.col_filters[:column_count])
        filters += [""] * (column_count - len(filters))
        filters[action.column] = action.value
        return state.model_copy(update={"col_filters": filters, "page": 1})

    if action.type == "goto_page":
        return state.model_copy(update={"page": max(1, action.page or 1)})

    if action.type == "set_page_size":
        if action.page_size is None:
            return state
        return state.model_copy(update={"page_size": action.page_size, "page": 1})

    return state


@dataclass(frozen=True)
class DerivedView:
    rows: List[Row]  # full filtered + sorted set, used for export
    page_rows: List[Row]
    page: int
    total_pages: int
    page_list: List[PageEntry]
    matched: int
    total: int
    row_info: str


def derive_view(
    table: Table,
    col_types: Mapping[int, ColumnType],
    state: ViewState,
) -> DerivedView:
    """
    Filter, sort and page the table. A page past the end lands on the last
    page, so the reported page always has a button in the page list.
    """
    rows = filter_rows(table.data, table.headers, state.global_search, state.col_filters)
    rows = sort_rows(rows, state.sort_col, state.sort_dir, col_types)

    pages = total_pages(len(rows), state.page_size)
    page = min(state.page, pages)
    return DerivedView(
        rows=rows,
        page_rows=page_slice(rows, page, state.page_size),
        page=page,
        total_pages=pages,
        page_list=page_list(page, pages),
        matched=len(rows),
        total=len(table.data),
        row_info=row_info(page, state.page_size, len(rows), len(table.data)),
    )
