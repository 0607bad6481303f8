import pytest

from csv_explorer.coltypes import ColumnType
from csv_explorer.sorting import sort_rows

DATA = [
    ["Charlie", "35", "2020-03-01"],
    ["Alice", "10", "2022-01-15"],
    ["Bob", "200", "2019-07-04"],
    ["Diana", "1", "2023-12-31"],
]
TYPES = {0: ColumnType.STRING, 1: ColumnType.NUMBER, 2: ColumnType.DATE}


def column(rows, c):
    return [row[c] for row in rows]


@pytest.mark.parametrize("sort_col, sort_dir", [(-1, "asc"), (0, "none"), (2, "none")])
def test_no_op_keeps_order(sort_col, sort_dir):
    assert sort_rows(DATA, sort_col, sort_dir, TYPES) == DATA


def test_string_ascending():
    assert column(sort_rows(DATA, 0, "asc", TYPES), 0) == ["Alice", "Bob", "Charlie", "Diana"]


def test_string_descending():
    assert column(sort_rows(DATA, 0, "desc", TYPES), 0) == ["Diana", "Charlie", "Bob", "Alice"]


def test_number_ascending():
    assert column(sort_rows(DATA, 1, "asc", TYPES), 1) == ["1", "10", "35", "200"]


def test_number_descending():
    assert column(sort_rows(DATA, 1, "desc", TYPES), 1) == ["200", "35", "10", "1"]


def test_number_with_thousands_separators():
    rows = [["1,500"], ["200"], ["12,000"]]
    result = sort_rows(rows, 0, "asc", {0: ColumnType.NUMBER})
    assert column(result, 0) == ["200", "1,500", "12,000"]


def test_date_ascending():
    result = column(sort_rows(DATA, 2, "asc", TYPES), 2)
    assert result == ["2019-07-04", "2020-03-01", "2022-01-15", "2023-12-31"]


def test_date_descending():
    result = column(sort_rows(DATA, 2, "desc", TYPES), 2)
    assert result[0] == "2023-12-31"
    assert result[-1] == "2019-07-04"


def test_unparseable_numbers_sort_first():
    rows = [["5"], [""], ["3"], ["n/a"]]
    result = sort_rows(rows, 0, "asc", {0: ColumnType.NUMBER})
    assert column(result, 0) == ["", "n/a", "3", "5"]


def test_unparseable_numbers_sort_last_descending():
    rows = [["5"], [""], ["3"]]
    result = sort_rows(rows, 0, "desc", {0: ColumnType.NUMBER})
    assert column(result, 0) == ["5", "3", ""]


def test_unparseable_dates_sort_first():
    rows = [["2021-01-01"], ["unknown"], ["2020-01-01"]]
    result = sort_rows(rows, 0, "asc", {0: ColumnType.DATE})
    assert column(result, 0) == ["unknown", "2020-01-01", "2021-01-01"]


def test_string_sort_is_natural():
    rows = [["10"], ["9"], ["2"], ["100"]]
    assert column(sort_rows(rows, 0, "asc", {0: ColumnType.STRING}), 0) == ["2", "9", "10", "100"]


def test_string_sort_ignores_case_and_keeps_ties_in_order():
    rows = [["b"], ["A"], ["a"], ["B"]]
    assert column(sort_rows(rows, 0, "asc", {}), 0) == ["A", "a", "b", "B"]


def test_string_sort_ignores_accents():
    rows = [["eclair"], ["apple"], ["éclair"]]
    assert column(sort_rows(rows, 0, "asc", {}), 0) == ["apple", "eclair", "éclair"]


def test_unknown_column_type_sorts_as_string():
    rows = [["b"], ["a"]]
    assert sort_rows(rows, 0, "asc", None) == [["a"], ["b"]]


def test_values_trimmed_before_comparison():
    rows = [[" 20"], ["3 "]]
    assert column(sort_rows(rows, 0, "asc", {0: ColumnType.NUMBER}), 0) == ["3 ", " 20"]


def test_descending_keeps_ties_in_input_order():
    rows = [["x", "1"], ["y", "1"], ["z", "2"]]
    result = sort_rows(rows, 1, "desc", {1: ColumnType.NUMBER})
    assert column(result, 0) == ["z", "x", "y"]


def test_short_rows_sort_as_empty():
    rows = [["b", "2"], ["a"], ["c", "1"]]
    result = sort_rows(rows, 1, "asc", {1: ColumnType.NUMBER})
    assert result == [["a"], ["c", "1"], ["b", "2"]]


def test_input_not_mutated():
    rows = [["b"], ["a"], ["c"]]
    first = rows[0]
    result = sort_rows(rows, 0, "asc", {0: ColumnType.STRING})
    assert rows[0] is first
    assert rows == [["b"], ["a"], ["c"]]
    assert result is not rows
