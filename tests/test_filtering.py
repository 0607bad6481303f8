from csv_explorer.filtering import filter_rows

DATA = [
    ["Alice", "30", "Engineer"],
    ["Bob", "25", "Designer"],
    ["Charlie", "35", "Engineer"],
    ["Diana", "28", "Manager"],
]
HEADERS = ["name", "age", "role"]


def test_no_filters():
    assert filter_rows(DATA, HEADERS, "", []) == DATA


def test_global_search():
    assert filter_rows(DATA, HEADERS, "alice", []) == [DATA[0]]


def test_global_search_no_match():
    assert filter_rows(DATA, HEADERS, "zzz", []) == []


def test_global_search_case_insensitive():
    assert len(filter_rows(DATA, HEADERS, "ENGINEER", [])) == 2


def test_global_search_partial():
    assert filter_rows(DATA, HEADERS, "ob", []) == [DATA[1]]


def test_column_filter():
    assert filter_rows(DATA, HEADERS, "", ["ali", "", ""]) == [DATA[0]]


def test_column_filter_only_checks_its_column():
    assert filter_rows(DATA, HEADERS, "", ["", "", "ali"]) == []


def test_column_filters_and_together():
    result = filter_rows(DATA, HEADERS, "", ["a", "", "engineer"])
    assert result == [DATA[0], DATA[2]]
    assert filter_rows(DATA, HEADERS, "", ["bob", "", "engineer"]) == []


def test_global_and_column_combined():
    assert len(filter_rows(DATA, HEADERS, "engineer", ["ali", "", ""])) == 1


def test_none_cells_are_empty():
    data = [[None, "visible"], [None, "also"]]
    assert filter_rows(data, ["a", "b"], "visible", []) == [data[0]]


def test_none_filters():
    assert filter_rows(DATA, HEADERS, None, None) == DATA


def test_filter_on_missing_field():
    data = [["x"], ["y", "keep"]]
    assert filter_rows(data, ["a", "b"], "", ["", "keep"]) == [data[1]]


def test_returns_new_list_without_mutation():
    data = [list(row) for row in DATA]
    result = filter_rows(data, HEADERS, "", [])
    assert result is not data
    assert result[0] is data[0]
    assert data == DATA


def test_filtering_is_idempotent():
    once = filter_rows(DATA, HEADERS, "e", ["", "", "er"])
    assert filter_rows(once, HEADERS, "e", ["", "", "er"]) == once
