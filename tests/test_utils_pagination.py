"""Tests for utils/pagination.py: uses a callable mock for fetch_fn."""
from retail_express.utils.pagination import iter_pages, page_items, page_total, paginate


def test_single_short_page():
    assert paginate(lambda c: {"data": [{"id": 1}, {"id": 2}]}, page_size=10) == [
        {"id": 1}, {"id": 2},
    ]


def test_multiple_pages():
    pages = {1: {"data": [1, 2]}, 2: {"data": [3, 4]}, 3: {"data": [5]}}
    assert paginate(lambda c: pages[c.page_number], page_size=2) == [1, 2, 3, 4, 5]


def test_exact_multiple_needs_empty_page():
    pages = {1: {"data": [1, 2]}, 2: {"data": []}}
    seen = []

    def fetch(cursor):
        seen.append(cursor.page_number)
        return pages[cursor.page_number]

    assert paginate(fetch, page_size=2) == [1, 2]
    assert seen == [1, 2]


def test_cursor_passed_to_fetch():
    calls = []

    def fetch(cursor):
        calls.append(cursor.as_params())
        return {"data": []}

    paginate(fetch, page_size=25)
    assert calls == [{"page_number": 1, "page_size": 25}]


def test_start_page():
    calls = []

    def fetch(cursor):
        calls.append(cursor.page_number)
        return []

    list(iter_pages(fetch, page_size=5, start_page=3))
    assert calls == [3]


def test_iter_pages_is_lazy():
    calls = []

    def fetch(cursor):
        calls.append(cursor.page_number)
        return [cursor.page_number]

    it = iter_pages(fetch, page_size=1)
    assert next(it) == 1
    assert calls == [1]


def test_bare_list_page():
    assert page_items([1, 2]) == [1, 2]


def test_missing_results_key():
    assert page_items({"other": "data"}) == []


def test_custom_results_key():
    assert page_items({"items": [1]}, results_key="items") == [1]


def test_non_collection_page():
    assert page_items(None) == []


def test_total_records_followed_past_short_pages():
    # Server caps pages at 2 items even though 500 were requested
    pages = {
        1: {"data": [1, 2], "total_records": 5},
        2: {"data": [3, 4], "total_records": 5},
        3: {"data": [5], "total_records": 5},
    }
    seen = []

    def fetch(cursor):
        seen.append(cursor.page_number)
        return pages[cursor.page_number]

    assert paginate(fetch, page_size=500) == [1, 2, 3, 4, 5]
    assert seen == [1, 2, 3]


def test_total_records_stops_on_empty_page():
    pages = {1: {"data": [1], "total_records": 10}, 2: {"data": [], "total_records": 10}}
    assert paginate(lambda c: pages[c.page_number], page_size=500) == [1]


def test_page_total():
    assert page_total({"total_records": 7}) == 7
    assert page_total({"total_records": "7"}) is None
    assert page_total([1, 2]) is None
