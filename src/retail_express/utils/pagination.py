"""Pagination helpers for Retail Express list endpoints."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from retail_express.models.pagination import DEFAULT_PAGE_SIZE, PageCursor


def page_items(page: Any, results_key: str = "data") -> list[Any]:
    """Extract the item list from a list-endpoint page.

    Pages are usually an envelope {"data": [...], ...}; a bare list is
    accepted as-is.
    """
    if isinstance(page, list):
        return page
    if isinstance(page, dict):
        items = page.get(results_key)
        if isinstance(items, list):
            return items
    return []


def page_total(page: Any, total_key: str = "total_records") -> int | None:
    """Total record count advertised by a page envelope, if any."""
    if isinstance(page, dict):
        total = page.get(total_key)
        if isinstance(total, int) and not isinstance(total, bool):
            return total
    return None


def iter_pages(
    fetch_fn: Callable[[PageCursor], Any],
    page_size: int = DEFAULT_PAGE_SIZE,
    results_key: str = "data",
    start_page: int = 1,
    total_key: str = "total_records",
) -> Iterator[Any]:
    """Yield items across pages by incrementing page_number.

    Args:
        fetch_fn: A callable that takes a PageCursor and returns the decoded page.
        page_size: Items requested per page.
        results_key: The key in each page holding the item list.
        start_page: First page number to fetch.
        total_key: The key in each page holding the total record count.

    Always stops on an empty page. When pages carry total_key, stops once
    that many items have been yielded, so a server that caps page size below
    the requested value is still walked to the end. Without it, stops after
    the first page holding fewer than page_size items.
    """
    cursor = PageCursor(page_number=start_page, page_size=page_size)
    seen = 0

    while True:
        page = fetch_fn(cursor)
        items = page_items(page, results_key)
        yield from items
        if not items:
            break
        seen += len(items)

        total = page_total(page, total_key)
        if total is not None:
            if seen >= total:
                break
        elif len(items) < cursor.page_size:
            break
        cursor = cursor.next()


def paginate(
    fetch_fn: Callable[[PageCursor], Any],
    page_size: int = DEFAULT_PAGE_SIZE,
    results_key: str = "data",
) -> list[Any]:
    """Fetch every page and return all items concatenated."""
    return list(iter_pages(fetch_fn, page_size, results_key))
