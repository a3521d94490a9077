"""Shared plumbing for resource services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

from pydantic import BaseModel

from retail_express.models.pagination import DEFAULT_PAGE_SIZE, PageCursor
from retail_express.utils.pagination import iter_pages

if TYPE_CHECKING:
    from retail_express.client import RetailExpressClient


def resource_path(collection: str, resource_id: int) -> str:
    """Path for a single resource, e.g. customers/42."""
    if isinstance(resource_id, bool) or not isinstance(resource_id, int):
        raise TypeError(f"{collection} id must be an int, got {type(resource_id).__name__}")
    return f"{collection}/{resource_id}"


def dump_payload(payload: BaseModel | dict[str, Any]) -> dict[str, Any]:
    """Turn a request payload into a JSON-ready dict."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    return payload


class ResourceService:
    """Read access (paged list and get by id) for one resource collection."""

    collection: str = ""

    def __init__(self, client: RetailExpressClient) -> None:
        self._client = client

    def list(self, page_number: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Any:
        """Fetch one page of the collection."""
        cursor = PageCursor(page_number=page_number, page_size=page_size)
        return self._client.get(self.collection, params=cursor.as_params())

    def get(self, resource_id: int) -> Any:
        """Fetch a single resource by id."""
        return self._client.get(resource_path(self.collection, resource_id))

    def iter_all(self, page_size: int = DEFAULT_PAGE_SIZE) -> Iterator[Any]:
        """Iterate over every item in the collection, page by page.

        Pages are followed until total_records is reached when the API reports
        it. Otherwise iteration ends at the first page shorter than page_size,
        which truncates the walk if the API caps page size below the request.
        """
        def fetch(cursor: PageCursor) -> Any:
            return self._client.get(self.collection, params=cursor.as_params())

        return iter_pages(fetch, page_size)

    def list_all(self, page_size: int = DEFAULT_PAGE_SIZE) -> list[Any]:
        """Fetch every item in the collection."""
        return list(self.iter_all(page_size))
