"""Customer service: list, get, create and update."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from retail_express.services.base import ResourceService, dump_payload, resource_path


class CustomerService(ResourceService):
    """Service for customer CRUD operations."""

    collection = "customers"

    def create(self, payload: BaseModel | dict[str, Any]) -> Any:
        """Create a new customer."""
        return self._client.post(self.collection, body=dump_payload(payload))

    def update(self, customer_id: int, payload: BaseModel | dict[str, Any]) -> Any:
        """Update an existing customer."""
        return self._client.put(
            resource_path(self.collection, customer_id), body=dump_payload(payload),
        )
