"""Order lookup service."""

from __future__ import annotations

from retail_express.services.base import ResourceService


class OrderService(ResourceService):
    collection = "orders"
