"""Product catalogue service."""

from __future__ import annotations

from retail_express.services.base import ResourceService


class ProductService(ResourceService):
    collection = "products"
