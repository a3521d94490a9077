"""Base API client for the Retail Express REST API.

Handles header injection, token acquisition, JSON encoding and decoding, and
normalizes transport failures into RequestError.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from retail_express.auth import Authenticator, build_auth
from retail_express.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_VERSION,
    AuthMode,
    Settings,
)
from retail_express.errors import InvalidResponseError, RequestError
from retail_express.models.pagination import DEFAULT_PAGE_SIZE
from retail_express.services.customers import CustomerService
from retail_express.services.orders import OrderService
from retail_express.services.products import ProductService

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class RetailExpressClient:
    """HTTP client for the Retail Express API with token handling."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        version: str | None = None,
        auth_mode: AuthMode | str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
        http: httpx.Client | None = None,
        auth: Authenticator | None = None,
    ) -> None:
        overrides = {
            "api_key": api_key,
            "base_url": base_url,
            "version": version,
            "auth_mode": auth_mode,
            "timeout": timeout,
        }
        if settings is not None:
            conflicting = sorted(name for name, value in overrides.items() if value is not None)
            if conflicting:
                raise ValueError(
                    f"Pass either settings or individual options, not both: {', '.join(conflicting)}"
                )
        elif api_key is None:
            raise ValueError("Either settings or api_key is required")
        else:
            settings = Settings(
                api_key=api_key,
                base_url=base_url if base_url is not None else DEFAULT_BASE_URL,
                version=version if version is not None else DEFAULT_VERSION,
                auth_mode=auth_mode if auth_mode is not None else AuthMode.TOKEN_EXCHANGE,
                timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
            )
        if http is not None and transport is not None:
            raise ValueError("Pass either http or transport, not both")

        self._settings = settings
        self._owns_http = http is None
        self._http = http if http is not None else httpx.Client(
            timeout=settings.timeout, transport=transport,
        )
        self._auth = auth if auth is not None else build_auth(settings, self._http)

        self.customers = CustomerService(self)
        self.products = ProductService(self)
        self.orders = OrderService(self)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def auth(self) -> Authenticator:
        return self._auth

    def request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | list | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make an authenticated API request and decode the JSON response.

        Args:
            method: HTTP method (GET, POST, PUT).
            path: Endpoint path relative to the versioned API root (e.g. "customers/42").
            body: JSON request body, sent only when non-empty.
            params: Query parameters, sent only when non-empty.

        Returns:
            The decoded JSON value, unchanged.

        Raises:
            AuthenticationError: If a token could not be obtained.
            RequestError: On transport failure or a non-2xx status.
            InvalidResponseError: If the response body is not valid JSON.
        """
        method = method.upper()
        url = self._settings.url_for(path)
        headers = self._build_headers()

        logger.debug("%s %s", method, url)

        try:
            response = self._http.request(
                method=method,
                url=url,
                headers=headers,
                json=body if body else None,
                params=params if params else None,
            )
        except httpx.HTTPError as e:
            raise RequestError(method, path, str(e)) from e

        logger.debug("Response: %s", response.status_code)

        if not 200 <= response.status_code < 300:
            error_body = response.text
            raise RequestError(
                method,
                path,
                error_body or f"HTTP {response.status_code}",
                status_code=response.status_code,
                body=error_body or None,
            )

        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError("Invalid JSON response from API.") from e

    def get(self, path: str, **kwargs: Any) -> Any:
        """Convenience method for GET requests."""
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> Any:
        """Convenience method for POST requests."""
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> Any:
        """Convenience method for PUT requests."""
        return self.request("PUT", path, **kwargs)

    def _build_headers(self) -> dict[str, str]:
        """Build request headers with bearer token and API key."""
        token = self._auth.get_access_token()
        return {
            "Authorization": f"Bearer {token}",
            "x-api-key": self._settings.api_key,
            "Accept": JSON_CONTENT_TYPE,
            "Content-Type": JSON_CONTENT_TYPE,
        }

    # ---------- Customers ----------

    def get_customers(self, page_number: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Any:
        return self.customers.list(page_number, page_size)

    def get_customer(self, customer_id: int) -> Any:
        return self.customers.get(customer_id)

    def create_customer(self, payload: Any) -> Any:
        return self.customers.create(payload)

    def update_customer(self, customer_id: int, payload: Any) -> Any:
        return self.customers.update(customer_id, payload)

    # ---------- Products ----------

    def get_products(self, page_number: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Any:
        return self.products.list(page_number, page_size)

    def get_product(self, product_id: int) -> Any:
        return self.products.get(product_id)

    # ---------- Orders ----------

    def get_orders(self, page_number: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Any:
        return self.orders.list(page_number, page_size)

    def get_order(self, order_id: int) -> Any:
        return self.orders.get(order_id)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._auth.close()
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> RetailExpressClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
