"""Python client for the Retail Express REST API (v2.1).

Example:
    from retail_express import RetailExpressClient

    with RetailExpressClient(api_key="YOUR_API_KEY") as client:
        customer = client.get_customer(42)
        page = client.get_orders(page_number=2, page_size=50)
"""

from retail_express.auth import StaticKeyAuth, TokenExchangeAuth, build_auth
from retail_express.client import RetailExpressClient
from retail_express.config import AuthMode, Settings
from retail_express.errors import (
    AuthenticationError,
    InvalidResponseError,
    RequestError,
    RetailExpressError,
    error_payload,
)
from retail_express.models.pagination import PageCursor

__all__ = [
    "AuthMode",
    "AuthenticationError",
    "InvalidResponseError",
    "PageCursor",
    "RequestError",
    "RetailExpressClient",
    "RetailExpressError",
    "Settings",
    "StaticKeyAuth",
    "TokenExchangeAuth",
    "build_auth",
    "error_payload",
]
