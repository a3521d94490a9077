"""Configuration for the Retail Express API client.

Settings are supplied programmatically by the embedding application.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://api.retailexpress.com.au"
DEFAULT_VERSION = "v2.1"
DEFAULT_TIMEOUT = 30.0


class AuthMode(str, Enum):
    """How the client obtains its bearer credential."""
    TOKEN_EXCHANGE = "token_exchange"
    STATIC_KEY = "static_key"


class Settings(BaseModel):
    """Client settings, immutable once built."""
    api_key: str = Field(min_length=1, description="Permanent Retail Express API key (x-api-key header)")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API host")
    version: str = Field(default=DEFAULT_VERSION, description="API version path segment")
    auth_mode: AuthMode = Field(default=AuthMode.TOKEN_EXCHANGE, description="Token exchange or static key")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")

    model_config = {"frozen": True}

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("version")
    @classmethod
    def _strip_slashes(cls, value: str) -> str:
        return value.strip("/")

    @property
    def api_root(self) -> str:
        """Versioned API root, always ending in a slash."""
        return f"{self.base_url}/{self.version}/"

    def url_for(self, path: str) -> str:
        """Absolute URL for an endpoint path relative to the API root."""
        return self.api_root + path.lstrip("/")
