"""Authentication for the Retail Express API.

Two strategies share one interface: exchanging the API key for a short-lived
bearer token (cached until shortly before expiry), or sending the API key
itself as a static bearer token.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Protocol

import httpx
from pydantic import ValidationError

from retail_express.config import AuthMode, Settings
from retail_express.errors import AuthenticationError
from retail_express.models.auth import Token, TokenResponse, TokenStatus

logger = logging.getLogger(__name__)

AUTH_TOKEN_PATH = "auth/token"

# Renew this long before the stated expiry to absorb in-flight request latency
RENEWAL_SKEW = timedelta(seconds=60)


class Authenticator(Protocol):
    def get_access_token(self, force_refresh: bool = False) -> str: ...

    def get_status(self) -> TokenStatus: ...

    def close(self) -> None: ...


class TokenExchangeAuth:
    """Exchanges the API key for an access token and caches it until renewal is due."""

    def __init__(self, settings: Settings, http: httpx.Client | None = None) -> None:
        self._settings = settings
        self._token: Token | None = None
        self._lock = threading.Lock()
        self._owns_http = http is None
        self._http = http if http is not None else httpx.Client(timeout=settings.timeout)

    def get_access_token(self, force_refresh: bool = False) -> str:
        """Get a valid access token value, authenticating if needed.

        Args:
            force_refresh: Authenticate even if the cached token is still valid.

        Returns:
            The bearer token string.

        Raises:
            AuthenticationError: If the key exchange fails.
        """
        if force_refresh:
            with self._lock:
                return self.authenticate().value
        return self.get_valid_token().value

    def get_valid_token(self) -> Token:
        """Return the cached token, or authenticate once if it is absent or due for renewal.

        Concurrent callers that find the token expired wait on the same
        authentication instead of each issuing their own.
        """
        token = self._token
        if token is not None and token.is_valid():
            return token

        with self._lock:
            # Another caller may have renewed while we waited
            token = self._token
            if token is not None and token.is_valid():
                return token
            return self.authenticate()

    def authenticate(self) -> Token:
        """Fetch a new access token and replace the cached one.

        Raises:
            AuthenticationError: On transport failure, a non-2xx status, a
                non-JSON body, or a missing/empty access_token or expires_on.
        """
        url = self._settings.url_for(AUTH_TOKEN_PATH)
        logger.info("Requesting access token from %s", url)

        try:
            response = self._http.get(
                url,
                headers={
                    "x-api-key": self._settings.api_key,
                    "Cache-Control": "no-cache",
                },
            )
        except httpx.HTTPError as e:
            raise AuthenticationError(f"API authentication request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            detail = response.text or f"HTTP {response.status_code}"
            raise AuthenticationError(f"API authentication request failed: {detail}")

        try:
            data = response.json()
        except ValueError as e:
            raise AuthenticationError(
                "Authentication failed: Invalid JSON in token response from API."
            ) from e

        try:
            token_data = TokenResponse.model_validate(data)
        except ValidationError as e:
            raise AuthenticationError(
                "Authentication failed: Invalid token response from API."
            ) from e

        token = Token(
            value=token_data.access_token,
            expires_at=token_data.expires_on - RENEWAL_SKEW,
        )
        self._token = token
        logger.info("Access token renewed, valid until %s", token.expires_at.isoformat())
        return token

    def get_status(self) -> TokenStatus:
        """Get the current token status."""
        token = self._token
        if token is None:
            return TokenStatus(has_token=False, is_expired=True)

        now = datetime.now(timezone.utc)
        is_expired = not token.is_valid(now)
        seconds_remaining = None
        if not is_expired:
            seconds_remaining = int((token.expires_at - now).total_seconds())

        return TokenStatus(
            has_token=True,
            is_expired=is_expired,
            expires_at=token.expires_at,
            seconds_remaining=seconds_remaining,
        )

    def close(self) -> None:
        """Close the underlying HTTP client if this manager created it."""
        if self._owns_http:
            self._http.close()


class StaticKeyAuth:
    """Sends the API key itself as the bearer token; never calls the auth endpoint."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def get_access_token(self, force_refresh: bool = False) -> str:
        return self._settings.api_key

    def get_status(self) -> TokenStatus:
        return TokenStatus(has_token=True, is_expired=False)

    def close(self) -> None:
        pass


def build_auth(settings: Settings, http: httpx.Client | None = None) -> Authenticator:
    """Create the authenticator selected by settings.auth_mode."""
    if settings.auth_mode == AuthMode.STATIC_KEY:
        return StaticKeyAuth(settings)
    return TokenExchangeAuth(settings, http)
