"""Error taxonomy for the Retail Express client and structured error payloads."""

from __future__ import annotations

from typing import Any

import httpx


class RetailExpressError(RuntimeError):
    """Base class for every error raised by this library."""


class AuthenticationError(RetailExpressError):
    """The API key could not be exchanged for an access token."""


class InvalidResponseError(RetailExpressError):
    """A response body could not be decoded as JSON."""


class RequestError(RetailExpressError):
    """A resource request failed at the transport layer or returned a non-2xx status."""

    def __init__(
        self,
        method: str,
        path: str,
        detail: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(f"API request failed: {detail}. URI: {path}")
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body


# Actionable hints keyed by error code
_ERROR_HINTS: dict[str, str] = {
    "AUTH_ERROR": "Check the API key, and that it is enabled for this API version",
    "INVALID_RESPONSE": "The API returned a non-JSON body; check the base URL and version",
    "NOT_FOUND": "The requested resource does not exist; verify the ID",
    "RATE_LIMITED": "Rate limited; wait a moment and retry, or reduce page size",
    "SERVER_ERROR": "Retail Express returned a server error; retry later",
    "TIMEOUT": "Request timed out; try again or check network connectivity",
    "CONNECTION_ERROR": "Connection error; check network connectivity",
}


def _classify(error: Exception) -> str:
    if isinstance(error, AuthenticationError):
        return "AUTH_ERROR"
    if isinstance(error, InvalidResponseError):
        return "INVALID_RESPONSE"
    if isinstance(error, RequestError):
        status = error.status_code
        if status is None:
            cause = error.__cause__
            if isinstance(cause, httpx.TimeoutException):
                return "TIMEOUT"
            if isinstance(cause, httpx.ConnectError):
                return "CONNECTION_ERROR"
            return "REQUEST_ERROR"
        if status in (401, 403):
            return "AUTH_ERROR"
        if status == 404:
            return "NOT_FOUND"
        if status == 429:
            return "RATE_LIMITED"
        if status >= 500:
            return "SERVER_ERROR"
        return "REQUEST_ERROR"
    return "RUNTIME_ERROR"


def error_payload(error: Exception) -> dict[str, Any]:
    """Describe an error as a JSON-serializable dict for logs or API responses.

    {"error": true, "code": "NOT_FOUND", "message": "...", "hint": "...",
     "method": "GET", "path": "customers/42", "status_code": 404}
    """
    code = _classify(error)
    payload: dict[str, Any] = {
        "error": True,
        "code": code,
        "message": str(error),
    }
    hint = _ERROR_HINTS.get(code)
    if hint:
        payload["hint"] = hint
    if isinstance(error, RequestError):
        payload["method"] = error.method
        payload["path"] = error.path
        if error.status_code is not None:
            payload["status_code"] = error.status_code
    return payload
