"""Shared fixtures for the retail-express test suite."""
from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import httpx
import pytest

from retail_express.config import AuthMode, Settings


def iso_in(seconds: float) -> str:
    """ISO-8601 timestamp `seconds` from now, in UTC."""
    return (datetime.now(timezone.utc) + timedelta(seconds=seconds)).isoformat()


def make_response(status_code=200, json_data=None, text=None):
    """Build a fake httpx.Response."""
    r = MagicMock(spec=httpx.Response)
    r.status_code = status_code
    if text is None:
        text = json.dumps(json_data) if json_data is not None else ""
    r.text = text
    r.content = text.encode()
    if json_data is not None:
        r.json.return_value = json_data
    else:
        r.json.side_effect = json.JSONDecodeError("Expecting value", text, 0)
    return r


def make_token_response(access_token="tok-abc", expires_in=3600):
    """Fake response from the auth/token endpoint."""
    return make_response(200, {"access_token": access_token, "expires_on": iso_in(expires_in)})


@pytest.fixture
def fake_settings() -> Settings:
    return Settings(
        api_key="test-api-key",
        base_url="https://api.example.test",
        version="v2.1",
        auth_mode=AuthMode.TOKEN_EXCHANGE,
        timeout=30.0,
    )


@pytest.fixture
def static_settings() -> Settings:
    return Settings(
        api_key="static-key",
        base_url="https://api.example.test",
        auth_mode=AuthMode.STATIC_KEY,
    )


@pytest.fixture
def mock_http():
    """MagicMock standing in for httpx.Client."""
    http = MagicMock(spec=httpx.Client)
    http.get.return_value = make_token_response()
    return http
