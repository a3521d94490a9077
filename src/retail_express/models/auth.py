"""Auth-related data models."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


class TokenResponse(BaseModel):
    """Response from the Retail Express auth/token endpoint."""
    access_token: str = Field(min_length=1)
    expires_on: datetime

    @field_validator("expires_on")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class Token(BaseModel):
    """A cached bearer token. expires_at already has the renewal skew applied."""
    value: str
    expires_at: datetime

    model_config = {"frozen": True}

    def is_valid(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return now < self.expires_at


class TokenStatus(BaseModel):
    """Current state of the cached access token."""
    has_token: bool
    is_expired: bool
    expires_at: datetime | None = None
    seconds_remaining: int | None = None
