"""Page cursor for list endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_PAGE_SIZE = 100


class PageCursor(BaseModel):
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    model_config = {"frozen": True, "strict": True}

    def as_params(self) -> dict[str, int]:
        """Query parameters in the form the list endpoints expect."""
        return {"page_number": self.page_number, "page_size": self.page_size}

    def next(self) -> PageCursor:
        return PageCursor(page_number=self.page_number + 1, page_size=self.page_size)
