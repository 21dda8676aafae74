"""Pydantic models for the short link service."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class URLMapping(BaseModel):
    """A stored short link: slug, short URL and the long URL it points to."""

    slug: str
    long_url: str
    short_url: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class URLRequest(BaseModel):
    """JSON body accepted by the ``/api`` endpoint."""

    url: str = Field(..., description="The long URL to look up, shorten, update or delete")
    new_url: Optional[str] = Field(
        None, description="Replacement long URL (PUT only)"
    )


class ErrorResponse(BaseModel):
    """Model for error responses."""

    detail: str
    error_code: Optional[str] = None
