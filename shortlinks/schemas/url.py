"""Response schemas for the short link service."""

from datetime import datetime
from pydantic import BaseModel

from ..models.url import URLMapping


class URLMappingResponse(BaseModel):
    """Response model for a stored short link."""

    slug: str
    long_url: str
    short_url: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_mapping(cls, mapping: URLMapping) -> "URLMappingResponse":
        return cls(
            slug=mapping.slug,
            long_url=mapping.long_url,
            short_url=mapping.short_url,
            created_at=mapping.created_at,
            updated_at=mapping.updated_at,
        )


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
