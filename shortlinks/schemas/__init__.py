"""Schemas package for the short link service."""

from .url import URLMappingResponse, HealthResponse

__all__ = [
    "URLMappingResponse",
    "HealthResponse",
]
