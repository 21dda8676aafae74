"""Utils package for the short link service."""

from .shortener import (
    ShortURL,
    validate_url,
    slug_byte_count,
    generate_slug,
    compose_short_url,
    generate_short_url,
)

__all__ = [
    "ShortURL",
    "validate_url",
    "slug_byte_count",
    "generate_slug",
    "compose_short_url",
    "generate_short_url",
]
