"""URL shortening utilities module.

This module validates candidate long URLs and mints random slugs. It never
touches storage: whether a slug is free is decided by the repository's
unique index, see :mod:`shortlinks.services.links`.
"""

import math
import re
import secrets
from typing import NamedTuple
from urllib.parse import urlsplit

from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import (
    DisallowedHostError,
    MalformedURLError,
    UnsupportedSchemeError,
)

ALLOWED_SCHEMES = ("http", "https")

MIN_SLUG_LENGTH = 1
MAX_SLUG_LENGTH = 64

# ASCII control characters; HttpUrl lets them through in the path
CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")

http_url_adapter = TypeAdapter(HttpUrl)


class ShortURL(NamedTuple):
    """A freshly minted short link that has not been stored yet."""

    long_url: str
    short_url: str
    slug: str


def validate_url(candidate: str) -> None:
    """Check that a long URL may be shortened.

    The URL is accepted as-is: no trailing slash, case or query
    normalization is performed.

    Args:
        candidate: URL supplied by the caller.

    Raises:
        MalformedURLError: Not a syntactically valid absolute URL.
        UnsupportedSchemeError: Scheme is not http or https.
        DisallowedHostError: Host is localhost or 127.0.0.1*.
    """
    if not candidate or any(ch.isspace() for ch in candidate):
        raise MalformedURLError("URL must be non-empty and contain no whitespace")
    if CONTROL_CHARS.search(candidate):
        raise MalformedURLError("URL must not contain control characters")

    try:
        parsed = urlsplit(candidate)
        hostname = parsed.hostname
        parsed.port  # raises ValueError on a non-numeric or out of range port
    except ValueError as e:
        raise MalformedURLError(f"Invalid URL format: {e}") from e

    if not parsed.scheme:
        raise MalformedURLError("URL must be absolute")
    if parsed.scheme not in ALLOWED_SCHEMES:
        raise UnsupportedSchemeError(
            f"URL must use http or https, got {parsed.scheme!r}"
        )
    if not hostname:
        raise MalformedURLError("URL must have a host")

    # Syntax check only; the caller's string is stored unchanged
    try:
        http_url_adapter.validate_python(candidate)
    except PydanticValidationError as e:
        raise MalformedURLError(f"Invalid URL format: {e.errors()[0]['msg']}") from e

    # Loopback only; private ranges are not checked
    host = hostname.rstrip(".")
    if host == "localhost" or host.startswith("127.0.0.1"):
        raise DisallowedHostError(f"URL host {hostname!r} is not allowed")


def slug_byte_count(length: int) -> int:
    """Number of random bytes whose unpadded base64 encoding has >= ``length`` chars.

    Unpadded base64 turns every 3 bytes into 4 characters, so ``n`` bytes
    encode to ``ceil(4n / 3)`` characters. Drawing ``ceil(3 * length / 4)``
    bytes also gives each kept character its full 6 random bits.
    """
    return math.ceil(length * 3 / 4)


def generate_slug(length: int) -> str:
    """Generate a random URL-safe slug.

    Args:
        length: Exact number of characters, between MIN_SLUG_LENGTH and MAX_SLUG_LENGTH.

    Returns:
        Slug drawn from ``[A-Za-z0-9_-]``.

    Raises:
        ValueError: Length is out of range.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise ValueError(f"Slug length must be an integer, got {length!r}")
    if not MIN_SLUG_LENGTH <= length <= MAX_SLUG_LENGTH:
        raise ValueError(
            f"Slug length must be between {MIN_SLUG_LENGTH} and {MAX_SLUG_LENGTH}, got {length}"
        )
    return secrets.token_urlsafe(slug_byte_count(length))[:length]


def compose_short_url(domain: str, slug: str) -> str:
    """Create full short URL from the configured domain and a slug."""
    return domain + slug


def generate_short_url(long_url: str, domain: str, length: int) -> ShortURL:
    """Validate a long URL and mint a short link for it.

    Args:
        long_url: URL to shorten.
        domain: Configured short link domain, ending with a slash.
        length: Slug length.

    Returns:
        Unsaved short link.
    """
    validate_url(long_url)
    slug = generate_slug(length)
    return ShortURL(
        long_url=long_url,
        short_url=compose_short_url(domain, slug),
        slug=slug,
    )
