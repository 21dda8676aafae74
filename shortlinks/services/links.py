"""Short link operations composed from the generator and a repository."""

from ..core.exceptions import (
    DuplicateLongURLError,
    DuplicateSlugError,
    NotFoundError,
    SlugExhaustedError,
)
from ..models.url import URLMapping
from ..repository.base import URLRepository
from ..utils.shortener import generate_short_url, validate_url

# Top-level paths served by the app itself; a slug equal to one could never redirect
RESERVED_SLUGS = frozenset({"api", "app", "health", "shorten", "docs", "redoc"})


def shorten(
    repository: URLRepository,
    long_url: str,
    *,
    domain: str,
    slug_length: int,
    max_attempts: int,
) -> tuple[URLMapping, bool]:
    """Return the short link for a long URL, creating it if needed.

    Shortening a URL that already has a live short link returns the existing
    mapping. A slug collision draws a fresh random slug and tries again.

    Args:
        repository: Where mappings are stored.
        long_url: URL to shorten.
        domain: Short link domain, ending with a slash.
        slug_length: Slug length.
        max_attempts: Total number of slugs to try.

    Returns:
        Tuple of (mapping, created). ``created`` is False when an existing
        mapping was returned.

    Raises:
        ValidationError: The long URL was rejected.
        SlugExhaustedError: Every attempted slug was taken.
        StorageError: The repository failed.
    """
    validate_url(long_url)

    existing = repository.read_by_long_url(long_url)
    if existing is not None:
        return existing, False

    for _ in range(max_attempts):
        short = generate_short_url(long_url, domain, slug_length)
        if short.slug in RESERVED_SLUGS:
            continue
        mapping = URLMapping(slug=short.slug, long_url=short.long_url, short_url=short.short_url)
        try:
            repository.create(mapping)
        except DuplicateSlugError:
            continue
        except DuplicateLongURLError:
            # Another request shortened the same URL first
            winner = repository.read_by_long_url(long_url)
            if winner is None:
                raise
            return winner, False
        return mapping, True

    raise SlugExhaustedError(f"No free slug found after {max_attempts} attempts")


def get_by_long_url(repository: URLRepository, long_url: str) -> URLMapping:
    """Get the live mapping for a long URL.

    Raises:
        NotFoundError: No live mapping has this long URL.
    """
    mapping = repository.read_by_long_url(long_url)
    if mapping is None:
        raise NotFoundError(f"No short link for {long_url}")
    return mapping


def update_long_url(repository: URLRepository, long_url: str, new_long_url: str) -> URLMapping:
    """Point an existing short link at a new long URL and return it.

    Raises:
        ValidationError: The new long URL was rejected.
        NotFoundError: No live mapping has ``long_url``.
        DuplicateLongURLError: ``new_long_url`` already has its own short link.
    """
    validate_url(new_long_url)
    repository.update(long_url, new_long_url)
    return get_by_long_url(repository, new_long_url)
