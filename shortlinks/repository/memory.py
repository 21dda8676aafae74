"""In-memory URL repository, for tests and throwaway instances."""

import threading
from typing import Optional

from ..core.exceptions import DuplicateLongURLError, DuplicateSlugError, NotFoundError
from ..models.url import URLMapping, utcnow
from .base import URLRepository


class InMemoryURLRepository(URLRepository):
    """URL repository holding every mapping, live or deleted, in a list.

    A single lock guards every read-modify-write so the uniqueness checks
    and the write they protect happen atomically.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._mappings: list[URLMapping] = []

    def create(self, mapping: URLMapping) -> None:
        with self._lock:
            for existing in self._mappings:
                if existing.slug == mapping.slug or existing.short_url == mapping.short_url:
                    raise DuplicateSlugError("Slug already exists")
                if not existing.is_deleted and existing.long_url == mapping.long_url:
                    raise DuplicateLongURLError("A short link already exists for this URL")
            self._mappings.append(mapping.model_copy())

    def read_by_slug(self, slug: str) -> Optional[URLMapping]:
        with self._lock:
            found = self._find_live(slug=slug)
            return found.model_copy() if found else None

    def read_by_long_url(self, long_url: str) -> Optional[URLMapping]:
        with self._lock:
            found = self._find_live(long_url=long_url)
            return found.model_copy() if found else None

    def update(self, long_url: str, new_long_url: str) -> None:
        with self._lock:
            found = self._find_live(long_url=long_url)
            if found is None:
                raise NotFoundError(f"No short link for {long_url}")
            other = self._find_live(long_url=new_long_url)
            if other is not None and other is not found:
                raise DuplicateLongURLError("A short link already exists for this URL")
            found.long_url = new_long_url
            found.updated_at = utcnow()

    def delete(self, long_url: str) -> None:
        with self._lock:
            found = self._find_live(long_url=long_url)
            if found is None:
                raise NotFoundError(f"No short link for {long_url}")
            found.deleted_at = found.updated_at = utcnow()

    def _find_live(
        self, slug: Optional[str] = None, long_url: Optional[str] = None
    ) -> Optional[URLMapping]:
        # Caller holds the lock
        for mapping in self._mappings:
            if mapping.is_deleted:
                continue
            if slug is not None and mapping.slug == slug:
                return mapping
            if long_url is not None and mapping.long_url == long_url:
                return mapping
        return None
