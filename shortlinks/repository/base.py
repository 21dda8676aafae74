"""Abstract base class for URL repository implementations."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.url import URLMapping


class URLRepository(ABC):
    """Storage for short link mappings.

    Implementations must enforce uniqueness of ``slug`` and ``short_url``
    and of ``long_url`` among live (not deleted) mappings atomically, so that
    of two racing ``create`` calls exactly one wins.
    """

    def init(self) -> None:
        """Prepare the store (create tables, open connections)."""

    def close(self) -> None:
        """Release resources held by the store."""

    @abstractmethod
    def create(self, mapping: URLMapping) -> None:
        """Persist a new mapping.

        Args:
            mapping: Mapping to store.

        Raises:
            DuplicateSlugError: Slug or short URL is already taken.
            DuplicateLongURLError: A live mapping exists for the long URL.
            StorageError: The store failed.
        """

    @abstractmethod
    def read_by_slug(self, slug: str) -> Optional[URLMapping]:
        """Get the live mapping for a slug.

        Returns:
            The mapping, or None if no live mapping has this slug.

        Raises:
            StorageError: The store failed.
        """

    @abstractmethod
    def read_by_long_url(self, long_url: str) -> Optional[URLMapping]:
        """Get the live mapping for a long URL.

        Returns:
            The mapping, or None if no live mapping has this long URL.

        Raises:
            StorageError: The store failed.
        """

    @abstractmethod
    def update(self, long_url: str, new_long_url: str) -> None:
        """Point the live mapping for ``long_url`` at ``new_long_url``.

        Slug and short URL are left untouched.

        Raises:
            NotFoundError: No live mapping has this long URL.
            DuplicateLongURLError: Another live mapping already has ``new_long_url``.
            StorageError: The store failed.
        """

    @abstractmethod
    def delete(self, long_url: str) -> None:
        """Soft delete the live mapping for a long URL.

        Raises:
            NotFoundError: No live mapping has this long URL.
            StorageError: The store failed.
        """
