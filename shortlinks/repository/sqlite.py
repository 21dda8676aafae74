"""SQLite implementation of the URL repository.

Uniqueness is enforced by the unique indexes created in
:mod:`shortlinks.core.database`; this module only translates the resulting
``sqlite3.IntegrityError`` into repository errors.
"""

import sqlite3
from typing import Optional

from ..core.database import Database
from ..core.exceptions import (
    DuplicateLongURLError,
    DuplicateSlugError,
    NotFoundError,
    StorageError,
)
from ..models.url import URLMapping, utcnow
from .base import URLRepository

SELECT_COLUMNS = "slug, short_url, long_url, created_at, updated_at, deleted_at"


def _integrity_error(e: sqlite3.IntegrityError) -> Exception:
    """Map a unique constraint violation to the matching repository error."""
    message = str(e)
    if "urls.long_url" in message:
        return DuplicateLongURLError("A short link already exists for this URL")
    if "urls.slug" in message or "urls.short_url" in message:
        return DuplicateSlugError("Slug already exists")
    return StorageError(f"Integrity error: {message}")


class SQLiteURLRepository(URLRepository):
    """URL repository backed by a SQLite database."""

    def __init__(self, db_path: str):
        """Initialize repository.

        Args:
            db_path: Path to SQLite database file. Use ":memory:" for in-memory database.
        """
        self.db = Database(db_path)

    def init(self) -> None:
        try:
            self.db.init_db()
        except sqlite3.Error as e:
            raise StorageError(f"Database initialization failed: {e}") from e

    def close(self) -> None:
        self.db.close()

    def create(self, mapping: URLMapping) -> None:
        query = """
        INSERT INTO urls (slug, short_url, long_url, created_at, updated_at, deleted_at)
        VALUES (?, ?, ?, ?, ?, NULL)
        """
        params = (
            mapping.slug,
            mapping.short_url,
            mapping.long_url,
            mapping.created_at.isoformat(),
            mapping.updated_at.isoformat(),
        )
        try:
            self.db.execute(query, params)
        except sqlite3.IntegrityError as e:
            raise _integrity_error(e) from e
        except sqlite3.Error as e:
            raise StorageError(f"Create failed: {e}") from e

    def read_by_slug(self, slug: str) -> Optional[URLMapping]:
        query = f"SELECT {SELECT_COLUMNS} FROM urls WHERE slug = ? AND deleted_at IS NULL"
        return self._read_one(query, (slug,))

    def read_by_long_url(self, long_url: str) -> Optional[URLMapping]:
        query = f"SELECT {SELECT_COLUMNS} FROM urls WHERE long_url = ? AND deleted_at IS NULL"
        return self._read_one(query, (long_url,))

    def update(self, long_url: str, new_long_url: str) -> None:
        query = """
        UPDATE urls SET long_url = ?, updated_at = ?
        WHERE long_url = ? AND deleted_at IS NULL
        """
        try:
            updated = self.db.execute(
                query, (new_long_url, utcnow().isoformat(), long_url)
            )
        except sqlite3.IntegrityError as e:
            raise _integrity_error(e) from e
        except sqlite3.Error as e:
            raise StorageError(f"Update failed: {e}") from e
        if updated == 0:
            raise NotFoundError(f"No short link for {long_url}")

    def delete(self, long_url: str) -> None:
        now = utcnow().isoformat()
        query = """
        UPDATE urls SET deleted_at = ?, updated_at = ?
        WHERE long_url = ? AND deleted_at IS NULL
        """
        try:
            deleted = self.db.execute(query, (now, now, long_url))
        except sqlite3.Error as e:
            raise StorageError(f"Delete failed: {e}") from e
        if deleted == 0:
            raise NotFoundError(f"No short link for {long_url}")

    def _read_one(self, query: str, params: tuple) -> Optional[URLMapping]:
        try:
            row = self.db.fetch_one(query, params)
        except sqlite3.Error as e:
            raise StorageError(f"Read failed: {e}") from e
        return URLMapping(**row) if row else None
