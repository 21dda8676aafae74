"""Database module for the short link service.

This module owns the SQLite connection and the ``urls`` schema. Query
semantics live in :mod:`shortlinks.repository.sqlite`.
"""

import sqlite3
import logging
import threading
from typing import Optional

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS urls (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    slug TEXT NOT NULL,
    short_url TEXT NOT NULL,
    long_url TEXT NOT NULL,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL,
    deleted_at TEXT
);
CREATE UNIQUE INDEX IF NOT EXISTS idx_urls_slug ON urls(slug);
CREATE UNIQUE INDEX IF NOT EXISTS idx_urls_short_url ON urls(short_url);
CREATE UNIQUE INDEX IF NOT EXISTS idx_urls_long_url_live
    ON urls(long_url) WHERE deleted_at IS NULL;
"""


class Database:
    """Database class for managing a shared SQLite connection."""

    def __init__(self, db_path: str):
        """Initialize database holder.

        Args:
            db_path: Path to SQLite database file. Use ":memory:" for in-memory database.
        """
        self.db_path = db_path
        self._connection: Optional[sqlite3.Connection] = None
        # sqlite3 connections must not be used by two threads at once
        self._lock = threading.RLock()

    def _get_connection(self) -> sqlite3.Connection:
        """Create or return the database connection.

        The connection is shared by every worker thread, so it is opened with
        ``check_same_thread=False`` and all use goes through ``self._lock``.

        Returns:
            SQLite connection.
        """
        if self._connection is None:
            self._connection = sqlite3.connect(self.db_path, check_same_thread=False)
            self._connection.row_factory = sqlite3.Row
        return self._connection

    def close(self) -> None:
        """Close database connection."""
        with self._lock:
            if self._connection is not None:
                self._connection.close()
                self._connection = None

    def init_db(self) -> None:
        """Initialize database tables and unique indexes."""
        with self._lock:
            conn = self._get_connection()
            try:
                conn.executescript(SCHEMA_SQL)
                conn.commit()
                logger.info(f"Database initialized at {self.db_path}")
            except sqlite3.Error as e:
                logger.error(f"Database initialization failed: {e}")
                raise

    def execute(self, query: str, params: tuple = ()) -> int:
        """Execute a write query in its own transaction.

        Args:
            query: SQL query string.
            params: Query parameters.

        Returns:
            Number of rows affected.

        Raises:
            sqlite3.Error: The statement failed; the transaction is rolled back.
        """
        with self._lock:
            conn = self._get_connection()
            try:
                cursor = conn.execute(query, params)
                conn.commit()
                return cursor.rowcount
            except sqlite3.Error:
                conn.rollback()
                raise

    def fetch_one(self, query: str, params: tuple = ()) -> Optional[dict]:
        """Execute a read query and return the first row.

        Args:
            query: SQL query string.
            params: Query parameters.

        Returns:
            First row as a dict, or None if the query matched nothing.
        """
        with self._lock:
            row = self._get_connection().execute(query, params).fetchone()
        return dict(row) if row is not None else None
