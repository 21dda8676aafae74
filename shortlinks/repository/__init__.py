"""URL repository implementations."""

from .base import URLRepository
from .memory import InMemoryURLRepository
from .sqlite import SQLiteURLRepository

__all__ = ["URLRepository", "InMemoryURLRepository", "SQLiteURLRepository"]
