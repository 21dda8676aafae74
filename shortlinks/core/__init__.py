"""Core package - configuration, errors and database utilities."""

from .config import Settings, get_settings
from .database import Database

__all__ = [
    "Settings",
    "get_settings",
    "Database",
]
