"""Services package for the short link service."""

from .links import shorten, get_by_long_url, update_long_url

__all__ = ["shorten", "get_by_long_url", "update_long_url"]
