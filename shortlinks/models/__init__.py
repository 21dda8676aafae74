"""Models package for the short link service."""

from .url import URLMapping, URLRequest, ErrorResponse, utcnow

__all__ = ["URLMapping", "URLRequest", "ErrorResponse", "utcnow"]
