"""API package for the short link service."""

from .routes import health_router, redirect_router, urls_router, web_router

__all__ = ["health_router", "redirect_router", "urls_router", "web_router"]
