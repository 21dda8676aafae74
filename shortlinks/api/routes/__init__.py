"""API route modules."""

from .health import router as health_router
from .redirect import router as redirect_router
from .urls import router as urls_router
from .web import router as web_router

__all__ = ["health_router", "redirect_router", "urls_router", "web_router"]
