"""FastAPI dependencies.

Handlers receive the repository, settings and templates that ``create_app``
attached to the application, never module globals.
"""

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..core.config import Settings
from ..repository.base import URLRepository


def get_repository(request: Request) -> URLRepository:
    """Get the URL repository the application was created with."""
    return request.app.state.repository


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_templates(request: Request) -> Jinja2Templates:
    """Get the HTML template renderer."""
    return request.app.state.templates
