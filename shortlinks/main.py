"""Short link service - FastAPI application factory.

A small URL shortening service with:
- Redirect from a slug to its long URL
- HTML form for shortening
- JSON API to read, create, update and delete short links
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

from .core.config import Settings, get_settings
from .core.exceptions import ShortenerError
from .repository.base import URLRepository
from .repository.sqlite import SQLiteURLRepository
from .api.routes import health_router, redirect_router, urls_router, web_router

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    # Startup
    logger.info(f"Starting {app.title}...")
    app.state.repository.init()
    logger.info("Repository initialized")
    yield
    # Shutdown
    logger.info(f"Shutting down {app.title}...")
    app.state.repository.close()


async def shortener_exception_handler(request: Request, exc: ShortenerError):
    """Turn a core error into its JSON error response."""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} on {request.method} {request.url.path}: {exc}")
    else:
        logger.warning(f"{exc.error_code} on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": str(exc), "error_code": exc.error_code},
    )


async def general_exception_handler(request: Request, exc: Exception):
    """General exception handler."""
    logger.error(f"Unhandled Exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error_code": "500"},
    )


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[URLRepository] = None,
) -> FastAPI:
    """Build the application.

    Args:
        settings: Application settings. Loaded from config file and environment if omitted.
        repository: URL repository. A SQLite repository at ``settings.database_url`` if omitted.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()
    if repository is None:
        repository = SQLiteURLRepository(settings.database_url)

    app = FastAPI(
        title=settings.app_title,
        description=settings.app_description,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.repository = repository
    app.state.templates = Jinja2Templates(directory=settings.template_path)

    app.add_exception_handler(ShortenerError, shortener_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(health_router)
    app.include_router(web_router)
    app.include_router(urls_router)
    # Catch-all /{slug}, must come last
    app.include_router(redirect_router)
    return app


def main() -> None:
    """Run the service with uvicorn."""
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
