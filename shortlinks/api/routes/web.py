"""HTML form routes."""

import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ...core.config import Settings
from ...core.exceptions import ShortenerError
from ...repository.base import URLRepository
from ...services.links import shorten
from ..deps import get_app_settings, get_repository, get_templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Web"], include_in_schema=False)


@router.get("/app", response_class=HTMLResponse)
async def shorten_form(
    request: Request,
    templates: Jinja2Templates = Depends(get_templates),
) -> HTMLResponse:
    """Serve the form."""
    logger.info("Serving the form")
    return templates.TemplateResponse(request, "form.html", {"error": None})


@router.get("/shorten")
async def shorten_form_redirect() -> RedirectResponse:
    return RedirectResponse(url="/app", status_code=303)


@router.post("/shorten", response_class=HTMLResponse)
def shorten_from_form(
    request: Request,
    url: str = Form(""),
    repository: URLRepository = Depends(get_repository),
    settings: Settings = Depends(get_app_settings),
    templates: Jinja2Templates = Depends(get_templates),
) -> HTMLResponse:
    """Handle form submission and show the short link.

    Any core error re-renders the form with the reason and its status code.
    """
    try:
        mapping, _ = shorten(
            repository,
            url,
            domain=settings.domain,
            slug_length=settings.slug_length,
            max_attempts=settings.max_slug_attempts,
        )
    except ShortenerError as e:
        if e.status_code >= 500:
            logger.error(f"{e.error_code} shortening {url!r} from form: {e}")
        else:
            logger.warning(f"Rejected URL from form: {url!r}: {e}")
        return templates.TemplateResponse(
            request, "form.html", {"error": str(e), "url": url}, status_code=e.status_code
        )

    return templates.TemplateResponse(
        request,
        "result.html",
        {"short_url": mapping.short_url, "long_url": mapping.long_url},
    )
