"""Slug redirect route.

Registered last: ``/{slug}`` would otherwise shadow every other top-level path.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from ...core.exceptions import NotFoundError
from ...models.url import ErrorResponse
from ...repository.base import URLRepository
from ..deps import get_repository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Redirect"])


@router.get(
    "/{slug}",
    response_class=RedirectResponse,
    status_code=303,
    responses={
        303: {"description": "Redirect to the long URL"},
        404: {"model": ErrorResponse, "description": "Short URL not found"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
    summary="Redirect to the long URL",
)
def redirect_to_url(
    slug: str,
    repository: URLRepository = Depends(get_repository),
) -> RedirectResponse:
    """Redirect to the long URL stored for a slug.

    Args:
        slug: The slug from the short URL.
        repository: URL repository.

    Returns:
        303 redirect response.
    """
    logger.info(f"Looking up slug: {slug}")
    mapping = repository.read_by_slug(slug)
    if mapping is None:
        raise NotFoundError("Short URL not found")
    return RedirectResponse(url=mapping.long_url, status_code=303)
