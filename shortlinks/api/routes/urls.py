"""JSON API routes for short links.

Every operation takes a ``{"url": ..., "new_url": ...}`` body and is keyed
by the long URL:
- Read a short link (GET /api)
- Create a short link (POST /api)
- Update the long URL (PUT /api)
- Delete a short link (DELETE /api)
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from ...core.config import Settings
from ...models.url import URLRequest, ErrorResponse
from ...repository.base import URLRepository
from ...schemas.url import URLMappingResponse
from ...services.links import get_by_long_url, shorten, update_long_url
from ..deps import get_app_settings, get_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["API"])


@router.get(
    "",
    response_model=URLMappingResponse,
    responses={
        200: {"description": "Short link found"},
        404: {"model": ErrorResponse, "description": "No short link for this URL"},
    },
    summary="Get the short link for a long URL",
)
def read_short_url(
    body: URLRequest,
    repository: URLRepository = Depends(get_repository),
) -> URLMappingResponse:
    logger.info(f"GET request received for: {body.url}")
    mapping = get_by_long_url(repository, body.url)
    return URLMappingResponse.from_mapping(mapping)


@router.post(
    "",
    response_model=URLMappingResponse,
    status_code=201,
    responses={
        201: {"description": "Short link created"},
        200: {"description": "Short link already existed and is returned as-is"},
        400: {"model": ErrorResponse, "description": "URL rejected"},
        500: {"model": ErrorResponse, "description": "No free slug or storage failure"},
    },
    summary="Create a short link",
)
def create_short_url(
    body: URLRequest,
    response: Response,
    repository: URLRepository = Depends(get_repository),
    settings: Settings = Depends(get_app_settings),
) -> URLMappingResponse:
    """Create a short link, or return the existing one for this URL.

    Args:
        body: Request body; ``url`` is the long URL.
        response: Used to downgrade the status to 200 for an existing link.
        repository: URL repository.
        settings: Application settings.

    Returns:
        The stored short link.
    """
    logger.info(f"POST request received for: {body.url}")
    mapping, created = shorten(
        repository,
        body.url,
        domain=settings.domain,
        slug_length=settings.slug_length,
        max_attempts=settings.max_slug_attempts,
    )
    if not created:
        response.status_code = 200
    return URLMappingResponse.from_mapping(mapping)


@router.put(
    "",
    response_model=URLMappingResponse,
    responses={
        200: {"description": "Long URL updated"},
        400: {"model": ErrorResponse, "description": "Missing or rejected new_url"},
        404: {"model": ErrorResponse, "description": "No short link for this URL"},
        409: {"model": ErrorResponse, "description": "new_url already has a short link"},
    },
    summary="Change the long URL of a short link",
)
def update_short_url(
    body: URLRequest,
    repository: URLRepository = Depends(get_repository),
) -> URLMappingResponse:
    logger.info(f"PUT request received for: {body.url}")
    if not body.new_url:
        raise HTTPException(status_code=400, detail="new_url is required")
    mapping = update_long_url(repository, body.url, body.new_url)
    return URLMappingResponse.from_mapping(mapping)


@router.delete(
    "",
    status_code=204,
    response_class=Response,
    responses={
        204: {"description": "Short link deleted"},
        404: {"model": ErrorResponse, "description": "No short link for this URL"},
    },
    summary="Delete a short link",
)
def delete_short_url(
    body: URLRequest,
    repository: URLRepository = Depends(get_repository),
) -> Response:
    logger.info(f"DELETE request received for: {body.url}")
    repository.delete(body.url)
    return Response(status_code=204)
