"""
Testimonials API Endpoints

Endpoints:
    GET /testimonials
        List every testimonial, newest first.

    PUT /testimonials
        Replace the full list of testimonials (clear, then repopulate).
"""

from fastapi import APIRouter, Depends, Response, status

from common.exceptions import FetchError, UpdateError, handle_database_error
from services.content_service.api.dependencies import get_content_repository
from services.content_service.database import ContentRepository
from services.content_service.models import Testimonial

router = APIRouter()


@router.get("/testimonials", response_model=list[Testimonial])
async def list_testimonials(
    repository: ContentRepository = Depends(get_content_repository),
) -> list[Testimonial]:
    try:
        return await repository.fetch_testimonials()
    except FetchError as e:
        raise handle_database_error("fetching testimonials", e)


@router.put("/testimonials", status_code=status.HTTP_204_NO_CONTENT)
async def replace_testimonials(
    testimonials: list[Testimonial],
    repository: ContentRepository = Depends(get_content_repository),
) -> Response:
    try:
        await repository.update_testimonials(testimonials)
    except UpdateError as e:
        raise handle_database_error("updating testimonials", e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
