"""
Services API Endpoints

Endpoints:
    GET /services
        List every service, oldest first.

    PUT /services
        Replace the full list of services. The store is cleared and
        repopulated; if repopulating fails the list is left empty.
"""

from fastapi import APIRouter, Depends, Response, status

from common.exceptions import FetchError, UpdateError, handle_database_error
from services.content_service.api.dependencies import get_content_repository
from services.content_service.database import ContentRepository
from services.content_service.models import Service

router = APIRouter()


@router.get("/services", response_model=list[Service])
async def list_services(
    repository: ContentRepository = Depends(get_content_repository),
) -> list[Service]:
    """Return all services."""
    try:
        return await repository.fetch_services()
    except FetchError as e:
        raise handle_database_error("fetching services", e)


@router.put("/services", status_code=status.HTTP_204_NO_CONTENT)
async def replace_services(
    services: list[Service],
    repository: ContentRepository = Depends(get_content_repository),
) -> Response:
    """Replace all services with the submitted list."""
    try:
        await repository.update_services(services)
    except UpdateError as e:
        raise handle_database_error("updating services", e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
