"""
Contact Info API Endpoints

Endpoints:
    GET /contact-info
        Return the business contact details, or null if none have been saved.

    PUT /contact-info
        Save the contact details. The single stored record is updated in
        place, or created on first save.
"""

from fastapi import APIRouter, Depends, Response, status

from common.exceptions import FetchError, UpdateError, handle_database_error
from services.content_service.api.dependencies import get_content_repository
from services.content_service.database import ContentRepository
from services.content_service.models import ContactInfo

router = APIRouter()


@router.get("/contact-info", response_model=ContactInfo | None)
async def get_contact_info(
    repository: ContentRepository = Depends(get_content_repository),
) -> ContactInfo | None:
    """Return the contact details."""
    try:
        return await repository.fetch_contact_info()
    except FetchError as e:
        raise handle_database_error("fetching contact info", e)


@router.put("/contact-info", status_code=status.HTTP_204_NO_CONTENT)
async def save_contact_info(
    contact_info: ContactInfo,
    repository: ContentRepository = Depends(get_content_repository),
) -> Response:
    """Create or update the contact details."""
    try:
        await repository.update_contact_info(contact_info)
    except UpdateError as e:
        raise handle_database_error("saving contact info", e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
