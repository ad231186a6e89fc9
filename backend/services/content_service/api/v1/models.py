"""
Content API Request/Response Models

Request and response bodies that are not content entities themselves. Entity
payloads (Service, Testimonial, ContactInfo, VisitorStat) are validated with
the models in services.content_service.models.
"""

import datetime

from pydantic import BaseModel, Field

from services.content_service.models import ContentModel


class RecordVisitRequest(ContentModel):
    """
    Request model for recording a visit.

    Attributes:
        date (datetime.date | None): Day to count the visit for. Defaults to
            today's UTC date when omitted.

    Example:
        ```json
        {"date": "2024-01-01"}
        ```
    """

    date: datetime.date | None = None


class AdminLoginRequest(BaseModel):
    """
    Request model for the admin login check.

    Example:
        ```json
        {"username": "admin", "password": "secret"}
        ```
    """

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminLoginResponse(BaseModel):
    """Result of a successful admin login check."""

    success: bool = Field(..., description="Whether the credentials were accepted")
