"""
Content Entity Models

Pydantic models for the four content entities managed by the content service.

Every model has snake_case attributes that match the store's column names and a
camelCase alias for the application shape used by the website and the HTTP API.
`populate_by_name=True` lets the same model validate a store row (snake_case
keys) and an API payload (camelCase keys); unknown row columns such as
`created_at` are ignored.

Example:
    ```python
    row = {"id": "svc-1", "title": "Audit", "description": "...",
           "category": "tax", "created_at": "2024-01-01T00:00:00Z"}
    service = Service.model_validate(row)
    service.model_dump(by_alias=True)
    # {"id": "svc-1", "title": "Audit", "description": "...", "category": "tax"}
    ```
"""

import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContentModel(BaseModel):
    """Base model: snake_case attributes, camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_row(self) -> dict[str, Any]:
        """Return the wire row shape (snake_case columns, JSON-safe values)."""
        return self.model_dump(mode="json")


class IdentifiedModel(ContentModel):
    """
    Content with an id that is either pre-assigned by the caller or, when
    left as None, assigned by the store on insert.
    """

    id: str | None = Field(default=None, min_length=1)

    def to_row(self) -> dict[str, Any]:
        row = super().to_row()
        if row["id"] is None:
            del row["id"]
        return row


class Service(IdentifiedModel):
    """A service offered on the website."""

    title: str
    description: str
    category: str


class Testimonial(IdentifiedModel):
    """A customer testimonial shown on the website."""

    name: str
    designation: str
    rating: float = Field(..., ge=0, le=5)
    comment: str
    avatar: str
    date_added: datetime.date


class ContactInfo(ContentModel):
    """
    Business contact details. Logically a singleton: the store holds at most one row.

    `business_hours` is free-form structured text (a string or a day→hours
    mapping); `social_media` maps a platform name to its profile URL.
    """

    phone: str
    email: str
    address: str
    business_hours: str | dict[str, str]
    social_media: dict[str, str] = Field(default_factory=dict)


class VisitorStat(ContentModel):
    """Visitor counter for a single calendar day."""

    date: datetime.date
    visitors: int = Field(..., ge=0)
