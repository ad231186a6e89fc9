"""
Content service data models.
"""

from services.content_service.models.content import (
    ContactInfo,
    ContentModel,
    IdentifiedModel,
    Service,
    Testimonial,
    VisitorStat,
)

__all__ = [
    "ContactInfo",
    "ContentModel",
    "IdentifiedModel",
    "Service",
    "Testimonial",
    "VisitorStat",
]
