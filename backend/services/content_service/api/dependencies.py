"""
Shared API dependencies for the content service.
"""

from functools import lru_cache

from common.config import get_settings
from services.content_service.database import ContentRepository


@lru_cache(maxsize=1)
def get_content_repository() -> ContentRepository:
    """
    Get cached content repository instance.

    The repository is stateless apart from its lazily created store client,
    so a single instance is shared by every request.
    """
    return ContentRepository(get_settings("content-service"))
