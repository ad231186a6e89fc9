"""
Content service data access.

Exports:
    - ContentRepository: CRUD operations on the content tables plus the admin check
    - create_store_client: Supabase AsyncClient factory
"""

from services.content_service.database.content_repository import ContentRepository
from services.content_service.database.supabase_client import create_store_client

__all__ = ["ContentRepository", "create_store_client"]
