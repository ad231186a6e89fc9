"""
Supabase store client factory.
"""

import httpx
from loguru import logger
from supabase import AsyncClient, acreate_client
from supabase.lib.client_options import AsyncClientOptions

from common.config import ContentServiceSettings


async def create_store_client(settings: ContentServiceSettings) -> AsyncClient:
    """
    Create an async Supabase client for the content tables.

    Args:
        settings: Content service settings carrying SUPABASE_URL,
            SUPABASE_ANON_KEY and SUPABASE_TIMEOUT.

    Returns:
        A connected supabase AsyncClient.

    Raises:
        EnvironmentError: If the project URL or anon key is not configured.
    """
    if not settings.SUPABASE_URL or not settings.SUPABASE_ANON_KEY:
        raise EnvironmentError("Supabase URL and anon key must be set")

    options = AsyncClientOptions(
        postgrest_client_timeout=httpx.Timeout(settings.SUPABASE_TIMEOUT),
    )
    client = await acreate_client(
        settings.SUPABASE_URL,
        settings.SUPABASE_ANON_KEY,
        options=options,
    )

    logger.info(f"Initialized Supabase client for {settings.SUPABASE_URL}")
    return client
