"""
Content Repository

Data-access layer for the website's managed content. Every operation is a
direct select/insert/update/delete against a Supabase (PostgREST) table,
translated between the store's row shape and the content models.

Tables:
    - services: id, title, description, category, created_at
    - testimonials: id, name, designation, rating, comment, avatar, date_added
    - contact_info: id, phone, email, address, business_hours, social_media
    - visitor_stats: date, visitors

Error Handling:
    Store failures are logged with their underlying cause and re-raised as
    FetchError (reads) or UpdateError (writes). The raised message names the
    entity and operation only. authenticate_admin never raises.

Consistency:
    No operation runs inside a transaction. Replacing services/testimonials is
    delete-all followed by insert-all, so a failed insert leaves the table
    empty. update_contact_info and record_visit read then write; two concurrent
    record_visit calls for the same date can lose an increment.

Example:
    ```python
    settings = get_settings("content-service")
    repository = ContentRepository(settings)

    services = await repository.fetch_services()
    await repository.record_visit("2024-01-01")
    ok = await repository.authenticate_admin("admin", "secret")
    ```
"""

import asyncio
import datetime
import json
from collections.abc import Sequence

import httpx
from loguru import logger
from postgrest.exceptions import APIError
from pydantic import ValidationError
from supabase import AsyncClient

from common.config import ContentServiceSettings
from common.exceptions import FetchError, UpdateError
from services.content_service.database.supabase_client import create_store_client
from services.content_service.models import (
    ContactInfo,
    Service,
    Testimonial,
    VisitorStat,
)

SERVICES_TABLE = "services"
TESTIMONIALS_TABLE = "testimonials"
CONTACT_INFO_TABLE = "contact_info"
VISITOR_STATS_TABLE = "visitor_stats"

# Never a real row id, so "id != NIL_UUID" matches every row
NIL_UUID = "00000000-0000-0000-0000-000000000000"

# Failures reported by PostgREST or by the underlying HTTP transport
STORE_ERRORS = (APIError, httpx.HTTPError)

# Reads also fail when a returned row does not map onto its model
READ_ERRORS = (*STORE_ERRORS, ValidationError)


class ContentRepository:
    """
    Stateless façade over the content tables and the admin-login function.

    Attributes:
        settings: Content service settings; supplies the project URL, the anon
            key and the transport timeout.

    Args:
        settings: Explicit configuration for this repository.
        store: Optional pre-built store client. When omitted, a Supabase
            AsyncClient is created on first use.
        transport: Optional httpx transport for the admin-login call.
    """

    def __init__(
        self,
        settings: ContentServiceSettings,
        store: AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self._store = store
        self._transport = transport
        self._store_lock = asyncio.Lock()

    async def _get_store(self) -> AsyncClient:
        if self._store is None:
            async with self._store_lock:
                if self._store is None:
                    self._store = await create_store_client(self.settings)
        return self._store

    # Services
    async def fetch_services(self) -> list[Service]:
        """Return every service, oldest first."""
        store = await self._get_store()
        try:
            result = (
                await store.table(SERVICES_TABLE)
                .select("*")
                .order("created_at", desc=False)
                .execute()
            )
            return [Service.model_validate(row) for row in result.data or []]
        except READ_ERRORS as e:
            logger.error(f"Error fetching services: {e}")
            raise FetchError("Failed to fetch services") from e

    async def update_services(self, services: Sequence[Service]) -> None:
        """Replace the whole services table with `services`."""
        store = await self._get_store()
        try:
            await store.table(SERVICES_TABLE).delete().neq("id", NIL_UUID).execute()
        except STORE_ERRORS as e:
            logger.error(f"Error deleting services: {e}")
            raise UpdateError("Failed to update services") from e

        if not services:
            logger.info("Cleared services")
            return

        try:
            await (
                store.table(SERVICES_TABLE)
                .insert([service.to_row() for service in services])
                .execute()
            )
        except STORE_ERRORS as e:
            logger.error(f"Error inserting services: {e}")
            raise UpdateError("Failed to update services") from e

        logger.info(f"Replaced services with {len(services)} rows")

    # Testimonials
    async def fetch_testimonials(self) -> list[Testimonial]:
        """Return every testimonial, newest first."""
        store = await self._get_store()
        try:
            result = (
                await store.table(TESTIMONIALS_TABLE)
                .select("*")
                .order("date_added", desc=True)
                .execute()
            )
            return [Testimonial.model_validate(row) for row in result.data or []]
        except READ_ERRORS as e:
            logger.error(f"Error fetching testimonials: {e}")
            raise FetchError("Failed to fetch testimonials") from e

    async def update_testimonials(self, testimonials: Sequence[Testimonial]) -> None:
        """Replace the whole testimonials table with `testimonials`."""
        store = await self._get_store()
        try:
            await store.table(TESTIMONIALS_TABLE).delete().neq("id", NIL_UUID).execute()
        except STORE_ERRORS as e:
            logger.error(f"Error deleting testimonials: {e}")
            raise UpdateError("Failed to update testimonials") from e

        if not testimonials:
            logger.info("Cleared testimonials")
            return

        try:
            await (
                store.table(TESTIMONIALS_TABLE)
                .insert([testimonial.to_row() for testimonial in testimonials])
                .execute()
            )
        except STORE_ERRORS as e:
            logger.error(f"Error inserting testimonials: {e}")
            raise UpdateError("Failed to update testimonials") from e

        logger.info(f"Replaced testimonials with {len(testimonials)} rows")

    # Contact info
    async def fetch_contact_info(self) -> ContactInfo | None:
        """Return the contact details, or None if none have been saved."""
        store = await self._get_store()
        try:
            result = (
                await store.table(CONTACT_INFO_TABLE).select("*").limit(1).execute()
            )
            if not result.data:
                return None
            return ContactInfo.model_validate(result.data[0])
        except READ_ERRORS as e:
            logger.error(f"Error fetching contact info: {e}")
            raise FetchError("Failed to fetch contact info") from e

    async def update_contact_info(self, contact_info: ContactInfo) -> None:
        """Update the contact row in place, or create it if none exists."""
        store = await self._get_store()
        try:
            existing = (
                await store.table(CONTACT_INFO_TABLE).select("id").limit(1).execute()
            )
        except STORE_ERRORS as e:
            logger.error(f"Error looking up contact info: {e}")
            raise UpdateError("Failed to update contact info") from e

        row = contact_info.to_row()

        if existing.data:
            contact_id = existing.data[0]["id"]
            try:
                await (
                    store.table(CONTACT_INFO_TABLE)
                    .update(row)
                    .eq("id", contact_id)
                    .execute()
                )
            except STORE_ERRORS as e:
                logger.error(f"Error updating contact info: {e}")
                raise UpdateError("Failed to update contact info") from e
            logger.info(f"Updated contact info {contact_id}")
        else:
            try:
                await store.table(CONTACT_INFO_TABLE).insert(row).execute()
            except STORE_ERRORS as e:
                logger.error(f"Error creating contact info: {e}")
                raise UpdateError("Failed to create contact info") from e
            logger.info("Created contact info")

    # Visitor stats
    async def fetch_visitor_stats(self) -> list[VisitorStat]:
        """Return daily visitor counts in ascending date order."""
        store = await self._get_store()
        try:
            result = (
                await store.table(VISITOR_STATS_TABLE)
                .select("*")
                .order("date", desc=False)
                .execute()
            )
            return [VisitorStat.model_validate(row) for row in result.data or []]
        except READ_ERRORS as e:
            logger.error(f"Error fetching visitor stats: {e}")
            raise FetchError("Failed to fetch visitor stats") from e

    async def record_visit(self, date: datetime.date | str) -> None:
        """
        Count one visit for `date`.

        Increments the day's counter if a row exists, otherwise creates it with
        a count of 1. This is a read followed by a write, not an atomic
        increment.

        Args:
            date: Calendar day as a date or an ISO "YYYY-MM-DD" string.

        Raises:
            UpdateError: If the lookup or the write fails.
        """
        day = date.isoformat() if isinstance(date, datetime.date) else date
        store = await self._get_store()

        try:
            existing = (
                await store.table(VISITOR_STATS_TABLE)
                .select("*")
                .eq("date", day)
                .limit(1)
                .execute()
            )
        except STORE_ERRORS as e:
            logger.error(f"Error looking up visitor stats: {e}")
            raise UpdateError("Failed to record visit") from e

        if existing.data:
            visitors = existing.data[0]["visitors"] + 1
            try:
                await (
                    store.table(VISITOR_STATS_TABLE)
                    .update({"visitors": visitors})
                    .eq("date", day)
                    .execute()
                )
            except STORE_ERRORS as e:
                logger.error(f"Error updating visitor stats: {e}")
                raise UpdateError("Failed to record visit") from e
        else:
            try:
                await (
                    store.table(VISITOR_STATS_TABLE)
                    .insert({"date": day, "visitors": 1})
                    .execute()
                )
            except STORE_ERRORS as e:
                logger.error(f"Error inserting visitor stats: {e}")
                raise UpdateError("Failed to record visit") from e

    # Admin login
    async def authenticate_admin(self, username: str, password: str) -> bool:
        """
        Check admin credentials against the admin-login edge function.

        Returns:
            True only if the function answers with a 2xx status and a JSON body
            whose "success" field is exactly true. Every other outcome,
            including network and decoding failures, returns False.
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.SUPABASE_ANON_KEY}",
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.SUPABASE_TIMEOUT, transport=self._transport
            ) as client:
                response = await client.post(
                    self.settings.admin_login_url,
                    headers=headers,
                    json={"username": username, "password": password},
                )

            if not response.is_success:
                logger.warning(
                    f"Admin login rejected with status {response.status_code}"
                )
                return False

            data = response.json()
        except httpx.RequestError as e:
            logger.error(f"Error authenticating admin: {e}")
            return False
        except json.JSONDecodeError as e:
            logger.error(f"Invalid admin login response: {e}")
            return False
        except Exception as e:
            logger.error(f"Unexpected error authenticating admin: {e}")
            return False

        return isinstance(data, dict) and data.get("success") is True
