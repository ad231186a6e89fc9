"""
Pytest configuration and fixtures for content service tests.
"""

import asyncio
import os
import tempfile
import uuid
from datetime import datetime, timedelta
from types import SimpleNamespace
from typing import Any, Dict, List

import pytest
from postgrest.exceptions import APIError

# Set test environment variables before importing modules
os.environ.setdefault("SUPABASE_URL", "https://example.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "content-service-test-logs"))

from common.config import ContentServiceSettings  # noqa: E402
from services.content_service.database import ContentRepository  # noqa: E402
from services.content_service.models import (  # noqa: E402
    ContactInfo,
    Service,
    Testimonial,
)

TABLES_WITH_ID = {"services", "testimonials", "contact_info"}


class FakeQuery:
    """Chainable stand-in for a PostgREST request builder."""

    def __init__(self, store: "FakeStore", table: str) -> None:
        self._store = store
        self._table = table
        self._op = "select"
        self._columns = "*"
        self._payload: List[Dict[str, Any]] = []
        self._patch: Dict[str, Any] = {}
        self._filters = []
        self._order = None
        self._limit = None

    def select(self, columns: str = "*") -> "FakeQuery":
        self._op = "select"
        self._columns = columns
        return self

    def insert(self, rows) -> "FakeQuery":
        self._op = "insert"
        self._payload = rows if isinstance(rows, list) else [rows]
        return self

    def update(self, patch: Dict[str, Any]) -> "FakeQuery":
        self._op = "update"
        self._patch = patch
        return self

    def delete(self) -> "FakeQuery":
        self._op = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append(lambda row: row.get(column) == value)
        return self

    def neq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append(lambda row: row.get(column) != value)
        return self

    def order(self, column: str, *, desc: bool = False) -> "FakeQuery":
        self._order = (column, desc)
        return self

    def limit(self, size: int) -> "FakeQuery":
        self._limit = size
        return self

    async def execute(self) -> SimpleNamespace:
        # Yield first so concurrent callers interleave like real round trips
        await asyncio.sleep(0)
        self._store.calls.append((self._table, self._op))

        error = self._store.errors.get((self._table, self._op))
        if error is not None:
            raise error

        rows = self._store.tables.setdefault(self._table, [])
        matched = [row for row in rows if all(f(row) for f in self._filters)]

        if self._op == "select":
            if self._order:
                column, desc = self._order
                matched = sorted(matched, key=lambda row: row[column], reverse=desc)
            if self._limit is not None:
                matched = matched[: self._limit]
            if self._columns != "*":
                wanted = [c.strip() for c in self._columns.split(",")]
                matched = [{c: row.get(c) for c in wanted} for row in matched]
            return SimpleNamespace(data=[dict(row) for row in matched])

        if self._op == "insert":
            inserted = []
            for payload in self._payload:
                row = dict(payload)
                if self._table in TABLES_WITH_ID:
                    row.setdefault("id", str(uuid.uuid4()))
                row.setdefault("created_at", self._store.next_timestamp())
                rows.append(row)
                inserted.append(dict(row))
            return SimpleNamespace(data=inserted)

        if self._op == "update":
            for row in matched:
                row.update(self._patch)
            return SimpleNamespace(data=[dict(row) for row in matched])

        self._store.tables[self._table] = [
            row for row in rows if not any(row is m for m in matched)
        ]
        return SimpleNamespace(data=[dict(row) for row in matched])


class FakeStore:
    """In-memory store exposing the `table(name)` entry point of a Supabase client."""

    def __init__(self) -> None:
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.errors: Dict[tuple, Exception] = {}
        self.calls: List[tuple] = []
        self._clock = datetime(2024, 1, 1)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def next_timestamp(self) -> str:
        self._clock += timedelta(seconds=1)
        return self._clock.isoformat()

    def fail(self, table: str, op: str, message: str = "permission denied for table") -> None:
        """Make every `op` request against `table` raise a PostgREST error."""
        self.errors[(table, op)] = APIError(
            {"message": message, "code": "42501", "hint": None, "details": None}
        )


@pytest.fixture
def settings() -> ContentServiceSettings:
    """Return content service settings pointing at a fake project."""
    return ContentServiceSettings(
        SUPABASE_URL="https://example.supabase.co/",
        SUPABASE_ANON_KEY="test-anon-key",
    )


@pytest.fixture
def fake_store() -> FakeStore:
    """Return an empty in-memory store."""
    return FakeStore()


@pytest.fixture
def repository(settings, fake_store) -> ContentRepository:
    """Return a repository bound to the in-memory store."""
    return ContentRepository(settings, store=fake_store)


@pytest.fixture
def sample_services() -> List[Service]:
    """Return a sample list of services."""
    return [
        Service(id="svc-1", title="Tax Filing", description="Annual returns", category="tax"),
        Service(id="svc-2", title="Bookkeeping", description="Monthly books", category="accounting"),
        Service(id="svc-3", title="Payroll", description="Salary processing", category="accounting"),
    ]


@pytest.fixture
def sample_testimonials() -> List[Testimonial]:
    """Return a sample list of testimonials."""
    return [
        Testimonial(
            id="t-1",
            name="Asha Rao",
            designation="Founder, Rao Textiles",
            rating=5,
            comment="Always on time.",
            avatar="https://example.com/avatars/asha.png",
            date_added="2024-02-10",
        ),
        Testimonial(
            id="t-2",
            name="Vikram Shah",
            designation="CFO, Shah Logistics",
            rating=4,
            comment="Clear advice.",
            avatar="https://example.com/avatars/vikram.png",
            date_added="2024-03-05",
        ),
    ]


@pytest.fixture
def sample_contact_info() -> ContactInfo:
    """Return sample contact details."""
    return ContactInfo(
        phone="+91 98765 43210",
        email="hello@example.com",
        address="12 MG Road, Bengaluru",
        business_hours={"mon-fri": "9:00-18:00", "sat": "10:00-14:00"},
        social_media={"linkedin": "https://linkedin.com/company/example"},
    )
