"""
Visitor Statistics API Endpoints

Endpoints:
    GET /visitor-stats
        Daily visitor counts in ascending date order.

    POST /visitor-stats/visits
        Count one visit. The body's "date" defaults to today (UTC).

Note:
    Counting is read-then-write; simultaneous visits on the same day can be
    undercounted.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response, status

from common.exceptions import FetchError, UpdateError, handle_database_error
from services.content_service.api.dependencies import get_content_repository
from services.content_service.api.v1.models import RecordVisitRequest
from services.content_service.database import ContentRepository
from services.content_service.models import VisitorStat

router = APIRouter()


@router.get("/visitor-stats", response_model=list[VisitorStat])
async def list_visitor_stats(
    repository: ContentRepository = Depends(get_content_repository),
) -> list[VisitorStat]:
    try:
        return await repository.fetch_visitor_stats()
    except FetchError as e:
        raise handle_database_error("fetching visitor stats", e)


@router.post("/visitor-stats/visits", status_code=status.HTTP_204_NO_CONTENT)
async def record_visit(
    request: RecordVisitRequest | None = None,
    repository: ContentRepository = Depends(get_content_repository),
) -> Response:
    day = request.date if request and request.date else datetime.now(timezone.utc).date()
    try:
        await repository.record_visit(day)
    except UpdateError as e:
        raise handle_database_error("recording visit", e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
