"""
API Router Aggregation for Content Service v1

Endpoint groups:
    - services: GET/PUT /services
    - testimonials: GET/PUT /testimonials
    - contact-info: GET/PUT /contact-info
    - visitor-stats: GET /visitor-stats, POST /visitor-stats/visits
    - admin: POST /admin/login

Example:
    ```python
    from services.content_service.api.v1.api import api_router

    app.include_router(api_router, prefix="/api/v1")
    ```
"""

from fastapi import APIRouter

from services.content_service.api.v1.endpoints import (
    admin,
    contact_info,
    site_services,
    testimonials,
    visitor_stats,
)

api_router = APIRouter()

# Tags group endpoints in the OpenAPI documentation
api_router.include_router(site_services.router, tags=["services"])
api_router.include_router(testimonials.router, tags=["testimonials"])
api_router.include_router(contact_info.router, tags=["contact-info"])
api_router.include_router(visitor_stats.router, tags=["visitor-stats"])
api_router.include_router(admin.router, tags=["admin"])
