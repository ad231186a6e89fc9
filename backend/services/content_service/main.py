"""
Content Service - FastAPI Application Entrypoint

This module serves as the main entry point for the Content Service, the
data-access service behind the company website. It exposes typed read/write
operations over the site's managed content:

- Services offered and customer testimonials (replaced as whole lists)
- Business contact details (a single record, created or updated in place)
- Daily visitor statistics (read, and incremented one visit at a time)
- The admin login check, delegated to a hosted Supabase edge function

Architecture:
    - API Layer: FastAPI endpoints (services.content_service.api.v1.endpoints)
    - Data Layer: ContentRepository over Supabase tables
      (services.content_service.database)

Example:
    To run the service locally:
        ```bash
        uvicorn services.content_service.main:app --port 8004 --reload
        ```

    The service will be available at:
        - API Base: http://localhost:8004/api/v1
        - Swagger UI: http://localhost:8004/docs
        - Health Check: http://localhost:8004/health
"""

from common.fastapi import create_fastapi_app
from services.content_service.api.v1.api import api_router

# Nginx serves this at /content/ outside DEV
app = create_fastapi_app(
    service_name="content-service",
    description="Content service for the company website",
    api_router=api_router,
    root_path="/content",
)
