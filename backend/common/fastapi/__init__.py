"""
Shared FastAPI application factory.

Usage:
    ```python
    from common.fastapi import create_fastapi_app

    app = create_fastapi_app(
        service_name="content-service",
        description="Content service for the company website",
        api_router=api_router,
    )
    ```
"""
from .app_factory import create_fastapi_app

__all__ = ["create_fastapi_app"]
