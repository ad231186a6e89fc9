"""
Content Service Package

The package structure:
    - main.py: FastAPI application entrypoint (`services.content_service.main:app`)
    - api/: API layer with endpoints and request models
    - database/: ContentRepository and the Supabase client factory
    - models/: Content entity models
"""
