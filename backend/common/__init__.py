"""
Common utilities and shared code for the site content backend.

Modules:
    - config: Centralized configuration management with environment-based settings
    - exceptions: Repository error hierarchy and safe API error responses
    - fastapi: FastAPI application factory with common middleware and configuration
    - logging: Centralized logging configuration using loguru

Usage:
    ```python
    from common.config import get_settings
    from common.logging import setup_logging
    from common.exceptions import FetchError, UpdateError
    ```

Version:
    Current version: 0.1.0
"""

__version__ = "0.1.0"
