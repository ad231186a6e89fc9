"""
Centralized configuration management for the backend services.

This module defines Pydantic Settings classes for managing configuration of the
content service. It provides a hierarchical settings system with base settings
shared by every service and service-specific overrides.

Configuration Loading:
    Settings are loaded in the following priority order (highest to lowest):
    1. Environment variables
    2. .env file in the project root
    3. Default values defined in the classes

Validation:
    All settings are validated using Pydantic validators to ensure:
    - Type correctness
    - Value constraints (e.g., positive timeouts)
    - Format requirements (e.g., CORS origins parsing, URL normalization)

Service Settings Hierarchy:
    BaseServiceSettings (base class)
    └── ContentServiceSettings

Example:
    ```python
    from common.config.settings import ContentServiceSettings

    settings = ContentServiceSettings()
    print(settings.SERVICE_NAME)  # "content-service"
    print(settings.PORT)  # 8004
    print(settings.SUPABASE_TIMEOUT)  # 30.0
    ```

Environment Variables:
    All settings can be overridden via environment variables. For example:
    - SUPABASE_URL=https://xyzcompany.supabase.co
    - SUPABASE_ANON_KEY=eyJhbGciOi...
    - LOG_LEVEL=DEBUG
    - CORS_ORIGINS=http://localhost:5173,https://example.com
"""

from typing import Any

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings


class BaseServiceSettings(BaseSettings):
    """
    Base settings class providing common configuration for all services.

    Attributes:
        SERVICE_NAME (str): Name identifier for the service. Default: "base-service"
        SERVICE_VERSION (str): Version string for the service. Default: "0.0.1"
        PORT (int): Port number the service listens on. Default: 8000

        ENVIRONMENT (str): Deployment environment. Values: "DEV" or "PROD". Default: "DEV"
        DEBUG (bool): Enable debug mode. Default: False
        LOG_LEVEL (str): Logging level. Values: "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL". Default: "INFO"
        LOG_DIR (str): Directory for rotated log files. Default: "logs"

        API_V1_STR (str): API version prefix for routes. Default: "/api/v1"
        CORS_ORIGINS (list[str]): List of allowed CORS origins. Can be set via comma-separated string or list.

    Note:
        - CORS_ORIGINS can be set as a comma-separated string or a list
        - Settings are re-read on every instantiation
    """

    # Service Information (defaults)
    SERVICE_NAME: str = "base-service"
    SERVICE_VERSION: str = "0.0.1"
    PORT: int = 8000

    # Global Configuration
    ENVIRONMENT: str = "DEV"  # Can be "DEV" or "PROD"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # API Configuration
    API_V1_STR: str = "/api/v1"

    # CORS Configuration
    CORS_ORIGINS: Any = ""

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Any) -> list[str]:
        """
        Assemble CORS origins from string or list format.

        Accepts either a comma-separated string ("http://a,http://b") or a list
        of strings. Whitespace is stripped and empty entries are dropped;
        any other type yields an empty list.
        """
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        if isinstance(v, list):
            return v
        return []

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


class ContentServiceSettings(BaseServiceSettings):
    """
    Settings configuration for the content service.

    This class extends BaseServiceSettings with the two values the content
    data-access layer needs from its hosting platform (the store base URL and
    the anonymous access key) plus transport tuning.

    Inherited Attributes:
        All attributes from BaseServiceSettings are available with these overrides:
        - SERVICE_NAME: "content-service"
        - SERVICE_VERSION: "0.1.0"
        - PORT: 8004

    Additional Attributes:
        SUPABASE_URL (str): Base URL of the Supabase project. Used both for the
            table store (PostgREST) and for edge functions. A trailing slash is
            stripped.
        SUPABASE_ANON_KEY (str): Anonymous (public) API key. Sent as the store
            API key and as the bearer token to the admin-login function.
        SUPABASE_TIMEOUT (float): Request timeout in seconds for store and
            function calls. Default: 30.0
        ADMIN_LOGIN_FUNCTION (str): Name of the edge function that verifies
            admin credentials. Default: "admin-login"

    Example:
        ```python
        settings = ContentServiceSettings(
            SUPABASE_URL="https://xyzcompany.supabase.co/",
            SUPABASE_ANON_KEY="public-anon-key",
        )
        print(settings.SUPABASE_URL)  # "https://xyzcompany.supabase.co"
        print(settings.admin_login_url)
        # "https://xyzcompany.supabase.co/functions/v1/admin-login"
        ```

    Note:
        - Empty URL/key are accepted here; the store client refuses to start
          without them so that the app and its docs can still be loaded
    """

    SERVICE_NAME: str = "content-service"
    SERVICE_VERSION: str = "0.1.0"
    PORT: int = 8004

    # Supabase Configuration
    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: str = ""
    SUPABASE_TIMEOUT: float = 30.0
    ADMIN_LOGIN_FUNCTION: str = "admin-login"

    @field_validator("SUPABASE_URL", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: Any) -> Any:
        """Normalize the project URL so paths can be appended with a single '/'."""
        if isinstance(v, str):
            return v.strip().rstrip("/")
        return v

    @field_validator("SUPABASE_TIMEOUT")
    @classmethod
    def validate_timeout(cls, v: float, info: ValidationInfo) -> float:
        """
        Validate that the transport timeout is a positive number of seconds.

        Raises:
            ValueError: If the value is zero or negative.
        """
        if v <= 0:
            msg = f"{info.field_name} must be a positive number of seconds"
            raise ValueError(msg)
        return v

    @property
    def admin_login_url(self) -> str:
        """Full URL of the admin-login edge function."""
        return f"{self.SUPABASE_URL}/functions/v1/{self.ADMIN_LOGIN_FUNCTION}"
