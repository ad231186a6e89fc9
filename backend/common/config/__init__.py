"""
Centralized configuration management for the backend services.

This module provides a unified interface for accessing service-specific configuration
settings. It automatically selects the appropriate settings class based on the service
name, ensuring each service gets its correct configuration.

The configuration system uses Pydantic Settings, which automatically loads values from:
    1. Environment variables (highest priority)
    2. .env file in the project root
    3. Default values defined in the settings classes

Service-Specific Settings:
    - ContentServiceSettings: Configuration for content-service
    - BaseServiceSettings: Base configuration shared by all services

Example:
    ```python
    from common.config import get_settings

    settings = get_settings("content-service")
    print(settings.SERVICE_NAME)  # "content-service"
    print(settings.SUPABASE_URL)
    ```
"""

from common.config.settings import BaseServiceSettings, ContentServiceSettings


def get_settings(service_name: str | None = None) -> BaseServiceSettings:
    """
    Get settings instance for the specified service.

    Performs fuzzy matching on the service name, so "content" matches
    "content-service".

    Args:
        service_name: Name of the service to get settings for. Any string
            containing "content" returns ContentServiceSettings; None or any
            other value returns BaseServiceSettings.

    Returns:
        Instance of the appropriate settings class.

    Note:
        - Each call returns a new instance (settings are not cached)
        - Service name matching is case-insensitive
    """
    if service_name:
        service_lower = service_name.lower()
        if service_lower == "content-service" or "content" in service_lower:
            return ContentServiceSettings()
    # Default to base settings
    return BaseServiceSettings()


__all__ = [
    "BaseServiceSettings",
    "ContentServiceSettings",
    "get_settings",
]
