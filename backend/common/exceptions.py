"""
Standardized error handling for the data-access layer and API responses.

This module provides two things:

1. The repository error hierarchy. Every store interaction that fails is
   logged with its underlying cause and re-surfaced as one of two coarse kinds:
   FetchError (a read failed) or UpdateError (a write failed). The message
   names the entity/operation only; the store's own error detail stays in the
   logs.

2. Helpers that turn those errors into FastAPI HTTPExceptions with generic,
   safe messages, so internal details (table names, PostgREST codes, network
   errors) never reach API clients.

Example:
    ```python
    from common.exceptions import FetchError, handle_database_error

    try:
        services = await repository.fetch_services()
    except FetchError as e:
        raise handle_database_error("fetching services", e)
    ```
"""

from fastapi import HTTPException
from loguru import logger

# HTTP Status Code Constants
HTTP_400_BAD_REQUEST = 400
HTTP_401_UNAUTHORIZED = 401
HTTP_404_NOT_FOUND = 404
HTTP_422_UNPROCESSABLE_ENTITY = 422
HTTP_500_INTERNAL_SERVER_ERROR = 500
HTTP_503_SERVICE_UNAVAILABLE = 503


class RepositoryError(Exception):
    """
    Base exception for content repository failures.

    Attributes:
        message (str): Human-readable message naming the entity/operation that
            failed (e.g. "Failed to fetch services"). Safe to show to callers.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class FetchError(RepositoryError):
    """A read from the content store failed."""


class UpdateError(RepositoryError):
    """A write to the content store failed."""


def create_api_error(
    operation: str,
    status_code: int = 500,
    internal_error: Exception | None = None,
    user_message: str | None = None,
) -> HTTPException:
    """
    Create a standardized API error response with a safe error message.

    The full internal error is logged; the returned HTTPException only carries
    user_message, or a generic message for the status code.

    Args:
        operation: Description of the operation that failed (e.g., "fetching services").
        status_code: HTTP status code to return. Defaults to 500.
        internal_error: Optional original exception, logged but never exposed.
        user_message: Optional custom message for the client.

    Returns:
        HTTPException ready to be raised from a route handler.
    """
    if internal_error:
        logger.opt(exception=internal_error).error(
            f"API error in {operation}: {internal_error}"
        )

    if user_message:
        message = user_message
    elif status_code == HTTP_400_BAD_REQUEST:
        message = "Invalid request. Please check your input and try again."
    elif status_code == HTTP_401_UNAUTHORIZED:
        message = "Authentication failed. Please check your credentials."
    elif status_code == HTTP_404_NOT_FOUND:
        message = "Resource not found."
    elif status_code == HTTP_422_UNPROCESSABLE_ENTITY:
        message = "Validation error. Please check your request parameters."
    elif status_code == HTTP_503_SERVICE_UNAVAILABLE:
        message = "Service temporarily unavailable. Please try again later."
    else:
        message = (
            "An error occurred while processing your request. Please try again later."
        )

    return HTTPException(status_code=status_code, detail=message)


def handle_database_error(operation: str, error: Exception) -> HTTPException:
    """
    Handle repository errors with generic, safe error messages.

    Repository errors already carry an entity-scoped message (e.g. "Failed to
    update services") which is safe to expose; any other exception gets a
    generic message.

    Args:
        operation: Description of the operation that failed (e.g., "updating services").
        error: The exception raised by the repository.

    Returns:
        HTTPException with status code 500.
    """
    if isinstance(error, RepositoryError):
        user_message = f"{error.message}. Please try again later."
    else:
        user_message = "Failed to process content data. Please try again later."
    return create_api_error(
        operation=operation,
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        internal_error=error,
        user_message=user_message,
    )


def handle_validation_error(operation: str, error: Exception) -> HTTPException:
    """
    Handle validation errors with appropriate error messages.

    Validation errors are expected and are logged at WARNING level.

    Returns:
        HTTPException with status code 422 (Unprocessable Entity).
    """
    logger.warning(f"Validation error in {operation}: {error}")
    return create_api_error(
        operation=operation,
        status_code=HTTP_422_UNPROCESSABLE_ENTITY,
        user_message="Invalid request parameters. Please check your input.",
    )
