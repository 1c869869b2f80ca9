"""Custom exceptions for the movie store.

This module defines the exception hierarchy for movie-related errors,
providing structured error handling with status codes and error codes.
"""

from typing import Optional


class MovieError(Exception):
    """Base exception for all movie store errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error message
        status_code: HTTP status code a routing layer should answer with
    """

    def __init__(self, message: str, code: str, status_code: int) -> None:
        """Initialize movie error.

        Args:
            message: Human-readable error description
            code: Machine-readable error code
            status_code: HTTP status code (400, 404, 500, etc.)
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class MovieNotFoundError(MovieError):
    """Raised when no movie with the requested id exists in the store."""

    def __init__(self, movie_id: int) -> None:
        """Initialize movie not found error.

        Args:
            movie_id: The id that was looked up
        """
        super().__init__(
            message=f"Movie Not Found {movie_id}",
            code="movie_not_found",
            status_code=404,
        )
        self.movie_id = movie_id


class MovieValidationError(MovieError):
    """Raised when a create or update payload is rejected."""

    def __init__(
        self, message: str, field: Optional[str] = None, details: Optional[dict] = None
    ) -> None:
        """Initialize movie validation error.

        Args:
            message: Description of the validation failure
            field: Optional field name that failed validation
            details: Optional dictionary with additional validation details
        """
        if field:
            full_message = f"Validation failed for field '{field}': {message}"
        else:
            full_message = f"Validation failed: {message}"

        super().__init__(
            message=full_message,
            code="movie_validation_error",
            status_code=400,
        )
        self.field = field
        self.details = details or {}


class ConfigurationError(MovieError):
    """Raised when store configuration read from the environment is invalid."""

    def __init__(self, setting: str, value: str) -> None:
        super().__init__(
            message=f"Invalid value '{value}' for setting '{setting}'",
            code="configuration_error",
            status_code=500,
        )
        self.setting = setting
        self.value = value
