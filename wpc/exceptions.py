"""Custom exceptions for the Weapon Paints Customizer."""

from typing import Any


class WPCError(Exception):
    """Base exception for all WPC errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize WPC error.

        Args:
            message: Error message
            details: Additional error details

        """
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(WPCError):
    """Raised when configuration is invalid or missing."""


class APIError(WPCError):
    """Base class for catalog source errors."""

    def __init__(
        self,
        status_code: int,
        message: str,
        response_text: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize API error.

        Args:
            status_code: HTTP status code
            message: Error message
            response_text: Raw response text from the source
            details: Additional error details

        """
        super().__init__(message, details)
        self.status_code = status_code
        self.response_text = response_text


class NotFoundError(APIError):
    """Raised when a catalog document is not found (404)."""

    def __init__(self, message: str = "Resource not found", response_text: str | None = None) -> None:
        super().__init__(404, message, response_text)


class RateLimitError(APIError):
    """Raised when rate limit is exceeded (429)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        response_text: str | None = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(429, message, response_text)
        self.retry_after = retry_after


class TimeoutError(WPCError):
    """Raised when operation times out."""

    def __init__(self, operation: str, timeout_seconds: float) -> None:
        message = f"Operation '{operation}' timed out after {timeout_seconds} seconds"
        super().__init__(message, {"operation": operation, "timeout_seconds": timeout_seconds})
        self.operation = operation
        self.timeout_seconds = timeout_seconds


class ValidationError(WPCError):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, message: str) -> None:
        super().__init__(message, {"field": field, "value": value})
        self.field = field
        self.value = value


class CatalogFetchError(WPCError):
    """Raised when a catalog family cannot be read from a source."""

    def __init__(self, family: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)
        self.family = family


class StoreError(WPCError):
    """Raised when saved customizations cannot be written."""
