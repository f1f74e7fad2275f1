"""
Exception hierarchy for the Elham back-office.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ElhamException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message, safe to show to clients
            details: Optional dictionary of additional context for logging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ResourceNotFoundError(ElhamException):
    """Raised when a catalog row cannot be found."""

    def __init__(self, resource: str, resource_id: Any = None) -> None:
        details = {"resource": resource}
        if resource_id is not None:
            details["resource_id"] = str(resource_id)
        super().__init__(f"{resource} not found", details)


class InvalidResourceDataError(ElhamException):
    """Raised when a create or update payload fails a business rule."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, {"field": field} if field else None)


class UploadValidationError(ElhamException):
    """Raised when an uploaded file is rejected before storage."""


class StorageNotConfiguredError(ElhamException):
    """Raised when object storage credentials are missing."""


class StorageError(ElhamException):
    """Raised when the object store rejects or fails a write."""


class MailNotConfiguredError(ElhamException):
    """Raised when SMTP credentials are missing."""


class MailDeliveryError(ElhamException):
    """Raised when the SMTP server fails to accept a message."""
