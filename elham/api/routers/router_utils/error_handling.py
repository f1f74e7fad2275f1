"""
Resource error handling utilities.

A decorator mapping domain exceptions to HTTPExceptions so every admin
and public endpoint reports errors the same way.

Dependencies: fastapi, elham.core.exceptions
System role: Uniform error responses for API routers
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from elham.core.exceptions import (
    ElhamException,
    InvalidResourceDataError,
    MailDeliveryError,
    MailNotConfiguredError,
    ResourceNotFoundError,
    StorageError,
    StorageNotConfiguredError,
    UploadValidationError,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

SERVER_SIDE_ERRORS = (
    MailDeliveryError,
    MailNotConfiguredError,
    StorageError,
    StorageNotConfiguredError,
)


def handle_resource_errors(action: str) -> Callable[[F], F]:
    """
    Decorator factory turning domain errors into HTTP errors.

    Mapping:
        ResourceNotFoundError -> 404 "<Resource> not found"
        InvalidResourceDataError, UploadValidationError -> 400 with the message
        storage and mail errors -> 500 with their client-safe message
        anything else -> 500 "Failed to <action>", details only in the log

    Args:
        action: Verb phrase for the generic 500 message, e.g. "create hotel"
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except HTTPException:
                raise

            except ResourceNotFoundError as e:
                logger.warning("Resource not found", extra={"error": str(e)})
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

            except (InvalidResourceDataError, UploadValidationError) as e:
                logger.warning("Invalid request", extra={"action": action, "error": str(e)})
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

            except SERVER_SIDE_ERRORS as e:
                logger.error("Backend service failure", extra={"action": action, "error": str(e)})
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message
                )

            except ElhamException as e:
                logger.warning("Request rejected", extra={"action": action, "error": str(e)})
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

            except Exception as e:
                logger.exception(
                    f"Unexpected failure: {action}",
                    extra={"error": str(e)},
                )
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=f"Failed to {action}",
                )

        return wrapper  # type: ignore

    return decorator
