"""
Media upload gateway.

Validates an uploaded image (type and size), derives a collision-free
object key and forwards the bytes to R2.

Dependencies: fastapi.concurrency, elham.boundary.storage
System role: Image upload use case orchestration
"""

import logging
import secrets

from fastapi.concurrency import run_in_threadpool

from elham.boundary.storage.r2_client import R2StorageClient
from elham.core.exceptions import StorageNotConfiguredError, UploadValidationError

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/png", "image/webp", "image/gif"}
ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png", "webp", "gif"}
DEFAULT_EXTENSION = "jpg"
DEFAULT_MAX_BYTES = 5 * 1024 * 1024


def _size_label(max_bytes: int) -> str:
    megabytes = max_bytes / (1024 * 1024)
    return f"{megabytes:g}MB"


def validate_image(content_type: str | None, size: int, max_bytes: int = DEFAULT_MAX_BYTES) -> None:
    """
    Check an upload against the image policy.

    Raises:
        UploadValidationError: If the type is not an allowed image or it is too large
    """
    if content_type not in ALLOWED_CONTENT_TYPES:
        raise UploadValidationError("Invalid file type. Use JPEG, PNG, WebP or GIF.")
    if size > max_bytes:
        raise UploadValidationError(f"File too large. Max {_size_label(max_bytes)}.")


def file_extension(filename: str | None) -> str:
    """Lowercased extension if it is an allowed image extension, else "jpg"."""
    if filename and "." in filename:
        ext = filename.rsplit(".", 1)[-1].lower()
        if ext in ALLOWED_EXTENSIONS:
            return ext
    return DEFAULT_EXTENSION


def generate_object_key(filename: str | None, prefix: str = "packages") -> str:
    """
    Random key under the prefix: ``packages/<24 hex chars>.<ext>``.

    The client filename only contributes its extension.
    """
    return f"{prefix}/{secrets.token_hex(12)}.{file_extension(filename)}"


class UploadService:
    """Image upload orchestrator."""

    def __init__(
        self,
        storage: R2StorageClient | None,
        max_bytes: int = DEFAULT_MAX_BYTES,
        key_prefix: str = "packages",
    ) -> None:
        """
        Initialize upload service.

        Args:
            storage: R2 client, None when storage is not configured
            max_bytes: Size limit for a single image
            key_prefix: Object key prefix
        """
        self.storage = storage
        self.max_bytes = max_bytes
        self.key_prefix = key_prefix

    async def upload_image(
        self,
        filename: str | None,
        content_type: str | None,
        body: bytes,
    ) -> str:
        """
        Validate and store one image.

        Args:
            filename: Client-supplied filename
            content_type: Declared MIME type
            body: File bytes

        Returns:
            str: Public URL of the stored image

        Raises:
            UploadValidationError: If the file breaks the image policy
            StorageNotConfiguredError: If R2 credentials are missing
            StorageError: If R2 fails the write
        """
        validate_image(content_type, len(body), self.max_bytes)

        if self.storage is None:
            logger.error("R2 storage is not configured")
            raise StorageNotConfiguredError("R2 upload failed. Check R2_* env variables.")

        key = generate_object_key(filename, self.key_prefix)
        url = await run_in_threadpool(self.storage.upload_bytes, key, body, content_type)
        logger.info(
            "Image uploaded",
            extra={"key": key, "content_type": content_type, "size_bytes": len(body)},
        )
        return url
