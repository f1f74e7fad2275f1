"""
Media upload endpoint.

Routes:
- POST /admin/upload - Store one image (multipart field "file") and return its public URL

Dependencies: elham.application.services.upload_service
System role: Media upload HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from pydantic import BaseModel

from elham.api.deps.dependencies import get_upload_service
from elham.api.routers.router_utils.error_handling import handle_resource_errors
from elham.application.services.upload_service import UploadService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin: uploads"])


class UploadResponse(BaseModel):
    url: str


@router.post("/upload", response_model=UploadResponse)
@handle_resource_errors("upload image")
async def upload_image(
    file: UploadFile | None = File(default=None),
    upload_service: UploadService = Depends(get_upload_service),
) -> UploadResponse:
    """
    Upload an image to object storage.

    Args:
        file: Multipart file under the form field "file"
        upload_service: Injected UploadService

    Returns:
        UploadResponse: Public URL of the stored image

    Raises:
        HTTPException(400): Missing file, unsupported type or too large
        HTTPException(500): Storage not configured or write failed
    """
    if file is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='No file provided. Use form field "file".',
        )

    # One byte past the limit is enough to reject oversized files.
    body = await file.read(upload_service.max_bytes + 1)
    url = await upload_service.upload_image(
        filename=file.filename,
        content_type=file.content_type,
        body=body,
    )
    return UploadResponse(url=url)
