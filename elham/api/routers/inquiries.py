"""
Public inquiry endpoint.

Routes:
- POST /inquiries - Record an inquiry and email the operator and the customer

Dependencies: elham.application.services.inquiry_service
System role: Inquiry HTTP API
"""

import json
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from elham.api.deps.dependencies import get_inquiry_service
from elham.api.routers.router_utils.error_handling import handle_resource_errors
from elham.application.services.inquiry_service import InquiryService
from elham.models.common import OkResponse
from elham.models.inquiry import InquiryRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/inquiries", tags=["inquiries"])


@router.post("", response_model=OkResponse)
@handle_resource_errors("send emails")
async def submit_inquiry(
    request: Request,
    inquiry_service: InquiryService = Depends(get_inquiry_service),
) -> OkResponse:
    """
    Submit an inquiry about a catalog item.

    The body is parsed by hand so that malformed JSON is reported as
    400 "Invalid JSON" rather than a validation error.

    Raises:
        HTTPException(400): Invalid JSON or missing name/email/message
        HTTPException(500): Mail not configured or delivery failed
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON")
    if not isinstance(body, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON")

    inquiry = InquiryRequest.model_validate(body)
    logger.info(
        "Inquiry received",
        extra={"inquiry_type": inquiry.type, "locale": inquiry.locale},
    )
    await inquiry_service.submit(inquiry)
    return OkResponse()
