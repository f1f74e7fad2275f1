"""
Testimonial service.

Dependencies: elham.application.services.resource_service
System role: Customer review use case orchestration
"""

from typing import Any

from elham.application.services.resource_service import ResourceService
from elham.boundary.db.CRUD.content_crud import testimonial_crud
from elham.models.catalog import TestimonialResponse


class TestimonialService(ResourceService[TestimonialResponse]):
    """Admin operations on testimonials. The Arabic comment defaults to the English one."""

    __test__ = False

    resource_name = "Testimonial"
    crud = testimonial_crud
    response_model = TestimonialResponse
    required_fields = ("name_en", "name_ar", "content_en")
    required_message = "Name (EN), Name (AR), and Comment (EN) are required"

    async def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        if not data.get("content_ar"):
            data["content_ar"] = data["content_en"]
        return data
