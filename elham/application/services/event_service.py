"""
Event service.

Events are addressed publicly by slug. The slug is derived from the
English title unless one is supplied, and must be unique.

Dependencies: elham.application.services.resource_service, elham.core.slugs
System role: Event use case orchestration
"""

from typing import Any

from elham.application.services.resource_service import ResourceService
from elham.boundary.db.CRUD.content_crud import event_crud
from elham.core.exceptions import InvalidResourceDataError
from elham.core.slugs import slugify
from elham.models.catalog import EventResponse


class EventService(ResourceService[EventResponse]):
    """Admin operations on events."""

    resource_name = "Event"
    crud = event_crud
    response_model = EventResponse
    required_fields = ("title_en", "title_ar")
    required_message = "Title (EN) and Title (AR) are required"

    async def _ensure_slug_free(self, slug: str, current_id=None) -> None:
        row = await event_crud.get_by_slug(self.db, slug)
        if row is not None and row.id != current_id:
            raise InvalidResourceDataError("Slug already exists", field="slug")

    async def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        slug = slugify(data.get("slug") or data["title_en"])
        if not slug:
            raise InvalidResourceDataError("Slug is required", field="slug")
        await self._ensure_slug_free(slug)
        data["slug"] = slug
        return data

    async def _prepare_update(self, existing: Any, changes: dict[str, Any]) -> dict[str, Any]:
        if "slug" in changes:
            slug = slugify(changes["slug"])
            if slug and slug != existing.slug:
                await self._ensure_slug_free(slug, existing.id)
                changes["slug"] = slug
            else:
                del changes["slug"]
        return changes
