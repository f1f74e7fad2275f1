"""
Blog post service.

Slugs are derived from the English title and made unique by appending
-2, -3, ... Publishing without an explicit date stamps the current time.

Dependencies: elham.application.services.resource_service, elham.core.slugs
System role: Article use case orchestration
"""

from datetime import datetime, timezone
from typing import Any

from elham.application.services.resource_service import ResourceService
from elham.boundary.db.CRUD.content_crud import blog_post_crud
from elham.core.exceptions import InvalidResourceDataError
from elham.core.slugs import slugify, unique_slug
from elham.models.catalog import BlogPostResponse


class BlogPostService(ResourceService[BlogPostResponse]):
    """Admin operations on blog posts."""

    resource_name = "Article"
    crud = blog_post_crud
    response_model = BlogPostResponse
    required_fields = ("title_en", "title_ar")
    required_message = "Title (EN) and Title (AR) are required"

    async def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        base = slugify(data.get("slug") or data["title_en"])
        if not base:
            raise InvalidResourceDataError("Slug is required", field="slug")
        data["slug"] = await unique_slug(
            base, lambda candidate: blog_post_crud.slug_exists(self.db, candidate)
        )
        if data.get("published_at") is None and data.get("is_published"):
            data["published_at"] = datetime.now(timezone.utc)
        return data

    async def _prepare_update(self, existing: Any, changes: dict[str, Any]) -> dict[str, Any]:
        if "slug" in changes:
            base = slugify(changes["slug"])
            if base and base != existing.slug:

                async def taken(candidate: str) -> bool:
                    row = await blog_post_crud.get_by_slug(self.db, candidate)
                    return row is not None and row.id != existing.id

                changes["slug"] = await unique_slug(base, taken)
            else:
                del changes["slug"]

        publishing = changes.get("is_published") and not existing.is_published
        if publishing and changes.get("published_at") is None and existing.published_at is None:
            changes["published_at"] = datetime.now(timezone.utc)
        return changes
