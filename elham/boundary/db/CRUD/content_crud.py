"""
CRUD operations for events, transportation, visas, blog posts,
testimonials and contact inquiries.

Dependencies: sqlalchemy, elham.boundary.db.models
System role: Editorial and offer persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from elham.boundary.db.CRUD.base_crud import BaseCRUD
from elham.boundary.db.models.blog_model import BlogPostModel
from elham.boundary.db.models.event_model import EventModel
from elham.boundary.db.models.inquiry_model import ContactInquiryModel
from elham.boundary.db.models.testimonial_model import TestimonialModel
from elham.boundary.db.models.transportation_model import TransportationModel
from elham.boundary.db.models.visa_model import VisaModel


class SlugLookupMixin:
    """Lookup helpers for models with a unique ``slug`` column."""

    model: type

    async def get_by_slug(self, session: AsyncSession, slug: str):
        stmt = select(self.model).where(self.model.slug == slug)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def slug_exists(self, session: AsyncSession, slug: str) -> bool:
        stmt = select(self.model.id).where(self.model.slug == slug)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None


class EventCRUD(SlugLookupMixin, BaseCRUD[EventModel]):
    """CRUD operations for EventModel, latest event date first."""

    def __init__(self) -> None:
        super().__init__(EventModel)

    def default_ordering(self) -> tuple:
        return (EventModel.event_date.desc(),)

    async def get_active_chronological(
        self, session: AsyncSession, featured: bool | None = None
    ) -> Sequence[EventModel]:
        """Active events in chronological order."""
        stmt = select(EventModel).where(EventModel.is_active.is_(True))
        if featured is not None:
            stmt = stmt.where(EventModel.is_featured.is_(featured))
        stmt = stmt.order_by(EventModel.event_date.asc())
        result = await session.execute(stmt)
        return result.scalars().all()


class TransportationCRUD(BaseCRUD[TransportationModel]):
    def __init__(self) -> None:
        super().__init__(TransportationModel)


class VisaCRUD(BaseCRUD[VisaModel]):
    def __init__(self) -> None:
        super().__init__(VisaModel)


class BlogPostCRUD(SlugLookupMixin, BaseCRUD[BlogPostModel]):
    """CRUD operations for BlogPostModel."""

    def __init__(self) -> None:
        super().__init__(BlogPostModel)

    async def get_published(
        self, session: AsyncSession, limit: int | None = None
    ) -> Sequence[BlogPostModel]:
        """Published posts, most recently published first."""
        stmt = (
            select(BlogPostModel)
            .where(BlogPostModel.is_published.is_(True))
            .order_by(BlogPostModel.published_at.desc(), BlogPostModel.created_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


class TestimonialCRUD(BaseCRUD[TestimonialModel]):
    __test__ = False

    def __init__(self) -> None:
        super().__init__(TestimonialModel)


class ContactInquiryCRUD(BaseCRUD[ContactInquiryModel]):
    def __init__(self) -> None:
        super().__init__(ContactInquiryModel)


event_crud = EventCRUD()
transportation_crud = TransportationCRUD()
visa_crud = VisaCRUD()
blog_post_crud = BlogPostCRUD()
testimonial_crud = TestimonialCRUD()
contact_inquiry_crud = ContactInquiryCRUD()
