"""
Event ORM model.

Dependencies: sqlalchemy, elham.boundary.db.base
System role: Event catalog persistence
"""

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from elham.boundary.db.base import Base, TimestampMixin, UUIDMixin, utc_now


class EventModel(Base, UUIDMixin, TimestampMixin):
    """
    Dated event (seasonal trips, religious gatherings, tours).

    Attributes:
        slug: Unique URL slug
        event_date: Start instant (UTC)
        end_date: Optional end instant
        frequency_en: Human description of recurrence, e.g. "Every Friday"
        max_attendees: Optional capacity
    """

    __tablename__ = "events"

    title_en: Mapped[str] = mapped_column(String(255), nullable=False)
    title_ar: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    description_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    short_description_en: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    short_description_ar: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    event_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    frequency_en: Mapped[str | None] = mapped_column(String(255), nullable=True)
    frequency_ar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location_en: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location_ar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    gallery: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    price: Mapped[float | None] = mapped_column(Float, nullable=True)
    currency: Mapped[str] = mapped_column(String(10), nullable=False, default="SAR")
    max_attendees: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
