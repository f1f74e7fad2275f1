"""
Testimonial ORM model.

Dependencies: sqlalchemy, elham.boundary.db.base
System role: Customer review persistence
"""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from elham.boundary.db.base import Base, TimestampMixin, UUIDMixin


class TestimonialModel(Base, UUIDMixin, TimestampMixin):
    """Customer review shown on the public site."""

    __tablename__ = "testimonials"
    __test__ = False

    name_en: Mapped[str] = mapped_column(String(255), nullable=False)
    name_ar: Mapped[str] = mapped_column(String(255), nullable=False)
    content_en: Mapped[str] = mapped_column(Text, nullable=False)
    content_ar: Mapped[str] = mapped_column(Text, nullable=False)
    work_en: Mapped[str | None] = mapped_column(String(255), nullable=True)
    work_ar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
