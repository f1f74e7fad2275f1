"""
Blog post ORM model.

Dependencies: sqlalchemy, elham.boundary.db.base
System role: Article persistence
"""

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from elham.boundary.db.base import Base, TimestampMixin, UUIDMixin


class BlogPostModel(Base, UUIDMixin, TimestampMixin):
    """
    Travel article.

    Attributes:
        slug: Unique URL slug
        place_en: Place the article is about
        tags: List of free-form tags
        published_at: Publication instant, None while unpublished
    """

    __tablename__ = "blog_posts"

    title_en: Mapped[str] = mapped_column(String(255), nullable=False)
    title_ar: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    place_en: Mapped[str | None] = mapped_column(String(255), nullable=True)
    place_ar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    excerpt_en: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    excerpt_ar: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    content_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    content_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
