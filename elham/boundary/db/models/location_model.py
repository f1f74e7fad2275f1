"""
Location ORM model.

Named places (Mecca, Medina, ...) that hotels and packages can point at.

Dependencies: sqlalchemy, elham.boundary.db.base
System role: Location persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from elham.boundary.db.base import Base, TimestampMixin, UUIDMixin


class LocationModel(Base, UUIDMixin, TimestampMixin):
    """Bilingual location with an optional cover image."""

    __tablename__ = "locations"

    name_en: Mapped[str] = mapped_column(String(255), nullable=False)
    name_ar: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)
