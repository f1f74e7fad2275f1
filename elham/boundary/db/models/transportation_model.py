"""
Transportation ORM model.

Dependencies: sqlalchemy, elham.boundary.db.base
System role: Ground transport catalog persistence
"""

from sqlalchemy import JSON, Boolean, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from elham.boundary.db.base import Base, TimestampMixin, UUIDMixin


class TransportationModel(Base, UUIDMixin, TimestampMixin):
    """Vehicle offer priced per trip and/or per day."""

    __tablename__ = "transportation"

    name_en: Mapped[str] = mapped_column(String(255), nullable=False)
    name_ar: Mapped[str] = mapped_column(String(255), nullable=False)
    description_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    vehicle_type: Mapped[str] = mapped_column(String(100), nullable=False, default="Sedan")
    vehicle_type_ar: Mapped[str | None] = mapped_column(String(100), nullable=True)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=4)
    location_en: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location_ar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    price_per_trip: Mapped[float | None] = mapped_column(Float, nullable=True)
    price_per_day: Mapped[float | None] = mapped_column(Float, nullable=True)
    currency: Mapped[str] = mapped_column(String(10), nullable=False, default="SAR")
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    gallery: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    features_en: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    features_ar: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    excludes_en: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    excludes_ar: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
