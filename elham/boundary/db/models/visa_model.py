"""
Visa service ORM model.

Dependencies: sqlalchemy, elham.boundary.db.base
System role: Visa catalog persistence
"""

from sqlalchemy import JSON, Boolean, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from elham.boundary.db.base import Base, TimestampMixin, UUIDMixin


class VisaModel(Base, UUIDMixin, TimestampMixin):
    """
    Visa processing offer.

    List columns (requirements, includes, excludes, eligibility) hold one
    JSON array per language.
    """

    __tablename__ = "visas"

    name_en: Mapped[str] = mapped_column(String(255), nullable=False)
    name_ar: Mapped[str] = mapped_column(String(255), nullable=False)
    description_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    visa_type_en: Mapped[str] = mapped_column(String(100), nullable=False, default="Umrah")
    visa_type_ar: Mapped[str | None] = mapped_column(String(100), nullable=True)
    processing_time_en: Mapped[str | None] = mapped_column(String(255), nullable=True)
    processing_time_ar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    validity_en: Mapped[str | None] = mapped_column(String(255), nullable=True)
    validity_ar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    price: Mapped[float | None] = mapped_column(Float, nullable=True)
    currency: Mapped[str] = mapped_column(String(10), nullable=False, default="SAR")
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    gallery: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    requirements_en: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    requirements_ar: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    includes_en: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    includes_ar: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    excludes_en: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    excludes_ar: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    eligibility_en: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    eligibility_ar: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    notes_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
