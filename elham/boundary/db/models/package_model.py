"""
Tour package ORM models.

Packages are grouped into categories. The discover card is a single
promotional row shown next to the package listing.

Dependencies: sqlalchemy, elham.boundary.db.base
System role: Package catalog persistence
"""

import uuid

from sqlalchemy import JSON, Boolean, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from elham.boundary.db.base import Base, TimestampMixin, UUIDMixin

DEFAULT_DISCOVER_TITLE_EN = "Discover Saudi Arabia"
DEFAULT_DISCOVER_TITLE_AR = "اكتشف السعودية"


class PackageCategoryModel(Base, UUIDMixin, TimestampMixin):
    """
    Package category.

    Attributes:
        sort_order: Ascending display order
        packages: Packages in this category (SET NULL on category deletion)
    """

    __tablename__ = "package_categories"

    name_en: Mapped[str] = mapped_column(String(255), nullable=False)
    name_ar: Mapped[str] = mapped_column(String(255), nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    packages = relationship("TourPackageModel", back_populates="category")


class TourPackageModel(Base, UUIDMixin, TimestampMixin):
    """
    Hajj, Umrah or tourism package.

    Attributes:
        package_type: Free-form type, "umrah" by default
        duration_days: Trip length, always positive
        itinerary: List of {"day": int, "title_en": str, "title_ar": str}
        inclusions_en: English list of included items (likewise *_ar, exclusions_*)
    """

    __tablename__ = "tour_packages"

    category_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("package_categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    location_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("locations.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    title_en: Mapped[str] = mapped_column(String(255), nullable=False)
    title_ar: Mapped[str] = mapped_column(String(255), nullable=False)
    description_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    short_description_en: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    short_description_ar: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    package_type: Mapped[str] = mapped_column(String(50), nullable=False, default="umrah")
    duration_days: Mapped[int] = mapped_column(Integer, nullable=False, default=7)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    currency: Mapped[str] = mapped_column(String(10), nullable=False, default="SAR")
    inclusions_en: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    inclusions_ar: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    exclusions_en: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    exclusions_ar: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    itinerary: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    gallery: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    category = relationship("PackageCategoryModel", back_populates="packages")


class PackageDiscoverCardModel(Base, UUIDMixin, TimestampMixin):
    """Single promotional card displayed on the packages page."""

    __tablename__ = "package_discover_cards"

    title_en: Mapped[str] = mapped_column(
        String(255), nullable=False, default=DEFAULT_DISCOVER_TITLE_EN
    )
    title_ar: Mapped[str] = mapped_column(
        String(255), nullable=False, default=DEFAULT_DISCOVER_TITLE_AR
    )
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    is_visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
