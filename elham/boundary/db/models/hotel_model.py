"""
Hotel and room ORM models.

Dependencies: sqlalchemy, elham.boundary.db.base
System role: Accommodation catalog persistence
"""

import uuid

from sqlalchemy import JSON, Boolean, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from elham.boundary.db.base import Base, TimestampMixin, UUIDMixin


class HotelModel(Base, UUIDMixin, TimestampMixin):
    """
    Hotel listed in the catalog.

    Deleting a hotel deletes its rooms. Deleting the linked location
    only clears location_id.

    Attributes:
        location_id: Optional link to a LocationModel
        city: City name in English, defaults to "Mecca"
        star_rating: 1 to 5
        gallery: List of image URLs
        amenities: English amenity labels
        amenities_ar: Arabic amenity labels
        rooms: Rooms belonging to this hotel
    """

    __tablename__ = "hotels"

    location_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("locations.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    name_en: Mapped[str] = mapped_column(String(255), nullable=False)
    name_ar: Mapped[str] = mapped_column(String(255), nullable=False)
    description_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    location_en: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location_ar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str] = mapped_column(String(100), nullable=False, default="Mecca")
    city_ar: Mapped[str | None] = mapped_column(String(100), nullable=True)
    distance_to_haram: Mapped[str | None] = mapped_column(
        String(100), nullable=True, doc="Free-text distance, e.g. '300 m'"
    )
    star_rating: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    price_per_night: Mapped[float | None] = mapped_column(Float, nullable=True)
    currency: Mapped[str] = mapped_column(String(10), nullable=False, default="SAR")
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    gallery: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    amenities: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    amenities_ar: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    rooms = relationship(
        "RoomModel",
        back_populates="hotel",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="RoomModel.created_at",
    )


class RoomModel(Base, UUIDMixin, TimestampMixin):
    """Room type offered by a hotel."""

    __tablename__ = "rooms"

    hotel_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("hotels.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name_en: Mapped[str] = mapped_column(String(255), nullable=False)
    name_ar: Mapped[str] = mapped_column(String(255), nullable=False)
    description_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_ar: Mapped[str | None] = mapped_column(Text, nullable=True)
    price_per_night: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    currency: Mapped[str] = mapped_column(String(10), nullable=False, default="SAR")
    max_guests: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    amenities: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    amenities_ar: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    hotel = relationship("HotelModel", back_populates="rooms")
