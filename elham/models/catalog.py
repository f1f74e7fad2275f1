"""
Catalog request/response schemas.

Request bodies use the camelCase keys posted by the admin forms
(``nameEn``, ``pricePerNight``); snake_case names are accepted too.
Every request field is optional at the schema level: which fields are
required on create, and what an omitted field means on update, is
decided by the resource services.

Dependencies: pydantic, elham.models.fields
System role: Admin catalog API contracts
"""

import uuid
from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from elham.models.fields import (
    Amount,
    Count,
    Flag,
    OptionalDateTime,
    Rating,
    Reference,
    SortOrder,
    Text,
    TextList,
)


def itinerary_days(value: Any) -> list[dict]:
    """Keep entries that carry an integer day, normalized to snake_case keys."""
    if not isinstance(value, list):
        return []
    days = []
    for entry in value:
        if not isinstance(entry, dict):
            continue
        day = entry.get("day")
        if not isinstance(day, int) or isinstance(day, bool):
            continue
        title_en = entry.get("titleEn", entry.get("title_en"))
        title_ar = entry.get("titleAr", entry.get("title_ar"))
        days.append(
            {
                "day": day,
                "title_en": title_en.strip() if isinstance(title_en, str) else "",
                "title_ar": title_ar.strip() if isinstance(title_ar, str) else "",
            }
        )
    return days


Itinerary = Annotated[list[dict] | None, BeforeValidator(itinerary_days)]


class AdminPayload(BaseModel):
    """Base for admin form bodies."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class CatalogResponse(BaseModel):
    """Base for catalog rows returned to the admin UI."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    created_at: datetime
    updated_at: datetime


# Locations


class LocationPayload(AdminPayload):
    name_en: Text = None
    name_ar: Text = None
    image_url: Text = None


class LocationResponse(CatalogResponse):
    name_en: str
    name_ar: str
    image_url: str | None


# Hotels and rooms


class HotelPayload(AdminPayload):
    """Hotel create/update body."""

    location_id: Reference = None
    name_en: Text = None
    name_ar: Text = None
    description_en: Text = None
    description_ar: Text = None
    location_en: Text = None
    location_ar: Text = None
    city: Text = None
    city_ar: Text = None
    distance_to_haram: Text = None
    star_rating: Rating = None
    price_per_night: Amount = None
    currency: Text = None
    image_url: Text = None
    gallery: TextList = None
    amenities: TextList = None
    amenities_ar: TextList = None
    is_featured: Flag = None
    is_active: Flag = None


class RoomPayload(AdminPayload):
    """Room create/update body."""

    name_en: Text = None
    name_ar: Text = None
    description_en: Text = None
    description_ar: Text = None
    price_per_night: Amount = None
    currency: Text = None
    max_guests: Count = None
    amenities: TextList = None
    amenities_ar: TextList = None
    image_url: Text = None
    is_active: Flag = None


class RoomResponse(CatalogResponse):
    hotel_id: uuid.UUID
    name_en: str
    name_ar: str
    description_en: str | None
    description_ar: str | None
    price_per_night: float
    currency: str
    max_guests: int
    amenities: list[str]
    amenities_ar: list[str]
    image_url: str | None
    is_active: bool


class HotelResponse(CatalogResponse):
    location_id: uuid.UUID | None
    name_en: str
    name_ar: str
    description_en: str | None
    description_ar: str | None
    location_en: str | None
    location_ar: str | None
    city: str
    city_ar: str | None
    distance_to_haram: str | None
    star_rating: int
    price_per_night: float | None
    currency: str
    image_url: str | None
    gallery: list[str]
    amenities: list[str]
    amenities_ar: list[str]
    is_featured: bool
    is_active: bool


class HotelListItem(HotelResponse):
    room_count: int = Field(0, description="Number of rooms defined for the hotel")


class HotelDetailResponse(HotelResponse):
    rooms: list[RoomResponse] = Field(default_factory=list)


# Packages


class PackageCategoryPayload(AdminPayload):
    name_en: Text = None
    name_ar: Text = None
    sort_order: SortOrder = None
    image_url: Text = None


class PackageCategoryResponse(CatalogResponse):
    name_en: str
    name_ar: str
    sort_order: int
    image_url: str | None


class TourPackagePayload(AdminPayload):
    """Package create/update body."""

    category_id: Reference = None
    location_id: Reference = None
    title_en: Text = None
    title_ar: Text = None
    description_en: Text = None
    description_ar: Text = None
    short_description_en: Text = None
    short_description_ar: Text = None
    package_type: Text = None
    duration_days: Count = None
    price: Amount = None
    currency: Text = None
    inclusions_en: TextList = None
    inclusions_ar: TextList = None
    exclusions_en: TextList = None
    exclusions_ar: TextList = None
    itinerary: Itinerary = None
    image_url: Text = None
    gallery: TextList = None
    is_featured: Flag = None
    is_active: Flag = None


class ItineraryDay(BaseModel):
    day: int
    title_en: str = ""
    title_ar: str = ""


class TourPackageResponse(CatalogResponse):
    category_id: uuid.UUID | None
    location_id: uuid.UUID | None
    title_en: str
    title_ar: str
    description_en: str | None
    description_ar: str | None
    short_description_en: str | None
    short_description_ar: str | None
    package_type: str
    duration_days: int
    price: float
    currency: str
    inclusions_en: list[str]
    inclusions_ar: list[str]
    exclusions_en: list[str]
    exclusions_ar: list[str]
    itinerary: list[ItineraryDay]
    image_url: str | None
    gallery: list[str]
    is_featured: bool
    is_active: bool


class DiscoverCardPayload(AdminPayload):
    title_en: Text = None
    title_ar: Text = None
    image_url: Text = None
    is_visible: Flag = None


class DiscoverCardResponse(CatalogResponse):
    title_en: str
    title_ar: str
    image_url: str | None
    is_visible: bool


# Events


class EventPayload(AdminPayload):
    """Event create/update body. ``slug`` defaults to the slugified English title."""

    title_en: Text = None
    title_ar: Text = None
    slug: Text = None
    description_en: Text = None
    description_ar: Text = None
    short_description_en: Text = None
    short_description_ar: Text = None
    event_date: OptionalDateTime = None
    end_date: OptionalDateTime = None
    frequency_en: Text = None
    frequency_ar: Text = None
    location_en: Text = None
    location_ar: Text = None
    image_url: Text = None
    gallery: TextList = None
    price: Amount = None
    currency: Text = None
    max_attendees: Count = None
    is_featured: Flag = None
    is_active: Flag = None


class EventResponse(CatalogResponse):
    title_en: str
    title_ar: str
    slug: str
    description_en: str | None
    description_ar: str | None
    short_description_en: str | None
    short_description_ar: str | None
    event_date: datetime
    end_date: datetime | None
    frequency_en: str | None
    frequency_ar: str | None
    location_en: str | None
    location_ar: str | None
    image_url: str | None
    gallery: list[str]
    price: float | None
    currency: str
    max_attendees: int | None
    is_featured: bool
    is_active: bool


# Transportation


class TransportationPayload(AdminPayload):
    name_en: Text = None
    name_ar: Text = None
    description_en: Text = None
    description_ar: Text = None
    vehicle_type: Text = None
    vehicle_type_ar: Text = None
    capacity: Count = None
    location_en: Text = None
    location_ar: Text = None
    price_per_trip: Amount = None
    price_per_day: Amount = None
    currency: Text = None
    image_url: Text = None
    gallery: TextList = None
    features_en: TextList = None
    features_ar: TextList = None
    excludes_en: TextList = None
    excludes_ar: TextList = None
    is_featured: Flag = None
    is_active: Flag = None


class TransportationResponse(CatalogResponse):
    name_en: str
    name_ar: str
    description_en: str | None
    description_ar: str | None
    vehicle_type: str
    vehicle_type_ar: str | None
    capacity: int
    location_en: str | None
    location_ar: str | None
    price_per_trip: float | None
    price_per_day: float | None
    currency: str
    image_url: str | None
    gallery: list[str]
    features_en: list[str]
    features_ar: list[str]
    excludes_en: list[str]
    excludes_ar: list[str]
    is_featured: bool
    is_active: bool


# Visas


class VisaPayload(AdminPayload):
    name_en: Text = None
    name_ar: Text = None
    description_en: Text = None
    description_ar: Text = None
    visa_type_en: Text = None
    visa_type_ar: Text = None
    processing_time_en: Text = None
    processing_time_ar: Text = None
    validity_en: Text = None
    validity_ar: Text = None
    price: Amount = None
    currency: Text = None
    image_url: Text = None
    gallery: TextList = None
    requirements_en: TextList = None
    requirements_ar: TextList = None
    includes_en: TextList = None
    includes_ar: TextList = None
    excludes_en: TextList = None
    excludes_ar: TextList = None
    eligibility_en: TextList = None
    eligibility_ar: TextList = None
    notes_en: Text = None
    notes_ar: Text = None
    is_featured: Flag = None
    is_active: Flag = None


class VisaResponse(CatalogResponse):
    name_en: str
    name_ar: str
    description_en: str | None
    description_ar: str | None
    visa_type_en: str
    visa_type_ar: str | None
    processing_time_en: str | None
    processing_time_ar: str | None
    validity_en: str | None
    validity_ar: str | None
    price: float | None
    currency: str
    image_url: str | None
    gallery: list[str]
    requirements_en: list[str]
    requirements_ar: list[str]
    includes_en: list[str]
    includes_ar: list[str]
    excludes_en: list[str]
    excludes_ar: list[str]
    eligibility_en: list[str]
    eligibility_ar: list[str]
    notes_en: str | None
    notes_ar: str | None
    is_featured: bool
    is_active: bool


# Blog


class BlogPostPayload(AdminPayload):
    title_en: Text = None
    title_ar: Text = None
    slug: Text = None
    place_en: Text = None
    place_ar: Text = None
    excerpt_en: Text = None
    excerpt_ar: Text = None
    content_en: Text = None
    content_ar: Text = None
    image_url: Text = None
    category: Text = None
    tags: TextList = None
    is_published: Flag = None
    published_at: OptionalDateTime = None


class BlogPostResponse(CatalogResponse):
    title_en: str
    title_ar: str
    slug: str
    place_en: str | None
    place_ar: str | None
    excerpt_en: str | None
    excerpt_ar: str | None
    content_en: str | None
    content_ar: str | None
    image_url: str | None
    category: str | None
    tags: list[str]
    is_published: bool
    published_at: datetime | None


# Testimonials


class TestimonialPayload(AdminPayload):
    __test__ = False

    name_en: Text = None
    name_ar: Text = None
    content_en: Text = None
    content_ar: Text = None
    work_en: Text = None
    work_ar: Text = None
    rating: Rating = None
    image_url: Text = None
    is_active: Flag = None


class TestimonialResponse(CatalogResponse):
    __test__ = False

    name_en: str
    name_ar: str
    content_en: str
    content_ar: str
    work_en: str | None
    work_ar: str | None
    rating: int
    image_url: str | None
    is_active: bool
