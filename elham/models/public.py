"""
Public catalog schemas.

Every bilingual pair is collapsed into one field resolved for the
requested locale, so the public site never chooses a language itself.

Dependencies: pydantic
System role: Public read API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class PublicItem(BaseModel):
    id: uuid.UUID


class PublicLocation(PublicItem):
    name: str
    image_url: str | None = None


class PublicRoom(PublicItem):
    hotel_id: uuid.UUID
    name: str
    description: str
    price_per_night: float
    currency: str
    max_guests: int
    amenities: list[str]
    image_url: str | None = None


class PublicHotel(PublicItem):
    location_id: uuid.UUID | None = None
    name: str
    description: str
    location: str
    city: str
    distance_to_haram: str | None = None
    star_rating: int
    price_per_night: float | None = None
    currency: str
    image_url: str | None = None
    images: list[str]
    amenities: list[str]
    is_featured: bool


class PublicHotelDetail(PublicHotel):
    rooms: list[PublicRoom] = Field(default_factory=list)


class PublicItineraryDay(BaseModel):
    day: int
    title: str


class PublicPackage(PublicItem):
    category_id: uuid.UUID | None = None
    location_id: uuid.UUID | None = None
    title: str
    description: str
    short_description: str
    package_type: str
    duration_days: int
    price: float
    currency: str
    inclusions: list[str]
    exclusions: list[str]
    itinerary: list[PublicItineraryDay]
    image_url: str | None = None
    images: list[str]
    is_featured: bool


class PublicCategory(PublicItem):
    name: str
    sort_order: int
    image_url: str | None = None


class PublicEvent(PublicItem):
    slug: str
    title: str
    description: str
    short_description: str
    event_date: datetime
    end_date: datetime | None = None
    frequency: str
    location: str
    image_url: str | None = None
    images: list[str]
    price: float | None = None
    currency: str
    max_attendees: int | None = None
    is_featured: bool


class PublicTransportation(PublicItem):
    name: str
    description: str
    vehicle_type: str
    capacity: int
    location: str
    price_per_trip: float | None = None
    price_per_day: float | None = None
    currency: str
    image_url: str | None = None
    images: list[str]
    features: list[str]
    excludes: list[str]
    is_featured: bool


class PublicVisa(PublicItem):
    name: str
    description: str
    visa_type: str
    processing_time: str
    validity: str
    price: float | None = None
    currency: str
    image_url: str | None = None
    images: list[str]
    requirements: list[str]
    includes: list[str]
    excludes: list[str]
    eligibility: list[str]
    notes: str
    is_featured: bool


class PublicBlogPost(PublicItem):
    slug: str
    title: str
    place: str
    excerpt: str
    content: str
    image_url: str | None = None
    category: str | None = None
    tags: list[str]
    published_at: datetime | None = None


class PublicTestimonial(PublicItem):
    name: str
    content: str
    work: str
    rating: int
    image_url: str | None = None


class PublicDiscoverCard(BaseModel):
    title: str
    image_url: str | None = None
