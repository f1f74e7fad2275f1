"""
Public catalog reads.

Returns active (or published) rows with every bilingual field resolved
for the visitor's locale through the localized content resolver.

Dependencies: elham.core.localization, elham.boundary.db.CRUD
System role: Read side of the public site
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from elham.boundary.db.CRUD.content_crud import (
    blog_post_crud,
    event_crud,
    testimonial_crud,
    transportation_crud,
    visa_crud,
)
from elham.boundary.db.CRUD.hotel_crud import hotel_crud
from elham.boundary.db.CRUD.location_crud import location_crud
from elham.boundary.db.CRUD.package_crud import (
    package_category_crud,
    package_discover_card_crud,
    tour_package_crud,
)
from elham.core.exceptions import ResourceNotFoundError
from elham.core.localization import get_localized, get_localized_list, normalize_locale
from elham.models.public import (
    PublicBlogPost,
    PublicCategory,
    PublicDiscoverCard,
    PublicEvent,
    PublicHotel,
    PublicHotelDetail,
    PublicLocation,
    PublicPackage,
    PublicRoom,
    PublicTestimonial,
    PublicTransportation,
    PublicVisa,
)

logger = logging.getLogger(__name__)


def images_of(row: Any) -> list[str]:
    """Gallery images, or the cover image alone when the gallery is empty."""
    gallery = list(getattr(row, "gallery", None) or [])
    if gallery:
        return gallery
    return [row.image_url] if row.image_url else []


class PublicCatalogService:
    """Localized public views of the catalog."""

    def __init__(self, db: AsyncSession, locale: str = "en") -> None:
        """
        Initialize public catalog service.

        Args:
            db: Async SQLAlchemy session
            locale: Visitor locale, anything but "ar" means English
        """
        self.db = db
        self.locale = normalize_locale(locale)

    def _text(self, row: Any, field: str) -> str:
        return get_localized(row, field, self.locale)

    def _list(self, row: Any, field: str) -> list[str]:
        return get_localized_list(row, field, self.locale)

    # Hotels

    def _room(self, room: Any) -> PublicRoom:
        return PublicRoom(
            id=room.id,
            hotel_id=room.hotel_id,
            name=self._text(room, "name"),
            description=self._text(room, "description"),
            price_per_night=room.price_per_night,
            currency=room.currency,
            max_guests=room.max_guests,
            amenities=self._list(
                {"amenities_en": room.amenities, "amenities_ar": room.amenities_ar}, "amenities"
            ),
            image_url=room.image_url,
        )

    def _hotel_fields(self, hotel: Any) -> dict:
        return {
            "id": hotel.id,
            "location_id": hotel.location_id,
            "name": self._text(hotel, "name"),
            "description": self._text(hotel, "description"),
            "location": self._text(hotel, "location"),
            "city": self._text({"city_en": hotel.city, "city_ar": hotel.city_ar}, "city"),
            "distance_to_haram": hotel.distance_to_haram,
            "star_rating": hotel.star_rating,
            "price_per_night": hotel.price_per_night,
            "currency": hotel.currency,
            "image_url": hotel.image_url,
            "images": images_of(hotel),
            "amenities": self._list(
                {"amenities_en": hotel.amenities, "amenities_ar": hotel.amenities_ar}, "amenities"
            ),
            "is_featured": hotel.is_featured,
        }

    async def list_hotels(self, featured: bool | None = None) -> list[PublicHotel]:
        hotels = await hotel_crud.get_all(self.db, is_active=True, is_featured=featured)
        return [PublicHotel(**self._hotel_fields(hotel)) for hotel in hotels]

    async def get_hotel(self, id: UUID) -> PublicHotelDetail:
        """
        Active hotel with its active rooms.

        Raises:
            ResourceNotFoundError: If the hotel is missing or inactive
        """
        hotel = await hotel_crud.get_with_rooms(self.db, id)
        if hotel is None or not hotel.is_active:
            raise ResourceNotFoundError("Hotel", id)
        rooms = [self._room(room) for room in hotel.rooms if room.is_active]
        return PublicHotelDetail(**self._hotel_fields(hotel), rooms=rooms)

    # Packages

    def _package(self, package: Any) -> PublicPackage:
        return PublicPackage(
            id=package.id,
            category_id=package.category_id,
            location_id=package.location_id,
            title=self._text(package, "title"),
            description=self._text(package, "description"),
            short_description=self._text(package, "short_description"),
            package_type=package.package_type,
            duration_days=package.duration_days,
            price=package.price,
            currency=package.currency,
            inclusions=self._list(package, "inclusions"),
            exclusions=self._list(package, "exclusions"),
            itinerary=[
                {"day": entry["day"], "title": self._text(entry, "title")}
                for entry in package.itinerary or []
            ],
            image_url=package.image_url,
            images=images_of(package),
            is_featured=package.is_featured,
        )

    async def list_packages(
        self, featured: bool | None = None, category_id: UUID | None = None
    ) -> list[PublicPackage]:
        packages = await tour_package_crud.get_all(
            self.db, is_active=True, is_featured=featured, category_id=category_id
        )
        return [self._package(package) for package in packages]

    async def get_package(self, id: UUID) -> PublicPackage:
        package = await tour_package_crud.get_by_id(self.db, id)
        if package is None or not package.is_active:
            raise ResourceNotFoundError("Package", id)
        return self._package(package)

    async def list_categories(self) -> list[PublicCategory]:
        """Categories in display order; a category without an image borrows one from its packages."""
        categories = await package_category_crud.get_all(self.db)
        result = []
        for category in categories:
            image_url = category.image_url or await tour_package_crud.first_active_image(
                self.db, category.id
            )
            result.append(
                PublicCategory(
                    id=category.id,
                    name=self._text(category, "name"),
                    sort_order=category.sort_order,
                    image_url=image_url,
                )
            )
        return result

    async def get_discover_card(self) -> PublicDiscoverCard | None:
        card = await package_discover_card_crud.get_singleton(self.db)
        if card is None or not card.is_visible:
            return None
        return PublicDiscoverCard(title=self._text(card, "title"), image_url=card.image_url)

    async def list_locations(self) -> list[PublicLocation]:
        locations = await location_crud.get_all(self.db)
        return [
            PublicLocation(id=loc.id, name=self._text(loc, "name"), image_url=loc.image_url)
            for loc in locations
        ]

    # Events

    def _event(self, event: Any) -> PublicEvent:
        return PublicEvent(
            id=event.id,
            slug=event.slug,
            title=self._text(event, "title"),
            description=self._text(event, "description"),
            short_description=self._text(event, "short_description"),
            event_date=event.event_date,
            end_date=event.end_date,
            frequency=self._text(event, "frequency"),
            location=self._text(event, "location"),
            image_url=event.image_url,
            images=images_of(event),
            price=event.price,
            currency=event.currency,
            max_attendees=event.max_attendees,
            is_featured=event.is_featured,
        )

    async def list_events(self, featured: bool | None = None) -> list[PublicEvent]:
        events = await event_crud.get_active_chronological(self.db, featured=featured)
        return [self._event(event) for event in events]

    async def get_event(self, slug: str) -> PublicEvent:
        event = await event_crud.get_by_slug(self.db, slug)
        if event is None or not event.is_active:
            raise ResourceNotFoundError("Event", slug)
        return self._event(event)

    # Transportation and visas

    def _transportation(self, item: Any) -> PublicTransportation:
        return PublicTransportation(
            id=item.id,
            name=self._text(item, "name"),
            description=self._text(item, "description"),
            vehicle_type=self._text(
                {"vehicle_type_en": item.vehicle_type, "vehicle_type_ar": item.vehicle_type_ar},
                "vehicle_type",
            ),
            capacity=item.capacity,
            location=self._text(item, "location"),
            price_per_trip=item.price_per_trip,
            price_per_day=item.price_per_day,
            currency=item.currency,
            image_url=item.image_url,
            images=images_of(item),
            features=self._list(item, "features"),
            excludes=self._list(item, "excludes"),
            is_featured=item.is_featured,
        )

    async def list_transportation(self, featured: bool | None = None) -> list[PublicTransportation]:
        items = await transportation_crud.get_all(self.db, is_active=True, is_featured=featured)
        return [self._transportation(item) for item in items]

    async def get_transportation(self, id: UUID) -> PublicTransportation:
        item = await transportation_crud.get_by_id(self.db, id)
        if item is None or not item.is_active:
            raise ResourceNotFoundError("Transportation", id)
        return self._transportation(item)

    def _visa(self, visa: Any) -> PublicVisa:
        return PublicVisa(
            id=visa.id,
            name=self._text(visa, "name"),
            description=self._text(visa, "description"),
            visa_type=self._text(visa, "visa_type"),
            processing_time=self._text(visa, "processing_time"),
            validity=self._text(visa, "validity"),
            price=visa.price,
            currency=visa.currency,
            image_url=visa.image_url,
            images=images_of(visa),
            requirements=self._list(visa, "requirements"),
            includes=self._list(visa, "includes"),
            excludes=self._list(visa, "excludes"),
            eligibility=self._list(visa, "eligibility"),
            notes=self._text(visa, "notes"),
            is_featured=visa.is_featured,
        )

    async def list_visas(self, featured: bool | None = None) -> list[PublicVisa]:
        visas = await visa_crud.get_all(self.db, is_active=True, is_featured=featured)
        return [self._visa(visa) for visa in visas]

    async def get_visa(self, id: UUID) -> PublicVisa:
        visa = await visa_crud.get_by_id(self.db, id)
        if visa is None or not visa.is_active:
            raise ResourceNotFoundError("Visa", id)
        return self._visa(visa)

    # Blog and testimonials

    def _post(self, post: Any) -> PublicBlogPost:
        return PublicBlogPost(
            id=post.id,
            slug=post.slug,
            title=self._text(post, "title"),
            place=self._text(post, "place"),
            excerpt=self._text(post, "excerpt"),
            content=self._text(post, "content"),
            image_url=post.image_url,
            category=post.category,
            tags=list(post.tags or []),
            published_at=post.published_at,
        )

    async def list_blog_posts(self, limit: int | None = None) -> list[PublicBlogPost]:
        posts = await blog_post_crud.get_published(self.db, limit=limit)
        return [self._post(post) for post in posts]

    async def get_blog_post(self, slug: str) -> PublicBlogPost:
        post = await blog_post_crud.get_by_slug(self.db, slug)
        if post is None or not post.is_published:
            raise ResourceNotFoundError("Article", slug)
        return self._post(post)

    async def list_testimonials(self) -> list[PublicTestimonial]:
        testimonials = await testimonial_crud.get_all(self.db, is_active=True)
        return [
            PublicTestimonial(
                id=item.id,
                name=self._text(item, "name"),
                content=self._text(item, "content"),
                work=self._text(item, "work"),
                rating=item.rating,
                image_url=item.image_url,
            )
            for item in testimonials
        ]
