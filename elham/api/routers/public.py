"""
Public catalog endpoints.

Every route accepts ``?locale=en|ar`` and returns bilingual fields
already resolved for that locale. Only active (or published) rows are
visible.

Routes:
- GET /public/hotels, /public/hotels/{id}
- GET /public/packages, /public/packages/{id}
- GET /public/categories, /public/locations, /public/package-discover-card
- GET /public/events, /public/events/{slug}
- GET /public/transportation, /public/transportation/{id}
- GET /public/visas, /public/visas/{id}
- GET /public/blog, /public/blog/{slug}
- GET /public/testimonials

Dependencies: elham.application.services.public_catalog_service
System role: Read API for the public site
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from elham.api.deps.dependencies import get_public_catalog_service
from elham.api.routers.router_utils.error_handling import handle_resource_errors
from elham.application.services.public_catalog_service import PublicCatalogService
from elham.models.public import (
    PublicBlogPost,
    PublicCategory,
    PublicDiscoverCard,
    PublicEvent,
    PublicHotel,
    PublicHotelDetail,
    PublicLocation,
    PublicPackage,
    PublicTestimonial,
    PublicTransportation,
    PublicVisa,
)

router = APIRouter(prefix="/public", tags=["public"])



@router.get("/hotels", response_model=list[PublicHotel])
@handle_resource_errors("fetch hotels")
async def list_hotels(
    featured: bool | None = Query(None, description="Only featured (true) or non-featured (false)"),
    catalog: PublicCatalogService = Depends(get_public_catalog_service),
) -> list[PublicHotel]:
    return await catalog.list_hotels(featured=featured)


@router.get("/hotels/{hotel_id}", response_model=PublicHotelDetail)
@handle_resource_errors("fetch hotel")
async def get_hotel(
    hotel_id: UUID, catalog: PublicCatalogService = Depends(get_public_catalog_service)
) -> PublicHotelDetail:
    """Active hotel with its active rooms."""
    return await catalog.get_hotel(hotel_id)


@router.get("/packages", response_model=list[PublicPackage])
@handle_resource_errors("fetch packages")
async def list_packages(
    featured: bool | None = None,
    category_id: UUID | None = None,
    catalog: PublicCatalogService = Depends(get_public_catalog_service),
) -> list[PublicPackage]:
    return await catalog.list_packages(featured=featured, category_id=category_id)


@router.get("/packages/{package_id}", response_model=PublicPackage)
@handle_resource_errors("fetch package")
async def get_package(
    package_id: UUID, catalog: PublicCatalogService = Depends(get_public_catalog_service)
) -> PublicPackage:
    return await catalog.get_package(package_id)


@router.get("/categories", response_model=list[PublicCategory])
@handle_resource_errors("fetch categories")
async def list_categories(
    catalog: PublicCatalogService = Depends(get_public_catalog_service),
) -> list[PublicCategory]:
    return await catalog.list_categories()


@router.get("/package-discover-card", response_model=PublicDiscoverCard | None)
@handle_resource_errors("fetch discover card")
async def get_discover_card(
    catalog: PublicCatalogService = Depends(get_public_catalog_service),
) -> PublicDiscoverCard | None:
    return await catalog.get_discover_card()


@router.get("/locations", response_model=list[PublicLocation])
@handle_resource_errors("fetch locations")
async def list_locations(
    catalog: PublicCatalogService = Depends(get_public_catalog_service),
) -> list[PublicLocation]:
    return await catalog.list_locations()


@router.get("/events", response_model=list[PublicEvent])
@handle_resource_errors("fetch events")
async def list_events(
    featured: bool | None = None,
    catalog: PublicCatalogService = Depends(get_public_catalog_service),
) -> list[PublicEvent]:
    """Active events in chronological order."""
    return await catalog.list_events(featured=featured)


@router.get("/events/{slug}", response_model=PublicEvent)
@handle_resource_errors("fetch event")
async def get_event(slug: str, catalog: PublicCatalogService = Depends(get_public_catalog_service)) -> PublicEvent:
    return await catalog.get_event(slug)


@router.get("/transportation", response_model=list[PublicTransportation])
@handle_resource_errors("fetch transportation")
async def list_transportation(
    featured: bool | None = None,
    catalog: PublicCatalogService = Depends(get_public_catalog_service),
) -> list[PublicTransportation]:
    return await catalog.list_transportation(featured=featured)


@router.get("/transportation/{item_id}", response_model=PublicTransportation)
@handle_resource_errors("fetch transportation")
async def get_transportation(
    item_id: UUID, catalog: PublicCatalogService = Depends(get_public_catalog_service)
) -> PublicTransportation:
    return await catalog.get_transportation(item_id)


@router.get("/visas", response_model=list[PublicVisa])
@handle_resource_errors("fetch visas")
async def list_visas(
    featured: bool | None = None,
    catalog: PublicCatalogService = Depends(get_public_catalog_service),
) -> list[PublicVisa]:
    return await catalog.list_visas(featured=featured)


@router.get("/visas/{visa_id}", response_model=PublicVisa)
@handle_resource_errors("fetch visa")
async def get_visa(visa_id: UUID, catalog: PublicCatalogService = Depends(get_public_catalog_service)) -> PublicVisa:
    return await catalog.get_visa(visa_id)


@router.get("/blog", response_model=list[PublicBlogPost])
@handle_resource_errors("fetch articles")
async def list_blog_posts(
    limit: int | None = Query(None, ge=1, le=100),
    catalog: PublicCatalogService = Depends(get_public_catalog_service),
) -> list[PublicBlogPost]:
    """Published articles, most recent first."""
    return await catalog.list_blog_posts(limit=limit)


@router.get("/blog/{slug}", response_model=PublicBlogPost)
@handle_resource_errors("fetch article")
async def get_blog_post(
    slug: str, catalog: PublicCatalogService = Depends(get_public_catalog_service)
) -> PublicBlogPost:
    return await catalog.get_blog_post(slug)


@router.get("/testimonials", response_model=list[PublicTestimonial])
@handle_resource_errors("fetch testimonials")
async def list_testimonials(
    catalog: PublicCatalogService = Depends(get_public_catalog_service),
) -> list[PublicTestimonial]:
    return await catalog.list_testimonials()
