"""
Category, location and discover card admin endpoints.

Routes:
- GET/POST /admin/categories, PATCH/DELETE /admin/categories/{id}
- GET/POST /admin/locations, PATCH/DELETE /admin/locations/{id}
- GET/PATCH /admin/package-discover-card

Category and location deletes answer {"ok": true}.

Dependencies: elham.application.services, elham.models
System role: Taxonomy management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from elham.api.deps.dependencies import (
    get_discover_card_service,
    get_location_service,
    get_package_category_service,
)
from elham.api.routers.router_utils.error_handling import handle_resource_errors
from elham.application.services.location_service import LocationService
from elham.application.services.package_service import (
    DiscoverCardService,
    PackageCategoryService,
)
from elham.models.catalog import (
    DiscoverCardPayload,
    DiscoverCardResponse,
    LocationPayload,
    LocationResponse,
    PackageCategoryPayload,
    PackageCategoryResponse,
)
from elham.models.common import OkResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin: taxonomy"])


@router.get("/categories", response_model=list[PackageCategoryResponse])
@handle_resource_errors("fetch categories")
async def list_categories(
    category_service: PackageCategoryService = Depends(get_package_category_service),
) -> list[PackageCategoryResponse]:
    """List categories by sort order, then creation time."""
    return await category_service.list_all()


@router.post("/categories", response_model=PackageCategoryResponse, status_code=201)
@handle_resource_errors("create category")
async def create_category(
    request: PackageCategoryPayload,
    category_service: PackageCategoryService = Depends(get_package_category_service),
) -> PackageCategoryResponse:
    return await category_service.create(request)


@router.patch("/categories/{category_id}", response_model=PackageCategoryResponse)
@handle_resource_errors("update category")
async def update_category(
    category_id: UUID,
    request: PackageCategoryPayload,
    category_service: PackageCategoryService = Depends(get_package_category_service),
) -> PackageCategoryResponse:
    """
    Rename a category. Both names must be sent.

    Raises:
        HTTPException(400): Missing names
        HTTPException(404): Category not found
    """
    return await category_service.update(category_id, request)


@router.delete("/categories/{category_id}", response_model=OkResponse)
@handle_resource_errors("delete category")
async def delete_category(
    category_id: UUID,
    category_service: PackageCategoryService = Depends(get_package_category_service),
) -> OkResponse:
    await category_service.delete(category_id)
    return OkResponse()


@router.get("/locations", response_model=list[LocationResponse])
@handle_resource_errors("fetch locations")
async def list_locations(
    location_service: LocationService = Depends(get_location_service),
) -> list[LocationResponse]:
    return await location_service.list_all()


@router.post("/locations", response_model=LocationResponse, status_code=201)
@handle_resource_errors("create location")
async def create_location(
    request: LocationPayload,
    location_service: LocationService = Depends(get_location_service),
) -> LocationResponse:
    return await location_service.create(request)


@router.patch("/locations/{location_id}", response_model=LocationResponse)
@handle_resource_errors("update location")
async def update_location(
    location_id: UUID,
    request: LocationPayload,
    location_service: LocationService = Depends(get_location_service),
) -> LocationResponse:
    return await location_service.update(location_id, request)


@router.delete("/locations/{location_id}", response_model=OkResponse)
@handle_resource_errors("delete location")
async def delete_location(
    location_id: UUID,
    location_service: LocationService = Depends(get_location_service),
) -> OkResponse:
    await location_service.delete(location_id)
    return OkResponse()


@router.get("/package-discover-card", response_model=DiscoverCardResponse | None)
@handle_resource_errors("fetch discover card")
async def get_discover_card(
    card_service: DiscoverCardService = Depends(get_discover_card_service),
) -> DiscoverCardResponse | None:
    """Return the discover card, or null before it is first saved."""
    return await card_service.get_card()


@router.patch("/package-discover-card", response_model=DiscoverCardResponse)
@handle_resource_errors("update discover card")
async def update_discover_card(
    request: DiscoverCardPayload,
    card_service: DiscoverCardService = Depends(get_discover_card_service),
) -> DiscoverCardResponse:
    logger.info("Saving discover card")
    return await card_service.upsert_card(request)
