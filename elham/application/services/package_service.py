"""
Package, category and discover card services.

Dependencies: elham.application.services.resource_service, elham.boundary.db.CRUD
System role: Package catalog use case orchestration
"""

import logging

from elham.application.services.resource_service import ResourceService
from elham.boundary.db.CRUD.package_crud import (
    package_category_crud,
    package_discover_card_crud,
    tour_package_crud,
)
from elham.models.catalog import (
    DiscoverCardPayload,
    DiscoverCardResponse,
    PackageCategoryResponse,
    TourPackageResponse,
)

logger = logging.getLogger(__name__)


class PackageCategoryService(ResourceService[PackageCategoryResponse]):
    """Admin operations on package categories."""

    resource_name = "Category"
    crud = package_category_crud
    response_model = PackageCategoryResponse
    require_on_update = True


class TourPackageService(ResourceService[TourPackageResponse]):
    """Admin operations on tour packages."""

    resource_name = "Package"
    crud = tour_package_crud
    response_model = TourPackageResponse
    required_fields = ("title_en", "title_ar")
    required_message = "Title (EN) and Title (AR) are required"


class DiscoverCardService:
    """Read and upsert the single package discover card."""

    def __init__(self, db) -> None:
        self.db = db

    async def get_card(self) -> DiscoverCardResponse | None:
        """
        Get the discover card.

        Returns:
            DiscoverCardResponse, or None until the card is first saved
        """
        card = await package_discover_card_crud.get_singleton(self.db)
        return DiscoverCardResponse.model_validate(card) if card else None

    async def upsert_card(self, payload: DiscoverCardPayload) -> DiscoverCardResponse:
        """
        Create the card on first save, otherwise update the fields sent.

        Blank titles fall back to the stored value (or the default on create).
        """
        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or key == "image_url"
        }
        try:
            card = await package_discover_card_crud.get_singleton(self.db)
            if card is None:
                card = await package_discover_card_crud.create(self.db, **changes)
            elif changes:
                card = await package_discover_card_crud.update_by_id(self.db, card.id, **changes)
            await self.db.commit()
        except Exception as e:
            logger.error("Failed to save discover card", extra={"error": str(e)})
            raise

        logger.info("Discover card saved", extra={"updates": sorted(changes)})
        return DiscoverCardResponse.model_validate(card)
