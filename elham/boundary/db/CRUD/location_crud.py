"""
Location CRUD operations.

Dependencies: sqlalchemy, elham.boundary.db.models
System role: Location persistence operations
"""

from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from elham.boundary.db.CRUD.base_crud import BaseCRUD
from elham.boundary.db.models.hotel_model import HotelModel
from elham.boundary.db.models.location_model import LocationModel
from elham.boundary.db.models.package_model import TourPackageModel


class LocationCRUD(BaseCRUD[LocationModel]):
    """CRUD operations for LocationModel, oldest first."""

    def __init__(self) -> None:
        super().__init__(LocationModel)

    def default_ordering(self) -> tuple:
        return (LocationModel.created_at.asc(),)

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """Delete a location, detaching hotels and packages that reference it."""
        for model in (HotelModel, TourPackageModel):
            await session.execute(
                update(model).where(model.location_id == id).values(location_id=None)
            )
        return await super().delete_by_id(session, id)


location_crud = LocationCRUD()
