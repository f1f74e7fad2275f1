"""
Hotel and room CRUD operations.

Dependencies: sqlalchemy, elham.boundary.db.models.hotel_model
System role: Accommodation persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from elham.boundary.db.CRUD.base_crud import BaseCRUD
from elham.boundary.db.models.hotel_model import HotelModel, RoomModel


class HotelCRUD(BaseCRUD[HotelModel]):
    """CRUD operations for HotelModel."""

    def __init__(self) -> None:
        super().__init__(HotelModel)

    async def get_with_rooms(self, session: AsyncSession, id: UUID) -> HotelModel | None:
        """
        Retrieve a hotel with its rooms eagerly loaded.

        Args:
            session: Async database session
            id: Hotel UUID

        Returns:
            HotelModel with rooms loaded, None if not found
        """
        stmt = (
            select(HotelModel)
            .where(HotelModel.id == id)
            .options(selectinload(HotelModel.rooms))
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def room_counts(self, session: AsyncSession) -> dict[UUID, int]:
        """Number of rooms per hotel id, hotels without rooms omitted."""
        stmt = select(RoomModel.hotel_id, func.count(RoomModel.id)).group_by(RoomModel.hotel_id)
        result = await session.execute(stmt)
        return {hotel_id: count for hotel_id, count in result.all()}

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """Delete a hotel and its rooms."""
        await session.execute(delete(RoomModel).where(RoomModel.hotel_id == id))
        return await super().delete_by_id(session, id)


class RoomCRUD(BaseCRUD[RoomModel]):
    """CRUD operations for RoomModel."""

    def __init__(self) -> None:
        super().__init__(RoomModel)

    def default_ordering(self) -> tuple:
        return (RoomModel.created_at.asc(),)

    async def get_by_hotel(self, session: AsyncSession, hotel_id: UUID) -> Sequence[RoomModel]:
        return await self.get_all(session, hotel_id=hotel_id)


hotel_crud = HotelCRUD()
room_crud = RoomCRUD()
