"""
Hotel and room services.

Dependencies: elham.application.services.resource_service, elham.boundary.db.CRUD
System role: Accommodation use case orchestration
"""

import logging
from typing import Any
from uuid import UUID

from elham.application.services.resource_service import ResourceService
from elham.boundary.db.CRUD.hotel_crud import hotel_crud, room_crud
from elham.core.exceptions import ResourceNotFoundError
from elham.models.catalog import (
    HotelDetailResponse,
    HotelListItem,
    HotelResponse,
    RoomPayload,
    RoomResponse,
)

logger = logging.getLogger(__name__)


class HotelService(ResourceService[HotelResponse]):
    """Admin operations on hotels."""

    resource_name = "Hotel"
    crud = hotel_crud
    response_model = HotelResponse

    async def list_all(self) -> list[HotelListItem]:
        """
        List hotels newest first, each with its room count.

        Returns:
            list[HotelListItem]: Hotels including inactive ones
        """
        hotels = await hotel_crud.get_all(self.db)
        counts = await hotel_crud.room_counts(self.db)
        return [
            HotelListItem(
                **HotelResponse.model_validate(hotel).model_dump(),
                room_count=counts.get(hotel.id, 0),
            )
            for hotel in hotels
        ]

    async def get(self, id: UUID) -> HotelDetailResponse:
        """
        Get a hotel with its rooms.

        Raises:
            ResourceNotFoundError: If the hotel does not exist
        """
        hotel = await hotel_crud.get_with_rooms(self.db, id)
        if hotel is None:
            raise ResourceNotFoundError(self.resource_name, id)
        return HotelDetailResponse.model_validate(hotel)


class RoomService(ResourceService[RoomResponse]):
    """Admin operations on the rooms of a hotel."""

    resource_name = "Room"
    crud = room_crud
    response_model = RoomResponse

    async def _require_hotel(self, hotel_id: UUID) -> None:
        if not await hotel_crud.exists(self.db, hotel_id):
            raise ResourceNotFoundError("Hotel", hotel_id)

    async def list_for_hotel(self, hotel_id: UUID) -> list[RoomResponse]:
        """
        List rooms of a hotel, oldest first.

        Raises:
            ResourceNotFoundError: If the hotel does not exist
        """
        await self._require_hotel(hotel_id)
        rooms = await room_crud.get_by_hotel(self.db, hotel_id)
        return [self.to_response(room) for room in rooms]

    async def create_for_hotel(self, hotel_id: UUID, payload: RoomPayload) -> RoomResponse:
        """
        Add a room to a hotel.

        Raises:
            ResourceNotFoundError: If the hotel does not exist
            InvalidResourceDataError: If a name is missing
        """
        await self._require_hotel(hotel_id)
        return await self.create(payload, hotel_id=hotel_id)

    async def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        if data.get("price_per_night") is None:
            data["price_per_night"] = 0
        return data
