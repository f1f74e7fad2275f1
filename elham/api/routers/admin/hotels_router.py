"""
Hotel and room admin endpoints.

Routes:
- GET /admin/hotels - List hotels with room counts
- POST /admin/hotels - Create hotel
- GET /admin/hotels/{id} - Get hotel with rooms
- PUT /admin/hotels/{id} - Update hotel
- DELETE /admin/hotels/{id} - Delete hotel and its rooms
- GET /admin/hotels/{id}/rooms - List rooms of a hotel
- POST /admin/hotels/{id}/rooms - Create room
- GET /admin/rooms/{id} - Get room
- PUT /admin/rooms/{id} - Update room
- DELETE /admin/rooms/{id} - Delete room

Dependencies: elham.application.services, elham.models
System role: Accommodation management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from elham.api.deps.dependencies import get_hotel_service, get_room_service
from elham.api.routers.router_utils.error_handling import handle_resource_errors
from elham.application.services.hotel_service import HotelService, RoomService
from elham.models.catalog import (
    HotelDetailResponse,
    HotelListItem,
    HotelPayload,
    HotelResponse,
    RoomPayload,
    RoomResponse,
)
from elham.models.common import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin: hotels"])


@router.get("/hotels", response_model=list[HotelListItem])
@handle_resource_errors("fetch hotels")
async def list_hotels(
    hotel_service: HotelService = Depends(get_hotel_service),
) -> list[HotelListItem]:
    """List every hotel, newest first, with its room count."""
    return await hotel_service.list_all()


@router.post("/hotels", response_model=HotelResponse, status_code=201)
@handle_resource_errors("create hotel")
async def create_hotel(
    request: HotelPayload,
    hotel_service: HotelService = Depends(get_hotel_service),
) -> HotelResponse:
    """
    Create a hotel.

    Args:
        request: Hotel form body; nameEn and nameAr are required
        hotel_service: Injected HotelService

    Returns:
        HotelResponse: Created hotel

    Raises:
        HTTPException(400): Missing names
        HTTPException(500): Creation failed
    """
    logger.info("Creating hotel", extra={"hotel_name": request.name_en})
    return await hotel_service.create(request)


@router.get("/hotels/{hotel_id}", response_model=HotelDetailResponse)
@handle_resource_errors("fetch hotel")
async def get_hotel(
    hotel_id: UUID,
    hotel_service: HotelService = Depends(get_hotel_service),
) -> HotelDetailResponse:
    return await hotel_service.get(hotel_id)


@router.put("/hotels/{hotel_id}", response_model=HotelResponse)
@handle_resource_errors("update hotel")
async def update_hotel(
    hotel_id: UUID,
    request: HotelPayload,
    hotel_service: HotelService = Depends(get_hotel_service),
) -> HotelResponse:
    """
    Update a hotel. Fields left out of the body keep their value.

    Raises:
        HTTPException(404): Hotel not found
    """
    return await hotel_service.update(hotel_id, request)


@router.delete("/hotels/{hotel_id}", response_model=SuccessResponse)
@handle_resource_errors("delete hotel")
async def delete_hotel(
    hotel_id: UUID,
    hotel_service: HotelService = Depends(get_hotel_service),
) -> SuccessResponse:
    await hotel_service.delete(hotel_id)
    return SuccessResponse()


@router.get("/hotels/{hotel_id}/rooms", response_model=list[RoomResponse])
@handle_resource_errors("fetch rooms")
async def list_rooms(
    hotel_id: UUID,
    room_service: RoomService = Depends(get_room_service),
) -> list[RoomResponse]:
    return await room_service.list_for_hotel(hotel_id)


@router.post("/hotels/{hotel_id}/rooms", response_model=RoomResponse, status_code=201)
@handle_resource_errors("create room")
async def create_room(
    hotel_id: UUID,
    request: RoomPayload,
    room_service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    """
    Add a room to a hotel.

    Raises:
        HTTPException(400): Missing names
        HTTPException(404): Hotel not found
    """
    logger.info("Creating room", extra={"hotel_id": str(hotel_id)})
    return await room_service.create_for_hotel(hotel_id, request)


@router.get("/rooms/{room_id}", response_model=RoomResponse)
@handle_resource_errors("fetch room")
async def get_room(
    room_id: UUID,
    room_service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    return await room_service.get(room_id)


@router.put("/rooms/{room_id}", response_model=RoomResponse)
@handle_resource_errors("update room")
async def update_room(
    room_id: UUID,
    request: RoomPayload,
    room_service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    return await room_service.update(room_id, request)


@router.delete("/rooms/{room_id}", response_model=SuccessResponse)
@handle_resource_errors("delete room")
async def delete_room(
    room_id: UUID,
    room_service: RoomService = Depends(get_room_service),
) -> SuccessResponse:
    await room_service.delete(room_id)
    return SuccessResponse()
