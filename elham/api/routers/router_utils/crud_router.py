"""
Router factory for standard admin resources.

Most catalog resources expose the same five routes (list, create, get,
update, delete). This factory builds them for a given payload schema,
response schema and service dependency.

Dependencies: fastapi, elham.api.routers.router_utils.error_handling
System role: Shared routing for admin CRUD resources
"""

import logging
from typing import Any, Callable
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from elham.api.routers.router_utils.error_handling import handle_resource_errors
from elham.application.services.resource_service import ResourceService
from elham.models.common import SuccessResponse

logger = logging.getLogger(__name__)


def build_resource_router(
    path: str,
    tag: str,
    payload_model: type[BaseModel],
    response_model: type[BaseModel],
    get_service: Callable[..., ResourceService],
    singular: str,
    plural: str,
) -> APIRouter:
    """
    Build list/create/get/update/delete routes for one resource.

    Args:
        path: Collection path, e.g. "/events"
        tag: OpenAPI tag
        payload_model: Request body schema for POST and PUT
        response_model: Schema of one row
        get_service: FastAPI dependency returning the resource service
        singular: Noun used in 500 messages ("event")
        plural: Plural noun used in 500 messages ("events")

    Returns:
        APIRouter: Router to include under the admin prefix
    """
    router = APIRouter(prefix=path, tags=[tag])

    @router.get("", response_model=list[response_model])
    @handle_resource_errors(f"fetch {plural}")
    async def list_items(service: ResourceService = Depends(get_service)) -> list[Any]:
        return await service.list_all()

    @router.post("", response_model=response_model, status_code=201)
    @handle_resource_errors(f"create {singular}")
    async def create_item(
        request: payload_model,  # type: ignore[valid-type]
        service: ResourceService = Depends(get_service),
    ) -> Any:
        logger.info(f"Creating {singular}")
        return await service.create(request)

    @router.get("/{item_id}", response_model=response_model)
    @handle_resource_errors(f"fetch {singular}")
    async def get_item(item_id: UUID, service: ResourceService = Depends(get_service)) -> Any:
        return await service.get(item_id)

    @router.put("/{item_id}", response_model=response_model)
    @handle_resource_errors(f"update {singular}")
    async def update_item(
        item_id: UUID,
        request: payload_model,  # type: ignore[valid-type]
        service: ResourceService = Depends(get_service),
    ) -> Any:
        return await service.update(item_id, request)

    @router.delete("/{item_id}", response_model=SuccessResponse)
    @handle_resource_errors(f"delete {singular}")
    async def delete_item(
        item_id: UUID, service: ResourceService = Depends(get_service)
    ) -> SuccessResponse:
        await service.delete(item_id)
        return SuccessResponse()

    return router
