"""
Generic admin resource service.

Implements the create / read / update / delete rules shared by every
catalog resource:

* create: required bilingual fields must be present; omitted optional
  fields fall back to the column defaults declared on the ORM model;
* update: omitted fields keep their stored value, explicit null clears
  nullable columns, null is ignored for non-nullable columns;
* not found: raised as ResourceNotFoundError("<Resource> not found").

Concrete services set the class attributes and override the
``_prepare_create`` / ``_prepare_update`` hooks for resource-specific rules.

Dependencies: sqlalchemy, pydantic, elham.boundary.db.CRUD
System role: Use case orchestration for admin CRUD
"""

import logging
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from elham.boundary.db.CRUD.base_crud import BaseCRUD
from elham.core.exceptions import InvalidResourceDataError, ResourceNotFoundError

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class ResourceService(Generic[ResponseT]):
    """
    Base class for admin resource services.

    Class Attributes:
        resource_name: Singular display name used in error messages ("Hotel")
        crud: CRUD singleton for the resource's model
        response_model: Pydantic schema rows are converted to
        required_fields: Fields that must be non-empty on create
        required_message: 400 message when a required field is missing
        require_on_update: Whether updates must also carry the required fields
    """

    resource_name: ClassVar[str] = "Resource"
    crud: ClassVar[BaseCRUD]
    response_model: ClassVar[type[BaseModel]]
    required_fields: ClassVar[tuple[str, ...]] = ("name_en", "name_ar")
    required_message: ClassVar[str] = "Name (EN) and Name (AR) are required"
    require_on_update: ClassVar[bool] = False

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    @property
    def _log_key(self) -> str:
        return self.resource_name.lower().replace(" ", "_")

    def _non_nullable_columns(self) -> set[str]:
        return {
            column.key
            for column in inspect(self.crud.model).columns
            if not column.nullable
        }

    def to_response(self, row: Any) -> ResponseT:
        return self.response_model.model_validate(row)

    def _check_required(self, data: dict[str, Any]) -> None:
        if any(not data.get(field) for field in self.required_fields):
            raise InvalidResourceDataError(self.required_message)

    async def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        return data

    async def _prepare_update(self, existing: Any, changes: dict[str, Any]) -> dict[str, Any]:
        return changes

    async def _get_or_raise(self, id: UUID) -> Any:
        row = await self.crud.get_by_id(self.db, id)
        if row is None:
            raise ResourceNotFoundError(self.resource_name, id)
        return row

    async def list_all(self) -> list[ResponseT]:
        """
        List every row in the resource's default order.

        Returns:
            list: Response models, inactive rows included
        """
        rows = await self.crud.get_all(self.db)
        return [self.to_response(row) for row in rows]

    async def get(self, id: UUID) -> ResponseT:
        """
        Get one row by id.

        Raises:
            ResourceNotFoundError: If no row has this id
        """
        return self.to_response(await self._get_or_raise(id))

    async def create(self, payload: BaseModel, **extra: Any) -> ResponseT:
        """
        Create a row from an admin payload.

        Args:
            payload: Normalized request body
            **extra: Values set by the caller rather than the client (e.g. hotel_id)

        Returns:
            Response model of the created row

        Raises:
            InvalidResourceDataError: If a required field is missing
        """
        data = payload.model_dump()
        self._check_required(data)
        data = await self._prepare_create(data)
        data.update(extra)

        non_nullable = self._non_nullable_columns()
        values = {
            key: value
            for key, value in data.items()
            if not (value is None and key in non_nullable)
        }

        try:
            row = await self.crud.create(self.db, **values)
            await self.db.commit()
        except Exception as e:
            logger.error(
                f"Failed to create {self._log_key}",
                extra={"error": str(e), "resource": self.resource_name},
            )
            raise

        logger.info(
            f"{self.resource_name} created",
            extra={f"{self._log_key}_id": str(row.id)},
        )
        return self.to_response(row)

    async def update(self, id: UUID, payload: BaseModel) -> ResponseT:
        """
        Apply a partial update.

        Only fields present in the request body are touched.

        Raises:
            ResourceNotFoundError: If no row has this id
        """
        existing = await self._get_or_raise(id)
        if self.require_on_update:
            self._check_required(payload.model_dump())

        non_nullable = self._non_nullable_columns()
        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if not (value is None and key in non_nullable)
        }
        changes = await self._prepare_update(existing, changes)

        try:
            updated = await self.crud.update_by_id(self.db, id, **changes)
            await self.db.commit()
        except Exception as e:
            logger.error(
                f"Failed to update {self._log_key}",
                extra={"error": str(e), f"{self._log_key}_id": str(id)},
            )
            raise

        if updated is None:
            raise ResourceNotFoundError(self.resource_name, id)

        logger.info(
            f"{self.resource_name} updated",
            extra={f"{self._log_key}_id": str(id), "updates": sorted(changes)},
        )
        return self.to_response(updated)

    async def delete(self, id: UUID) -> None:
        """
        Delete a row.

        Raises:
            ResourceNotFoundError: If no row has this id
        """
        deleted = await self.crud.delete_by_id(self.db, id)
        if not deleted:
            raise ResourceNotFoundError(self.resource_name, id)
        await self.db.commit()
        logger.info(
            f"{self.resource_name} deleted",
            extra={f"{self._log_key}_id": str(id)},
        )
