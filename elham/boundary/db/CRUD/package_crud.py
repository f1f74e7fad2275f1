"""
Package, category and discover card CRUD operations.

Dependencies: sqlalchemy, elham.boundary.db.models.package_model
System role: Package catalog persistence operations
"""

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from elham.boundary.db.CRUD.base_crud import BaseCRUD
from elham.boundary.db.models.package_model import (
    PackageCategoryModel,
    PackageDiscoverCardModel,
    TourPackageModel,
)


class PackageCategoryCRUD(BaseCRUD[PackageCategoryModel]):
    """CRUD operations for PackageCategoryModel, ordered by sort_order."""

    def __init__(self) -> None:
        super().__init__(PackageCategoryModel)

    def default_ordering(self) -> tuple:
        return (PackageCategoryModel.sort_order.asc(), PackageCategoryModel.created_at.asc())

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """Delete a category, detaching its packages first."""
        await session.execute(
            update(TourPackageModel)
            .where(TourPackageModel.category_id == id)
            .values(category_id=None)
        )
        return await super().delete_by_id(session, id)


class TourPackageCRUD(BaseCRUD[TourPackageModel]):
    """CRUD operations for TourPackageModel."""

    def __init__(self) -> None:
        super().__init__(TourPackageModel)

    async def first_active_image(
        self, session: AsyncSession, category_id: UUID
    ) -> str | None:
        """Image of the newest active package in a category, used as category cover."""
        stmt = (
            select(TourPackageModel.image_url)
            .where(
                TourPackageModel.category_id == category_id,
                TourPackageModel.is_active.is_(True),
                TourPackageModel.image_url.is_not(None),
            )
            .order_by(TourPackageModel.created_at.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


class PackageDiscoverCardCRUD(BaseCRUD[PackageDiscoverCardModel]):
    """Access to the single discover card row."""

    def __init__(self) -> None:
        super().__init__(PackageDiscoverCardModel)

    def default_ordering(self) -> tuple:
        return (PackageDiscoverCardModel.created_at.asc(),)

    async def get_singleton(self, session: AsyncSession) -> PackageDiscoverCardModel | None:
        rows = await self.get_all(session, limit=1)
        return rows[0] if rows else None


package_category_crud = PackageCategoryCRUD()
tour_package_crud = TourPackageCRUD()
package_discover_card_crud = PackageDiscoverCardCRUD()
