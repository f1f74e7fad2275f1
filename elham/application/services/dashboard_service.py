"""
Admin dashboard summary.

Dependencies: elham.boundary.db.CRUD
System role: Counts shown on the admin landing page
"""

from sqlalchemy.ext.asyncio import AsyncSession

from elham.boundary.db.CRUD.content_crud import contact_inquiry_crud, event_crud
from elham.boundary.db.CRUD.hotel_crud import hotel_crud
from elham.boundary.db.CRUD.package_crud import tour_package_crud


class DashboardService:
    """Aggregate counts for the dashboard."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_counts(self) -> dict[str, int]:
        """
        Count the main catalog and inbox tables.

        Returns:
            dict: inquiries, new_inquiries, hotels, packages, events
        """
        return {
            "inquiries": await contact_inquiry_crud.count(self.db),
            "new_inquiries": await contact_inquiry_crud.count(self.db, status="new"),
            "hotels": await hotel_crud.count(self.db),
            "packages": await tour_package_crud.count(self.db),
            "events": await event_crud.count(self.db),
        }
