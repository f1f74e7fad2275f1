"""
CRUD operations for database models.

Exports the base CRUD class and pre-instantiated singletons for direct use.

Usage:
    from elham.boundary.db.CRUD import hotel_crud

    hotel = await hotel_crud.get_by_id(db, hotel_id)
"""

from elham.boundary.db.CRUD.admin_crud import (
    AdminSessionCRUD,
    AdminUserCRUD,
    admin_session_crud,
    admin_user_crud,
)
from elham.boundary.db.CRUD.base_crud import BaseCRUD
from elham.boundary.db.CRUD.content_crud import (
    blog_post_crud,
    contact_inquiry_crud,
    event_crud,
    testimonial_crud,
    transportation_crud,
    visa_crud,
)
from elham.boundary.db.CRUD.hotel_crud import hotel_crud, room_crud
from elham.boundary.db.CRUD.location_crud import location_crud
from elham.boundary.db.CRUD.package_crud import (
    package_category_crud,
    package_discover_card_crud,
    tour_package_crud,
)

__all__ = [
    "AdminSessionCRUD",
    "AdminUserCRUD",
    "BaseCRUD",
    "admin_session_crud",
    "admin_user_crud",
    "blog_post_crud",
    "contact_inquiry_crud",
    "event_crud",
    "hotel_crud",
    "location_crud",
    "package_category_crud",
    "package_discover_card_crud",
    "room_crud",
    "testimonial_crud",
    "tour_package_crud",
    "transportation_crud",
    "visa_crud",
]
