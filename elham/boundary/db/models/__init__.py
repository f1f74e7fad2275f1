"""ORM models. Importing this package registers every table with Base.metadata."""

from elham.boundary.db.models.admin_model import AdminSessionModel, AdminUserModel
from elham.boundary.db.models.blog_model import BlogPostModel
from elham.boundary.db.models.event_model import EventModel
from elham.boundary.db.models.hotel_model import HotelModel, RoomModel
from elham.boundary.db.models.inquiry_model import ContactInquiryModel
from elham.boundary.db.models.location_model import LocationModel
from elham.boundary.db.models.package_model import (
    PackageCategoryModel,
    PackageDiscoverCardModel,
    TourPackageModel,
)
from elham.boundary.db.models.testimonial_model import TestimonialModel
from elham.boundary.db.models.transportation_model import TransportationModel
from elham.boundary.db.models.visa_model import VisaModel

__all__ = [
    "AdminSessionModel",
    "AdminUserModel",
    "BlogPostModel",
    "ContactInquiryModel",
    "EventModel",
    "HotelModel",
    "LocationModel",
    "PackageCategoryModel",
    "PackageDiscoverCardModel",
    "RoomModel",
    "TestimonialModel",
    "TourPackageModel",
    "TransportationModel",
    "VisaModel",
]
