"""
Contact inquiry ORM model.

Every inquiry submitted from a public detail page is recorded here
before the notification emails go out.

Dependencies: sqlalchemy, elham.boundary.db.base
System role: Inquiry persistence
"""

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from elham.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ContactInquiryModel(Base, UUIDMixin, TimestampMixin):
    """
    Customer inquiry about a catalog item.

    Attributes:
        type: Kind of item asked about (hotel, package, visa, ...)
        reference_id: Id of the item, as sent by the client
        reference_name: Display name of the item at submission time
        meta: Extra key/value details collected by the inquiry form
        status: Workflow status, "new" on creation
    """

    __tablename__ = "contact_inquiries"

    type: Mapped[str] = mapped_column(String(50), nullable=False, default="general")
    reference_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    reference_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    nationality: Mapped[str | None] = mapped_column(String(100), nullable=True)
    travelers: Mapped[str | None] = mapped_column(String(50), nullable=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    locale: Mapped[str] = mapped_column(String(5), nullable=False, default="en")
    meta: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="new")
