"""
Admin user and admin session ORM models.

Administrators sign in with email and password; each successful login
creates one AdminSession row holding an opaque bearer token.

Dependencies: sqlalchemy, elham.boundary.db.base
System role: Credential and session persistence
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from elham.boundary.db.base import Base, TimestampMixin, UUIDMixin, utc_now


class AdminUserModel(Base, UUIDMixin, TimestampMixin):
    """
    Back-office administrator.

    Attributes:
        email: Unique login email, stored lowercased
        password_hash: bcrypt hash of the password
        name: Display name (optional)
        role: Authorization role, "admin" for every provisioned user
        sessions: Active and not-yet-evicted sessions of this user
    """

    __tablename__ = "admin_users"

    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        unique=True,
        index=True,
        doc="Login email",
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    role: Mapped[str] = mapped_column(String(50), nullable=False, default="admin")

    sessions = relationship(
        "AdminSessionModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class AdminSessionModel(Base, UUIDMixin):
    """
    Server-side login session.

    Attributes:
        token: 64 hex chars, unique; the cookie value
        user_id: Owning admin user (cascade on user delete)
        expires_at: Absolute expiry instant (UTC)
        created_at: Issue instant (UTC)
    """

    __tablename__ = "admin_sessions"

    token: Mapped[str] = mapped_column(String(128), nullable=False, unique=True, index=True)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("admin_users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )

    user = relationship("AdminUserModel", back_populates="sessions")
