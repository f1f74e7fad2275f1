"""
Admin session lifecycle.

Issues opaque bearer tokens after a successful login, resolves a token
back to the admin identity on every protected request, and revokes
tokens on logout. Expired sessions are evicted lazily when presented.

Dependencies: sqlalchemy, elham.boundary.db.CRUD, elham.core.security
System role: Authentication gate for every admin operation
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from elham.boundary.db.CRUD.admin_crud import AdminSessionCRUD, admin_session_crud
from elham.core.security import generate_session_token
from elham.models.auth import AdminIdentity, IssuedSession

logger = logging.getLogger(__name__)

SESSION_DURATION = timedelta(days=7)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite returns naive datetimes; values are always written in UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SessionManager:
    """
    Issue, resolve and revoke admin sessions.

    The manager holds no state of its own; every call goes to the
    session store through the request-scoped database session.
    Tokens are secrets and are never logged.
    """

    def __init__(
        self,
        db: AsyncSession,
        session_crud: AdminSessionCRUD = admin_session_crud,
        clock: Callable[[], datetime] = _utc_now,
        duration: timedelta = SESSION_DURATION,
        token_factory: Callable[[], str] = generate_session_token,
    ) -> None:
        """
        Initialize the manager.

        Args:
            db: Async SQLAlchemy session
            session_crud: Session persistence operations
            clock: Returns the current UTC instant
            duration: Lifetime of newly issued sessions
            token_factory: Produces a fresh random token
        """
        self.db = db
        self.session_crud = session_crud
        self.clock = clock
        self.duration = duration
        self.token_factory = token_factory

    async def issue_session(self, user_id: uuid.UUID) -> IssuedSession:
        """
        Create a session for an authenticated user.

        Args:
            user_id: Id of the admin who just proved their password

        Returns:
            IssuedSession: Token and absolute expiry

        Raises:
            SQLAlchemyError: If the row cannot be persisted (including the
                practically impossible token collision)
        """
        token = self.token_factory()
        expires_at = self.clock() + self.duration
        record = await self.session_crud.create(
            self.db,
            token=token,
            user_id=user_id,
            expires_at=expires_at,
        )
        await self.db.commit()
        logger.info(
            "Admin session issued",
            extra={"user_id": str(user_id), "session_id": str(record.id)},
        )
        return IssuedSession(token=token, expires_at=expires_at)

    async def resolve_session(self, token: str | None) -> AdminIdentity | None:
        """
        Map a presented token to the owning admin.

        Unknown and expired tokens both resolve to None. An expired row
        is deleted on the way out; failure to delete is logged and does
        not change the result.

        Args:
            token: Value of the session cookie, possibly None or empty

        Returns:
            AdminIdentity for a live session, None otherwise
        """
        if not token:
            return None

        record = await self.session_crud.get_by_token_with_user(self.db, token)
        if record is None:
            return None

        if _as_utc(record.expires_at) <= self.clock():
            await self._evict(record.id)
            return None

        if record.user is None:
            return None
        return AdminIdentity.model_validate(record.user)

    async def revoke_session(self, token: str | None) -> None:
        """
        Delete every session carrying the token.

        Idempotent: revoking an unknown or already revoked token is a no-op.

        Args:
            token: Value of the session cookie
        """
        if not token:
            return
        deleted = await self.session_crud.delete_by_token(self.db, token)
        await self.db.commit()
        logger.info("Admin session revoked", extra={"sessions_deleted": deleted})

    async def _evict(self, session_id: uuid.UUID) -> None:
        # Committed right away so the eviction survives the 401 that follows.
        try:
            await self.session_crud.delete_by_id(self.db, session_id)
            await self.db.commit()
            logger.info("Expired admin session evicted", extra={"session_id": str(session_id)})
        except Exception as e:
            logger.warning(
                "Failed to evict expired admin session",
                extra={"session_id": str(session_id), "error": str(e)},
            )
            try:
                await self.db.rollback()
            except Exception:
                logger.exception("Rollback after failed eviction also failed")
