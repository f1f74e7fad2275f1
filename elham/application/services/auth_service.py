"""
Admin login and logout.

Verifies credentials against the stored bcrypt hash and delegates
token handling to the SessionManager.

Dependencies: elham.core.security, elham.core.session_manager, elham.boundary.db.CRUD
System role: Authentication use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from elham.boundary.db.CRUD.admin_crud import admin_user_crud
from elham.core.exceptions import ElhamException, InvalidResourceDataError
from elham.core.security import verify_password
from elham.core.session_manager import SessionManager
from elham.models.auth import IssuedSession, LoginRequest

logger = logging.getLogger(__name__)


class InvalidCredentialsError(ElhamException):
    """Raised when the email is unknown or the password does not match."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:
    """Admin authentication orchestrator."""

    def __init__(self, db: AsyncSession, session_manager: SessionManager) -> None:
        """
        Initialize auth service.

        Args:
            db: Async SQLAlchemy session
            session_manager: Issues and revokes session tokens
        """
        self.db = db
        self.session_manager = session_manager

    async def login(self, credentials: LoginRequest) -> IssuedSession:
        """
        Authenticate an admin and open a session.

        Unknown email and wrong password raise the same error after the
        same amount of hashing work.

        Args:
            credentials: Email and password from the login form

        Returns:
            IssuedSession: Token to place in the session cookie

        Raises:
            InvalidResourceDataError: If email or password is empty
            InvalidCredentialsError: If the credentials do not match
        """
        email = normalize_email(credentials.email)
        password = credentials.password
        if not email or not password:
            raise InvalidResourceDataError("Email and password are required")

        user = await admin_user_crud.get_by_email(self.db, email)
        password_hash = user.password_hash if user else None
        if not verify_password(password, password_hash) or user is None:
            logger.info("Admin login rejected")
            raise InvalidCredentialsError()

        issued = await self.session_manager.issue_session(user.id)
        logger.info("Admin logged in", extra={"user_id": str(user.id)})
        return issued

    async def logout(self, token: str | None) -> None:
        """
        Revoke the session behind a token, ignoring persistence failures.

        Logout always succeeds from the caller's point of view; the
        cookie is cleared regardless.
        """
        try:
            await self.session_manager.revoke_session(token)
        except Exception as e:
            logger.warning("Failed to revoke admin session", extra={"error": str(e)})
            await self.db.rollback()
