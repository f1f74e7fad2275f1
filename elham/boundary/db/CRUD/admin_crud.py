"""
Admin user and session CRUD operations.

Dependencies: sqlalchemy, elham.boundary.db.models.admin_model
System role: Credential and session persistence operations
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from elham.boundary.db.CRUD.base_crud import BaseCRUD
from elham.boundary.db.models.admin_model import AdminSessionModel, AdminUserModel


class AdminUserCRUD(BaseCRUD[AdminUserModel]):
    """CRUD operations for AdminUserModel with lookup by email."""

    def __init__(self) -> None:
        super().__init__(AdminUserModel)

    async def get_by_email(self, session: AsyncSession, email: str) -> AdminUserModel | None:
        """
        Retrieve an admin by email.

        Args:
            session: Async database session
            email: Normalized (trimmed, lowercased) email

        Returns:
            AdminUserModel if found, None otherwise
        """
        stmt = select(AdminUserModel).where(AdminUserModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


class AdminSessionCRUD(BaseCRUD[AdminSessionModel]):
    """
    CRUD operations for AdminSessionModel.

    Tokens are the lookup key; the owning user is loaded eagerly so a
    resolved session can be turned into an identity without another query.
    """

    def __init__(self) -> None:
        super().__init__(AdminSessionModel)

    async def get_by_token_with_user(
        self,
        session: AsyncSession,
        token: str,
    ) -> AdminSessionModel | None:
        """
        Retrieve a session by token with its user eagerly loaded.

        Args:
            session: Async database session
            token: Opaque session token

        Returns:
            AdminSessionModel with user loaded, None if not found
        """
        stmt = (
            select(AdminSessionModel)
            .where(AdminSessionModel.token == token)
            .options(selectinload(AdminSessionModel.user))
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_by_token(self, session: AsyncSession, token: str) -> int:
        """
        Delete every session carrying the token.

        Args:
            session: Async database session
            token: Opaque session token

        Returns:
            Number of rows deleted, 0 when nothing matched
        """
        stmt = delete(AdminSessionModel).where(AdminSessionModel.token == token)
        result = await session.execute(stmt)
        return result.rowcount


admin_user_crud = AdminUserCRUD()
admin_session_crud = AdminSessionCRUD()
