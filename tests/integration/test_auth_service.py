"""
Test suite for AuthService login and logout.

System role: Verification of credential checks
"""

from unittest.mock import AsyncMock

import pytest

from elham.application.services.auth_service import AuthService, InvalidCredentialsError
from elham.core.exceptions import InvalidResourceDataError
from elham.core.session_manager import SessionManager
from elham.models.auth import LoginRequest


@pytest.fixture
def auth_service(test_async_db) -> AuthService:
    return AuthService(db=test_async_db, session_manager=SessionManager(db=test_async_db))


class TestLogin:
    """Test suite for AuthService.login()."""

    @pytest.mark.asyncio
    async def test_valid_credentials_issue_session(
        self, auth_service, admin_user, admin_credentials
    ) -> None:
        issued = await auth_service.login(LoginRequest(**admin_credentials))

        identity = await auth_service.session_manager.resolve_session(issued.token)
        assert identity.id == admin_user.id

    @pytest.mark.asyncio
    async def test_email_is_trimmed_and_case_insensitive(
        self, auth_service, admin_user, admin_credentials
    ) -> None:
        issued = await auth_service.login(
            LoginRequest(
                email=f"  {admin_credentials['email'].upper()} ",
                password=admin_credentials["password"],
            )
        )

        assert issued.token

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email, password",
        [("", "secret"), ("admin@elham.test", ""), ("   ", "x")],
    )
    async def test_missing_fields(self, auth_service, email, password) -> None:
        with pytest.raises(InvalidResourceDataError) as exc_info:
            await auth_service.login(LoginRequest(email=email, password=password))

        assert exc_info.value.message == "Email and password are required"

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_the_same(
        self, auth_service, admin_user
    ) -> None:
        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await auth_service.login(LoginRequest(email="admin@elham.test", password="nope"))
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await auth_service.login(LoginRequest(email="who@elham.test", password="nope"))

        assert wrong_password.value.message == unknown_email.value.message
        assert wrong_password.value.message == "Invalid email or password"


class TestLogout:
    """Test suite for AuthService.logout()."""

    @pytest.mark.asyncio
    async def test_logout_swallows_revoke_failure(self) -> None:
        session_manager = AsyncMock()
        session_manager.revoke_session = AsyncMock(side_effect=RuntimeError("db down"))
        db = AsyncMock()
        service = AuthService(db=db, session_manager=session_manager)

        await service.logout("a" * 64)

        db.rollback.assert_awaited_once()
