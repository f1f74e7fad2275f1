"""
Admin authentication endpoints.

Routes:
- POST /auth/login - Verify credentials and set the session cookie
- POST /auth/logout - Revoke the session and clear the cookie
- GET /auth/me - Identity behind the current cookie

Dependencies: elham.application.services.auth_service, elham.api.auth_cookies
System role: Login/logout HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from elham.api.auth_cookies import clear_session_cookie, set_session_cookie
from elham.api.deps.dependencies import (
    get_auth_service,
    get_session_token,
    get_settings_dependency,
    require_admin,
)
from elham.application.services.auth_service import AuthService, InvalidCredentialsError
from elham.configs import Settings
from elham.core.exceptions import InvalidResourceDataError
from elham.models.auth import AdminIdentity, LoginRequest
from elham.models.common import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=SuccessResponse)
async def login(
    response: Response,
    request: LoginRequest | None = None,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings_dependency),
) -> SuccessResponse:
    """
    Log an admin in.

    Args:
        response: Outgoing response, receives the session cookie
        request: Email and password
        auth_service: Injected AuthService
        settings: Cookie settings

    Returns:
        SuccessResponse: {"success": true}

    Raises:
        HTTPException(400): Email or password missing
        HTTPException(401): Invalid email or password
        HTTPException(500): Unexpected failure
    """
    try:
        issued = await auth_service.login(request or LoginRequest())
    except InvalidResourceDataError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    except Exception as e:
        logger.exception("Login failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong",
        )

    set_session_cookie(response, issued.token, settings)
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
async def logout(
    response: Response,
    token: str | None = Depends(get_session_token),
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings_dependency),
) -> SuccessResponse:
    """Revoke the caller's session if any and clear the cookie. Always succeeds."""
    await auth_service.logout(token)
    clear_session_cookie(response, settings)
    return SuccessResponse()


@router.get("/me", response_model=AdminIdentity)
async def me(admin: AdminIdentity = Depends(require_admin)) -> AdminIdentity:
    return admin
