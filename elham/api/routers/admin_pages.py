"""
Server-rendered admin pages.

Routes:
- GET /admin - Dashboard, or 303 to /admin/login without a session
- GET /admin/login - Login form, or 303 to /admin with a session
- POST /admin/login - Form login; sets the session cookie on success
- POST /admin/logout - Revoke the session and return to the login form

Dependencies: fastapi (Jinja2Templates), elham.application.services
System role: Thin HTML front door for the admin area
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from elham.api.auth_cookies import clear_session_cookie, set_session_cookie
from elham.api.deps.dependencies import (
    get_auth_service,
    get_dashboard_service,
    get_optional_admin,
    get_session_token,
    get_settings_dependency,
)
from elham.application.services.auth_service import AuthService, InvalidCredentialsError
from elham.application.services.dashboard_service import DashboardService
from elham.configs import Settings
from elham.core.exceptions import InvalidResourceDataError
from elham.models.auth import AdminIdentity, LoginRequest

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(prefix="/admin", tags=["admin pages"], include_in_schema=False)


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)


def _login_page(request: Request, error: str | None = None, email: str = "", status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "login.html",
        {"error": error, "email": email},
        status_code=status_code,
    )


@router.get("", response_class=HTMLResponse)
async def dashboard_page(
    request: Request,
    admin: AdminIdentity | None = Depends(get_optional_admin),
    dashboard_service: DashboardService = Depends(get_dashboard_service),
):
    if admin is None:
        return _redirect("/admin/login")
    counts = await dashboard_service.get_counts()
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {"admin": admin, "counts": counts},
    )


@router.get("/login", response_class=HTMLResponse)
async def login_page(
    request: Request,
    admin: AdminIdentity | None = Depends(get_optional_admin),
):
    if admin is not None:
        return _redirect("/admin")
    return _login_page(request)


@router.post("/login", response_class=HTMLResponse)
async def login_form(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings_dependency),
):
    """Form counterpart of POST /api/auth/login; errors re-render the form."""
    try:
        issued = await auth_service.login(LoginRequest(email=email, password=password))
    except InvalidResourceDataError as e:
        return _login_page(request, e.message, email, status.HTTP_400_BAD_REQUEST)
    except InvalidCredentialsError as e:
        return _login_page(request, e.message, email, status.HTTP_401_UNAUTHORIZED)
    except Exception as e:
        logger.exception("Form login failed", extra={"error": str(e)})
        return _login_page(
            request, "Something went wrong", email, status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    response = _redirect("/admin")
    set_session_cookie(response, issued.token, settings)
    return response


@router.post("/logout")
async def logout_form(
    token: str | None = Depends(get_session_token),
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings_dependency),
) -> RedirectResponse:
    await auth_service.logout(token)
    response = _redirect("/admin/login")
    clear_session_cookie(response, settings)
    return response
