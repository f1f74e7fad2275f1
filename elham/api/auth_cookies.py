"""
Session cookie helpers.

The session token travels in an HttpOnly, SameSite=Lax cookie scoped to
the whole site; it is marked Secure in production.

Dependencies: fastapi, elham.configs
System role: Transport binding of the admin session token
"""

from fastapi import Response

from elham.configs import Settings


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        max_age=settings.auth.session_max_age_seconds,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Overwrite the cookie with an empty value that expires immediately."""
    response.set_cookie(
        key=settings.auth.cookie_name,
        value="",
        max_age=0,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
