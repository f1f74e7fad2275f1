"""
Admin authentication settings.

Cookie name, session lifetime and password hashing cost for the
admin back-office.

Dependencies: pydantic, pydantic_settings
System role: Session and credential configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from elham.configs.base import BaseSettings


class AuthSettings(BaseSettings):
    """Admin session configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    cookie_name: str = Field(default="admin_session", description="Session cookie name")
    session_duration_days: int = Field(
        default=7, ge=1, description="Lifetime of an admin session in days"
    )
    bcrypt_rounds: int = Field(default=12, ge=4, le=31, description="bcrypt work factor")

    @property
    def session_max_age_seconds(self) -> int:
        return self.session_duration_days * 24 * 60 * 60
