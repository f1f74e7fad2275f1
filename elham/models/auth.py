"""
Authentication schemas.

Dependencies: pydantic
System role: Login API contracts and the resolved admin identity
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoginRequest(BaseModel):
    """
    Login form body.

    Both fields default to "" so that a missing field is reported with
    the same 400 message as an empty one.
    """

    email: str = Field(default="", description="Admin email")
    password: str = Field(default="", description="Admin password")

    @field_validator("email", "password", mode="before")
    @classmethod
    def coerce_to_text(cls, value):
        return value if isinstance(value, str) else ""


class AdminIdentity(BaseModel):
    """Public identity of the caller behind a valid session."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: uuid.UUID
    email: str
    name: str | None = None
    role: str


class IssuedSession(BaseModel):
    """Freshly issued session token and its expiry."""

    token: str
    expires_at: datetime
