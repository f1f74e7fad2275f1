"""
Create the first admin user.

Reads ADMIN_EMAIL, ADMIN_PASSWORD and ADMIN_NAME from the environment
(or .env). Does nothing when a user with that email already exists.

Usage:
    python -m elham.scripts.seed_admin

Dependencies: pydantic_settings, elham.boundary.db, elham.core.security
System role: Admin account provisioning
"""

import asyncio
import logging

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from elham.boundary.db.CRUD.admin_crud import admin_user_crud
from elham.boundary.db.connection import get_async_engine, get_async_session_factory
from elham.configs import get_settings
from elham.configs.base import BaseSettings
from elham.core.security import hash_password
from elham.observability.logger import configure_logging

logger = logging.getLogger(__name__)


class AdminSeedSettings(BaseSettings):
    """Initial admin account (ADMIN_ prefix)."""

    model_config = SettingsConfigDict(
        env_prefix="ADMIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    email: str = Field(default="admin@example.com")
    password: str = Field(default="changeme")
    name: str = Field(default="Admin")


async def seed_admin(seed: AdminSeedSettings | None = None) -> bool:
    """
    Insert the admin user unless it already exists.

    Args:
        seed: Account details (read from the environment when omitted)

    Returns:
        bool: True when a user was created
    """
    seed = seed or AdminSeedSettings()
    email = seed.email.strip().lower()
    rounds = get_settings().auth.bcrypt_rounds

    async with get_async_session_factory()() as db:
        if await admin_user_crud.get_by_email(db, email):
            logger.info("Admin already exists", extra={"email": email})
            return False

        await admin_user_crud.create(
            db,
            email=email,
            password_hash=hash_password(seed.password, rounds=rounds),
            name=seed.name,
            role="admin",
        )
        await db.commit()

    logger.info("Admin created", extra={"email": email})
    return True


async def _main() -> None:
    try:
        await seed_admin()
    finally:
        await get_async_engine().dispose()


if __name__ == "__main__":
    configure_logging(get_settings().log_level)
    asyncio.run(_main())
