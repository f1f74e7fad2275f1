"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from elham.configs.auth import AuthSettings
from elham.configs.base import BaseSettings
from elham.configs.database import DatabaseSettings
from elham.configs.email import EmailSettings
from elham.configs.storage import StorageSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    email: EmailSettings = Field(default_factory=EmailSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from elham.configs import get_settings
        settings = get_settings()
    """
    return Settings()
