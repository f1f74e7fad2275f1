"""
Outbound email settings.

SMTP credentials and addresses used by the inquiry notifier.

Dependencies: pydantic, pydantic_settings
System role: Mail transport configuration
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from elham.configs.base import BaseSettings


class EmailSettings(BaseSettings):
    """SMTP configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EMAIL_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="smtp.gmail.com", description="SMTP host")
    port: int = Field(default=587, description="SMTP port (465 means implicit TLS)")
    user: Optional[str] = Field(default=None, description="SMTP username")
    password: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("EMAIL_PASS", "EMAIL_PASSWORD"),
        description="SMTP password",
    )
    sender: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("EMAIL_FROM", "EMAIL_SENDER"),
        description="From header; defaults to the SMTP user",
    )
    company_email: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("COMPANY_EMAIL", "EMAIL_COMPANY_EMAIL"),
        description="Operator inbox; defaults to the SMTP user",
    )
    company_name: str = Field(default="Elham", description="Display name in outgoing mail")
    timeout: int = Field(default=30, description="SMTP socket timeout in seconds")

    @property
    def use_ssl(self) -> bool:
        return self.port == 465

    @property
    def is_configured(self) -> bool:
        return bool(self.user and self.password)

    @property
    def from_address(self) -> Optional[str]:
        return self.sender or self.user

    @property
    def operator_address(self) -> Optional[str]:
        return self.company_email or self.user
