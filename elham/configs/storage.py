"""
Object storage configuration settings.

Manages Cloudflare R2 (S3-compatible) parameters for media uploads.

Dependencies: pydantic, pydantic_settings
System role: Media storage configuration
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from elham.configs.base import BaseSettings


class StorageSettings(BaseSettings):
    """R2 bucket configuration for uploaded images."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="R2_",
        case_sensitive=False,
        extra="ignore",
    )

    account_id: Optional[str] = Field(default=None, description="Cloudflare account id")
    access_key_id: Optional[str] = Field(default=None, description="R2 access key id")
    secret_access_key: Optional[str] = Field(default=None, description="R2 secret access key")
    bucket_name: Optional[str] = Field(default=None, description="R2 bucket name")
    public_url: Optional[str] = Field(
        default=None, description="Public base URL serving the bucket"
    )
    region: str = Field(default="auto", description="Region passed to the S3 client")
    key_prefix: str = Field(default="packages", description="Key prefix for uploaded images")
    max_upload_bytes: int = Field(
        default=5 * 1024 * 1024, description="Maximum accepted image size in bytes"
    )

    @property
    def endpoint_url(self) -> Optional[str]:
        if not self.account_id:
            return None
        return f"https://{self.account_id}.r2.cloudflarestorage.com"

    @property
    def is_configured(self) -> bool:
        return all(
            (
                self.account_id,
                self.access_key_id,
                self.secret_access_key,
                self.bucket_name,
                self.public_url,
            )
        )
