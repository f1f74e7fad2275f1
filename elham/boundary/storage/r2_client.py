"""
Cloudflare R2 client for uploaded images.

R2 speaks the S3 API, so boto3 is pointed at the account endpoint with
region "auto". Objects are written publicly readable through the
bucket's public base URL.

Dependencies: boto3
System role: Object storage boundary for the media upload gateway
"""

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from elham.configs.storage import StorageSettings
from elham.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class R2StorageClient:
    """Write-only R2 client (put object, build public URL)."""

    def __init__(
        self,
        bucket: str,
        endpoint_url: str,
        access_key_id: str,
        secret_access_key: str,
        public_url: str,
        region: str = "auto",
    ) -> None:
        """
        Initialize the S3-compatible client.

        Args:
            bucket: R2 bucket name
            endpoint_url: https://<account>.r2.cloudflarestorage.com
            access_key_id: R2 access key id
            secret_access_key: R2 secret access key
            public_url: Public base URL serving the bucket
            region: Region name passed to boto3
        """
        self._bucket = bucket
        self._public_url = public_url.rstrip("/")
        self._s3_client = boto3.client(
            "s3",
            endpoint_url=endpoint_url,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
            region_name=region,
        )

    @classmethod
    def from_settings(cls, settings: StorageSettings) -> "R2StorageClient":
        return cls(
            bucket=settings.bucket_name,
            endpoint_url=settings.endpoint_url,
            access_key_id=settings.access_key_id,
            secret_access_key=settings.secret_access_key,
            public_url=settings.public_url,
            region=settings.region,
        )

    def public_url_for(self, key: str) -> str:
        return f"{self._public_url}/{key}"

    def upload_bytes(self, key: str, body: bytes, content_type: str) -> str:
        """
        Store bytes under a key.

        Args:
            key: Object key, e.g. packages/<hex>.jpg
            body: File content
            content_type: MIME type stored with the object

        Returns:
            str: Public URL of the stored object

        Raises:
            StorageError: If R2 rejects the write or is unreachable
        """
        try:
            self._s3_client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "R2 put_object failed",
                extra={"key": key, "bucket": self._bucket, "error": str(e)},
            )
            raise StorageError("Upload failed", {"key": key}) from e
        return self.public_url_for(key)
