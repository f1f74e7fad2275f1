"""
Tests for POST /api/admin/upload.

System role: Verification of the upload route's HTTP contract
"""

from unittest.mock import MagicMock

import pytest

from elham.api.deps.dependencies import get_upload_service, require_admin
from elham.application.services.upload_service import UploadService
from elham.core.exceptions import StorageError


@pytest.fixture
def mock_storage() -> MagicMock:
    storage = MagicMock()
    storage.upload_bytes = MagicMock(
        side_effect=lambda key, body, content_type: f"https://cdn.elham.test/{key}"
    )
    return storage


@pytest.fixture
def upload_app(app, admin_identity, mock_storage):
    app.dependency_overrides[require_admin] = lambda: admin_identity
    app.dependency_overrides[get_upload_service] = lambda: UploadService(
        storage=mock_storage, max_bytes=1024
    )
    return app


class TestUploadEndpoint:
    """Test suite for the upload route."""

    @pytest.mark.asyncio
    async def test_upload_returns_url(self, upload_app, client) -> None:
        response = await client.post(
            "/api/admin/upload",
            files={"file": ("kaaba.png", b"\x89PNG\r\n", "image/png")},
        )

        assert response.status_code == 200
        assert response.json()["url"].startswith("https://cdn.elham.test/packages/")
        assert response.json()["url"].endswith(".png")

    @pytest.mark.asyncio
    async def test_missing_file(self, upload_app, client) -> None:
        response = await client.post("/api/admin/upload", data={"other": "x"})

        assert response.status_code == 400
        assert response.json() == {"detail": 'No file provided. Use form field "file".'}

    @pytest.mark.asyncio
    async def test_wrong_type(self, upload_app, client, mock_storage) -> None:
        response = await client.post(
            "/api/admin/upload",
            files={"file": ("doc.pdf", b"%PDF-1.4", "application/pdf")},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid file type. Use JPEG, PNG, WebP or GIF."}
        mock_storage.upload_bytes.assert_not_called()

    @pytest.mark.asyncio
    async def test_too_large(self, upload_app, client) -> None:
        response = await client.post(
            "/api/admin/upload",
            files={"file": ("big.jpg", b"x" * 2048, "image/jpeg")},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "File too large. Max 5MB."}

    @pytest.mark.asyncio
    async def test_storage_failure(self, upload_app, client, mock_storage) -> None:
        mock_storage.upload_bytes.side_effect = StorageError("Upload failed")

        response = await client.post(
            "/api/admin/upload",
            files={"file": ("a.gif", b"GIF89a", "image/gif")},
        )

        assert response.status_code == 500
        assert response.json() == {"detail": "Upload failed"}

    @pytest.mark.asyncio
    async def test_requires_admin(self, app, client) -> None:
        response = await client.post(
            "/api/admin/upload",
            files={"file": ("a.gif", b"GIF89a", "image/gif")},
        )

        assert response.status_code == 401
