"""
Unit tests for admin and public routers with mocked services.

Verifies the mapping from service outcomes to HTTP responses without a
database.

System role: Verification of the router error contract
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from elham.api.deps.dependencies import (
    get_event_service,
    get_public_catalog_service,
    get_visa_service,
    require_admin,
)
from elham.api.main import create_app
from elham.core.exceptions import InvalidResourceDataError, ResourceNotFoundError
from elham.models.auth import AdminIdentity
from elham.models.public import PublicTestimonial


@pytest.fixture
def app():
    application = create_app()
    application.dependency_overrides[require_admin] = lambda: AdminIdentity(
        id=uuid.uuid4(), email="admin@elham.test", name="Admin", role="admin"
    )
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def mock_event_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_event_service] = lambda: service
    return service


def event_row(**overrides) -> dict:
    now = datetime.now(timezone.utc)
    row = {
        "id": uuid.uuid4(),
        "created_at": now,
        "updated_at": now,
        "title_en": "Hajj Seminar",
        "title_ar": "ندوة الحج",
        "slug": "hajj-seminar",
        "description_en": None,
        "description_ar": None,
        "short_description_en": None,
        "short_description_ar": None,
        "event_date": now,
        "end_date": None,
        "frequency_en": None,
        "frequency_ar": None,
        "location_en": None,
        "location_ar": None,
        "image_url": None,
        "gallery": [],
        "price": None,
        "currency": "SAR",
        "max_attendees": None,
        "is_featured": False,
        "is_active": True,
    }
    row.update(overrides)
    return row


class TestAdminResourceRouter:
    """Test suite for routers built by build_resource_router."""

    def test_list_events(self, client, mock_event_service) -> None:
        # Arrange
        mock_event_service.list_all.return_value = [event_row(), event_row(slug="umrah-night")]

        # Act
        response = client.get("/api/admin/events")

        # Assert
        assert response.status_code == 200
        assert [e["slug"] for e in response.json()] == ["hajj-seminar", "umrah-night"]
        mock_event_service.list_all.assert_called_once()

    def test_create_returns_201(self, client, mock_event_service) -> None:
        mock_event_service.create.return_value = event_row()

        response = client.post(
            "/api/admin/events", json={"titleEn": "Hajj Seminar", "titleAr": "ندوة الحج"}
        )

        assert response.status_code == 201
        payload = mock_event_service.create.call_args.args[0]
        assert payload.title_en == "Hajj Seminar"

    def test_not_found_maps_to_404(self, client, mock_event_service) -> None:
        event_id = uuid.uuid4()
        mock_event_service.get.side_effect = ResourceNotFoundError("Event", event_id)

        response = client.get(f"/api/admin/events/{event_id}")

        assert response.status_code == 404
        assert response.json() == {"detail": "Event not found"}

    def test_invalid_data_maps_to_400(self, client, mock_event_service) -> None:
        mock_event_service.update.side_effect = InvalidResourceDataError("Slug already exists")

        response = client.put(f"/api/admin/events/{uuid.uuid4()}", json={"slug": "taken"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Slug already exists"}

    def test_unexpected_error_is_generic_500(self, client, mock_event_service) -> None:
        mock_event_service.delete.side_effect = RuntimeError("connection reset by peer")

        response = client.delete(f"/api/admin/events/{uuid.uuid4()}")

        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to delete event"}

    def test_delete_returns_success(self, client, mock_event_service) -> None:
        mock_event_service.delete.return_value = None

        response = client.delete(f"/api/admin/events/{uuid.uuid4()}")

        assert response.status_code == 200
        assert response.json() == {"success": True}

    def test_malformed_id_is_rejected(self, client, app) -> None:
        service = AsyncMock()
        app.dependency_overrides[get_visa_service] = lambda: service

        response = client.get("/api/admin/visas/not-a-uuid")

        assert response.status_code == 422
        service.get.assert_not_called()


class TestPublicRouter:
    """Test suite for public routes with a mocked catalog."""

    def test_testimonials(self, client, app) -> None:
        catalog = AsyncMock()
        catalog.list_testimonials.return_value = [
            PublicTestimonial(id=uuid.uuid4(), name="Ali", content="Great", work="", rating=5)
        ]
        app.dependency_overrides[get_public_catalog_service] = lambda: catalog

        response = client.get("/api/public/testimonials", params={"locale": "ar"})

        assert response.status_code == 200
        assert response.json()[0]["name"] == "Ali"

    def test_unexpected_error_hides_details(self, client, app) -> None:
        catalog = AsyncMock()
        catalog.list_visas.side_effect = RuntimeError("password=hunter2")
        app.dependency_overrides[get_public_catalog_service] = lambda: catalog

        response = client.get("/api/public/visas")

        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to fetch visas"}
        assert "hunter2" not in response.text
