"""
End-to-end tests for POST /api/inquiries.

System role: Verification of the inquiry notifier over HTTP
"""

from unittest.mock import MagicMock

import pytest

from elham.api.deps.dependencies import get_mailer
from elham.core.exceptions import MailDeliveryError

INQUIRY = {
    "type": "package",
    "referenceId": "pkg-7",
    "referenceName": "Ramadan Umrah",
    "name": "Fatima",
    "email": "fatima@example.com",
    "message": "Is the package available for 4 people?",
    "travelers": 4,
    "locale": "ar",
}


@pytest.fixture
def mock_mailer(app) -> MagicMock:
    mailer = MagicMock()
    mailer.operator_address = "ops@elham.test"
    app.dependency_overrides[get_mailer] = lambda: mailer
    return mailer


class TestSubmitInquiry:
    """Test suite for POST /api/inquiries."""

    @pytest.mark.asyncio
    async def test_success_sends_both_emails(self, client, mock_mailer) -> None:
        response = await client.post("/api/inquiries", json=INQUIRY)

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        operator_email, customer_email = mock_mailer.send.call_args.args
        assert operator_email.subject == "[PACKAGE Inquiry] Ramadan Umrah"
        assert customer_email.to == "fatima@example.com"
        assert "Travelers: 4" in operator_email.text

    @pytest.mark.asyncio
    async def test_invalid_json(self, client, mock_mailer) -> None:
        response = await client.post(
            "/api/inquiries",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid JSON"}

    @pytest.mark.asyncio
    async def test_non_object_body(self, client, mock_mailer) -> None:
        response = await client.post("/api/inquiries", json=["a", "b"])

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid JSON"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["name", "email", "message"])
    async def test_missing_required_field(self, client, mock_mailer, missing) -> None:
        payload = {key: value for key, value in INQUIRY.items() if key != missing}

        response = await client.post("/api/inquiries", json=payload)

        assert response.status_code == 400
        assert response.json() == {"detail": "Missing required fields"}
        mock_mailer.send.assert_not_called()

    @pytest.mark.asyncio
    async def test_mail_not_configured(self, client, app) -> None:
        app.dependency_overrides[get_mailer] = lambda: None

        response = await client.post("/api/inquiries", json=INQUIRY)

        assert response.status_code == 500
        assert response.json() == {"detail": "Email service is not configured on the server."}

    @pytest.mark.asyncio
    async def test_delivery_failure(self, client, mock_mailer) -> None:
        mock_mailer.send.side_effect = MailDeliveryError("Failed to send emails")

        response = await client.post("/api/inquiries", json=INQUIRY)

        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to send emails"}
