"""
Inquiry notifier.

Validates a customer inquiry, records it, and sends two emails: one to
the operator inbox (Reply-To set to the customer) and one localized
acknowledgement to the customer.

Dependencies: fastapi.concurrency, elham.boundary.email, elham.boundary.db.CRUD
System role: Inquiry use case orchestration
"""

import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from elham.boundary.db.CRUD.content_crud import contact_inquiry_crud
from elham.boundary.email.renderer import render_email
from elham.boundary.email.smtp_mailer import OutgoingEmail, SMTPMailer
from elham.core.exceptions import InvalidResourceDataError, MailNotConfiguredError
from elham.models.inquiry import InquiryRequest

logger = logging.getLogger(__name__)

ACK_SUBJECTS = {
    "en": "Thank you for contacting Elham",
    "ar": "شكراً لتواصلك مع شركة إلهام",
}


def _single_line(value: str) -> str:
    # Header values must not carry CR/LF.
    return " ".join(value.split())


def _meta_lines(inquiry: InquiryRequest) -> list[str]:
    return [
        f"{key}: {'' if value is None else value}"
        for key, value in inquiry.meta.items()
    ]


def compose_operator_email(inquiry: InquiryRequest, operator_address: str) -> OutgoingEmail:
    """
    Build the notification for the operator inbox.

    Args:
        inquiry: Validated inquiry
        operator_address: Company inbox

    Returns:
        OutgoingEmail with Reply-To pointing at the customer
    """
    context = {
        "inquiry": inquiry,
        "meta_lines": _meta_lines(inquiry),
        "phone": inquiry.full_phone,
        "lang": "en",
        "rtl": False,
    }
    return OutgoingEmail(
        to=operator_address,
        subject=_single_line(f"[{inquiry.type.upper()} Inquiry] {inquiry.reference_name or ''}"),
        text=render_email("operator_inquiry.txt", **context),
        html=render_email("operator_inquiry.html", **context),
        reply_to=inquiry.email,
    )


def compose_customer_email(inquiry: InquiryRequest) -> OutgoingEmail:
    """Build the acknowledgement sent to the customer in their locale."""
    rtl = inquiry.locale == "ar"
    context = {"inquiry": inquiry, "lang": inquiry.locale, "rtl": rtl}
    return OutgoingEmail(
        to=inquiry.email,
        subject=ACK_SUBJECTS[inquiry.locale],
        text=render_email("customer_ack.txt", **context),
        html=render_email("customer_ack.html", **context),
    )


class InquiryService:
    """Inquiry notifier orchestrator."""

    def __init__(self, db: AsyncSession, mailer: SMTPMailer | None) -> None:
        """
        Initialize inquiry service.

        Args:
            db: Async SQLAlchemy session
            mailer: SMTP transport, None when mail is not configured
        """
        self.db = db
        self.mailer = mailer

    async def submit(self, inquiry: InquiryRequest) -> None:
        """
        Record an inquiry and send both emails.

        Raises:
            InvalidResourceDataError: If name, email or message is missing
            MailNotConfiguredError: If SMTP credentials are absent
            MailDeliveryError: If the SMTP server fails
        """
        if not (inquiry.name and inquiry.email and inquiry.message):
            raise InvalidResourceDataError("Missing required fields")

        if self.mailer is None or not self.mailer.operator_address:
            logger.error("Email settings are not fully configured")
            raise MailNotConfiguredError("Email service is not configured on the server.")

        await self._record(inquiry)

        emails = (
            compose_operator_email(inquiry, self.mailer.operator_address),
            compose_customer_email(inquiry),
        )
        await run_in_threadpool(self.mailer.send, *emails)
        logger.info(
            "Inquiry notifications sent",
            extra={"inquiry_type": inquiry.type, "reference_id": inquiry.reference_id},
        )

    async def _record(self, inquiry: InquiryRequest) -> None:
        # Storing is best-effort; the customer still gets an answer by mail.
        try:
            await contact_inquiry_crud.create(
                self.db,
                type=inquiry.type,
                reference_id=inquiry.reference_id,
                reference_name=inquiry.reference_name,
                name=inquiry.name,
                email=inquiry.email,
                phone=inquiry.full_phone,
                nationality=inquiry.nationality,
                travelers=inquiry.travelers,
                message=inquiry.message,
                locale=inquiry.locale,
                meta=inquiry.meta,
            )
            await self.db.commit()
        except Exception as e:
            logger.warning("Failed to record inquiry", extra={"error": str(e)})
            await self.db.rollback()
