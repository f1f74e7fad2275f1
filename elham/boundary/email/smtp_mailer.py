"""
SMTP mail transport.

Builds multipart/alternative messages (plain text + HTML) and delivers
them over SMTP, with implicit TLS on port 465 and STARTTLS otherwise.

Dependencies: smtplib, email (stdlib)
System role: Outbound mail boundary for the inquiry notifier
"""

import logging
import smtplib
import ssl
from dataclasses import dataclass
from email.errors import MessageError
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr

from elham.configs.email import EmailSettings
from elham.core.exceptions import MailDeliveryError

logger = logging.getLogger(__name__)


@dataclass
class OutgoingEmail:
    """One message ready to send."""

    to: str
    subject: str
    text: str
    html: str
    reply_to: str | None = None


class SMTPMailer:
    """Blocking SMTP sender; call from a worker thread inside async code."""

    def __init__(self, settings: EmailSettings) -> None:
        """
        Initialize with SMTP settings.

        Args:
            settings: Host, port, credentials and sender addresses
        """
        self._settings = settings

    @property
    def operator_address(self) -> str | None:
        return self._settings.operator_address

    def build_message(self, email: OutgoingEmail) -> MIMEMultipart:
        """
        Build the MIME message for an OutgoingEmail.

        The plain text part comes first so clients that prefer HTML pick
        the last alternative.
        """
        message = MIMEMultipart("alternative")
        message["Subject"] = email.subject
        message["From"] = formataddr((self._settings.company_name, self._settings.from_address))
        message["To"] = email.to
        if email.reply_to:
            message["Reply-To"] = email.reply_to
        message.attach(MIMEText(email.text, "plain", "utf-8"))
        message.attach(MIMEText(email.html, "html", "utf-8"))
        return message

    def send(self, *emails: OutgoingEmail) -> None:
        """
        Deliver messages over one SMTP connection.

        Raises:
            MailDeliveryError: If connecting, authenticating or sending fails
        """
        settings = self._settings
        context = ssl.create_default_context()
        try:
            if settings.use_ssl:
                server = smtplib.SMTP_SSL(
                    settings.host, settings.port, timeout=settings.timeout, context=context
                )
            else:
                server = smtplib.SMTP(settings.host, settings.port, timeout=settings.timeout)
            with server:
                if not settings.use_ssl:
                    server.starttls(context=context)
                server.login(settings.user, settings.password)
                for email in emails:
                    server.send_message(self.build_message(email))
        except (smtplib.SMTPException, MessageError, OSError) as e:
            logger.error(
                "SMTP delivery failed",
                extra={"host": settings.host, "port": settings.port, "error": str(e)},
            )
            raise MailDeliveryError("Failed to send emails") from e

        logger.info("Emails sent", extra={"count": len(emails)})
