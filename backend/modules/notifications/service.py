"""
SMTP notification sender.

Builds plain-text messages and hands them to an SMTP server. smtplib is
blocking, so each send runs in a worker thread.
"""

import asyncio
import logging
import smtplib
import ssl
from email.message import EmailMessage
from typing import Optional

from shared.config import Settings

from .exceptions import NotificationDeliveryError
from .interfaces import INotificationSender

logger = logging.getLogger(__name__)

WELCOME_SUBJECT = "Welcome 🎉"
WELCOME_TEXT = "Hello {username}, your registration was successful!"


class EmailNotificationSender(INotificationSender):
    """Sends notifications as email through the configured SMTP server."""

    def __init__(self, settings: Settings, timeout: float = 10.0):
        self._settings = settings
        self._timeout = timeout

    async def send_welcome(self, email: str, username: str) -> None:
        if not self._settings.smtp_enabled:
            logger.warning("SMTP disabled, skipping welcome email to %s", email)
            return

        message = self._create_message(
            to_email=email,
            subject=WELCOME_SUBJECT,
            text_body=WELCOME_TEXT.format(username=username),
        )
        await asyncio.to_thread(self._send, email, message)

    def _create_message(self, to_email: str, subject: str, text_body: str) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self._settings.smtp_from_email or self._settings.smtp_user
        msg["To"] = to_email
        msg.set_content(text_body)
        return msg

    def _password(self) -> Optional[str]:
        if self._settings.smtp_password is None:
            return None
        return self._settings.smtp_password.get_secret_value()

    def _send(self, to_email: str, message: EmailMessage) -> None:
        settings = self._settings
        if not settings.smtp_host:
            raise NotificationDeliveryError(to_email, "SMTP host not configured")

        try:
            if settings.smtp_use_tls and not settings.smtp_starttls:
                # Implicit TLS (port 465)
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(
                    settings.smtp_host,
                    settings.smtp_port,
                    context=context,
                    timeout=self._timeout,
                ) as server:
                    self._login_and_send(server, message)
            else:
                # STARTTLS (port 587) or plain
                with smtplib.SMTP(
                    settings.smtp_host,
                    settings.smtp_port,
                    timeout=self._timeout,
                ) as server:
                    if settings.smtp_starttls:
                        server.starttls(context=ssl.create_default_context())
                    self._login_and_send(server, message)
        # ValueError covers UnicodeEncodeError from login with a non-ASCII password
        except (smtplib.SMTPException, OSError, ValueError) as e:
            raise NotificationDeliveryError(to_email, str(e)) from e

        logger.info("Welcome email sent to %s", to_email)

    def _login_and_send(self, server: smtplib.SMTP, message: EmailMessage) -> None:
        if self._settings.smtp_user:
            server.login(self._settings.smtp_user, self._password() or "")
        server.send_message(message)
