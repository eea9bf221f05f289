# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Account verification email over async SMTP.

The mailer signs a verification token, embeds it in a link to the
frontend verification page and sends plain text and HTML versions of
the message with aiosmtplib.

Configuration (via environment variables, see SMTPSettings):
- SMTP_HOST, SMTP_PORT, SMTP_USERNAME, SMTP_PASSWORD
- SMTP_USE_TLS, SMTP_FROM_EMAIL, SMTP_FROM_NAME
"""

import html
import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import make_msgid
from typing import Any

import aiosmtplib

from schoolhub.core.config.settings import SMTPSettings, VerificationSettings
from schoolhub.domains.auth.verification import VerificationTokenManager
from schoolhub.infrastructure.notifications.base import (
    AccountVerificationMailer,
    EmailDeliveryError,
)

logger = logging.getLogger(__name__)

SUBJECT = "Verify your account"


class SMTPAccountVerificationMailer(AccountVerificationMailer):
    """Account verification mailer backed by an SMTP server."""

    def __init__(
        self,
        smtp: SMTPSettings,
        verification: VerificationSettings,
        token_manager: VerificationTokenManager | None = None,
    ) -> None:
        """Initialize the mailer.

        Args:
            smtp: Mail server settings.
            verification: Verification link settings.
            token_manager: Token issuer; built from ``verification`` if omitted.
        """
        self._smtp = smtp
        self._verification = verification
        self._tokens = token_manager or VerificationTokenManager(verification)

    async def send_account_verification_email(
        self,
        user_id: Any,
        user_email: str | None,
    ) -> None:
        if not self._smtp.is_configured:
            raise EmailDeliveryError("SMTP configuration incomplete", recipient=user_email)

        if not user_email:
            raise EmailDeliveryError("No recipient email address")

        token = self._tokens.create_token(user_id=user_id, email=user_email)
        link = self._verification.build_link(token)
        message = self._build_email_message(user_email, link)

        try:
            await aiosmtplib.send(
                message,
                hostname=self._smtp.host,
                port=self._smtp.port,
                username=self._smtp.username,
                password=self._smtp.password.get_secret_value(),
                start_tls=self._smtp.use_tls,
                timeout=self._smtp.timeout,
            )
        except aiosmtplib.SMTPException as e:
            raise EmailDeliveryError(
                f"SMTP error: {str(e)}",
                recipient=user_email,
                original_error=e,
            ) from e

        logger.info("Verification email sent to %s for user %s", user_email, user_id)

    def _build_email_message(self, recipient: str, link: str) -> MIMEMultipart:
        """Build the MIME message with plain text and HTML parts."""
        message = MIMEMultipart("alternative")
        message["From"] = f"{self._smtp.from_name} <{self._smtp.from_email}>"
        message["To"] = recipient
        message["Subject"] = SUBJECT
        message["Message-ID"] = make_msgid()

        message.attach(MIMEText(self._build_plain_text(link), "plain", "utf-8"))
        message.attach(MIMEText(self._build_html(link), "html", "utf-8"))
        return message

    def _build_plain_text(self, link: str) -> str:
        hours = self._verification.token_expire_hours
        lines = [
            SUBJECT,
            "=" * len(SUBJECT),
            "",
            "Your student account has been created.",
            "Open the link below to verify your email address and set your password:",
            "",
            link,
            "",
            f"The link expires in {hours} hours.",
            "",
            "---",
            f"This message was sent by {self._smtp.from_name}.",
        ]
        return "\n".join(lines)

    def _build_html(self, link: str) -> str:
        hours = self._verification.token_expire_hours
        href = html.escape(link, quote=True)
        sender = html.escape(self._smtp.from_name)

        body = f"""
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto,
             'Helvetica Neue', Arial, sans-serif; line-height: 1.6;
             color: #1F2937; margin: 0; padding: 0; background-color: #F3F4F6;">
    <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
        <div style="background-color: white; border-radius: 8px; padding: 32px;">
            <h1 style="color: #4F46E5; font-size: 24px; margin: 0 0 24px 0;">
                {SUBJECT}
            </h1>
            <p style="margin: 0 0 16px 0;">
                Your student account has been created. Verify your email
                address to finish setting it up.
            </p>
            <div style="margin: 24px 0;">
                <a href="{href}"
                   style="background-color: #4F46E5; color: white;
                          padding: 12px 24px; text-decoration: none;
                          border-radius: 6px; font-weight: 500;">
                    Verify account
                </a>
            </div>
            <p style="font-size: 12px; color: #9CA3AF; margin: 0;">
                The link expires in {hours} hours. Sent by {sender}.
            </p>
        </div>
    </div>
</body>
</html>
        """
        return body.strip()
