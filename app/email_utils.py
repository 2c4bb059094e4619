"""
Small SMTP mailer used for verification and password reset links.
"""
from __future__ import annotations

import logging
import smtplib
from email.mime.text import MIMEText

from core.config import Settings

log = logging.getLogger(__name__)


def _effective_from(email_from: str | None, email_user: str | None, smtp_server: str) -> str:
    # Gmail rewrites or blocks a From that differs from the authenticated user.
    if "gmail" in (smtp_server or "").lower() and email_user:
        return email_user
    return email_from or email_user or "noreply@safar-travels.com"


class SmtpMailer:
    def __init__(self, settings: Settings):
        self.email_user = settings.email_user
        self.email_password = settings.email_password
        self.smtp_server = settings.smtp_server
        self.smtp_port = settings.smtp_port
        self.email_from = _effective_from(settings.email_from, settings.email_user, settings.smtp_server)

    def send(self, to_email: str, subject: str, body: str) -> None:
        if not (self.email_user and self.email_password):
            raise RuntimeError("Email credentials not configured. Set EMAIL_USER and EMAIL_PASSWORD.")

        msg = MIMEText(body)
        msg["Subject"] = subject
        msg["From"] = self.email_from
        msg["To"] = to_email

        with smtplib.SMTP(self.smtp_server, self.smtp_port) as server:
            server.starttls()
            server.login(self.email_user, self.email_password)
            server.sendmail(self.email_from, [to_email], msg.as_string())
        log.info("Sent %r to %s", subject, to_email)


__all__ = ["SmtpMailer"]
