# menutext/sources/notifier.py
"""
Notifier: emails a formatted menu so it can be posted by mail.

The body starts with the "!m" marker the blog's post-by-email gateway
expects, followed by the formatted menu.
"""

from __future__ import annotations

import logging
import smtplib
from email.message import EmailMessage

from menutext.config import Settings

log = logging.getLogger(__name__)

BODY_MARKER = "!m\n\n"


class NotifyError(Exception):
    """Notification could not be built or delivered."""


def email_subject(name: str) -> str:
    return f"WesWings Menu - {name}"


def build_message(settings: Settings, name: str, contents: str) -> EmailMessage:
    if not settings.email_to:
        raise NotifyError("MENU_EMAIL_TO is not configured")
    msg = EmailMessage()
    msg["Subject"] = email_subject(name)
    msg["From"] = settings.email_from or settings.smtp_user or settings.email_to
    msg["To"] = settings.email_to
    msg.set_content(BODY_MARKER + contents)
    return msg


def send_menu_email(settings: Settings, name: str, contents: str) -> EmailMessage:
    msg = build_message(settings, name, contents)
    if not settings.smtp_host:
        raise NotifyError("SMTP_HOST is not configured")
    try:
        with smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=30) as smtp:
            smtp.starttls()
            if settings.smtp_user:
                smtp.login(settings.smtp_user, settings.smtp_password)
            smtp.send_message(msg)
    except (smtplib.SMTPException, OSError) as e:
        raise NotifyError(f"sending {msg['Subject']!r} failed: {e}") from e
    log.info("emailed: %s", msg["Subject"])
    return msg
