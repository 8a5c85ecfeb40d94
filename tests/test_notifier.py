"""
Notifier tests with a fake SMTP server.
"""

import smtplib
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

import menutext.sources.notifier as notifier
from menutext.config import Settings
from menutext.sources.notifier import NotifyError, build_message, email_subject, send_menu_email


class FakeSMTP:
    instances = []

    def __init__(self, host, port, timeout=None):
        self.host, self.port = host, port
        self.started_tls = False
        self.logged_in = None
        self.sent = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        self.started_tls = True

    def login(self, user, password):
        self.logged_in = (user, password)

    def send_message(self, msg):
        self.sent.append(msg)


class FailingSMTP(FakeSMTP):
    def send_message(self, msg):
        raise smtplib.SMTPRecipientsRefused({})


@pytest.fixture()
def settings():
    return Settings(
        email_to="menus@example.com",
        email_from="bot@example.com",
        smtp_host="smtp.example.com",
        smtp_port=587,
        smtp_user="bot",
        smtp_password="secret",
    )


class TestMessage:

    def test_subject(self):
        assert email_subject("Monday") == "WesWings Menu - Monday"

    def test_body_marker(self, settings):
        msg = build_message(settings, "Monday", "### Lunch\n\n")
        assert msg["Subject"] == "WesWings Menu - Monday"
        assert msg["To"] == "menus@example.com"
        assert msg.get_content().startswith("!m\n\n### Lunch")

    def test_missing_recipient(self):
        with pytest.raises(NotifyError):
            build_message(Settings(email_to=""), "Monday", "x")


class TestSend:

    def test_sends_with_tls_and_login(self, settings, monkeypatch):
        FakeSMTP.instances.clear()
        monkeypatch.setattr(notifier.smtplib, "SMTP", FakeSMTP)
        send_menu_email(settings, "Monday", "### Lunch\n\n")
        smtp = FakeSMTP.instances[-1]
        assert (smtp.host, smtp.port) == ("smtp.example.com", 587)
        assert smtp.started_tls
        assert smtp.logged_in == ("bot", "secret")
        assert smtp.sent[0]["Subject"] == "WesWings Menu - Monday"

    def test_smtp_failure_wrapped(self, settings, monkeypatch):
        monkeypatch.setattr(notifier.smtplib, "SMTP", FailingSMTP)
        with pytest.raises(NotifyError):
            send_menu_email(settings, "Monday", "x")
