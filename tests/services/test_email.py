from app.core.config import settings
from app.services import email as email_module


async def test_send_email_skipped_when_unconfigured(monkeypatch):
    monkeypatch.setattr(settings, "EMAIL_HOST", "")
    assert await email_module.send_email("Subject", "Body") is False


async def test_send_email_reports_smtp_failure(monkeypatch):
    monkeypatch.setattr(settings, "EMAIL_HOST", "smtp.example.com")
    monkeypatch.setattr(settings, "EMAIL_TO", "ops@example.com")

    async def failing_send(*args, **kwargs):
        raise ConnectionRefusedError("no smtp here")

    monkeypatch.setattr(email_module.aiosmtplib, "send", failing_send)
    assert await email_module.send_email("Subject", "Body") is False


async def test_send_email_tags_non_production_subject(monkeypatch):
    monkeypatch.setattr(settings, "EMAIL_HOST", "smtp.example.com")
    monkeypatch.setattr(settings, "EMAIL_TO", "ops@example.com")
    monkeypatch.setattr(settings, "ENVIRONMENT", "staging")
    sent = []

    async def fake_send(msg, **kwargs):
        sent.append((msg, kwargs))

    monkeypatch.setattr(email_module.aiosmtplib, "send", fake_send)
    assert await email_module.send_email("Audit", "Body") is True

    msg, kwargs = sent[0]
    assert msg["Subject"] == "[staging] Audit"
    assert msg["To"] == "ops@example.com"
    assert kwargs["hostname"] == "smtp.example.com"
    assert kwargs["username"] is None
