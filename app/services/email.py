"""
Operator notifications over SMTP (aiosmtplib, STARTTLS).

Background jobs report problems here instead of raising. Delivery is
best-effort: an unconfigured host or recipient, or any SMTP failure, is
logged and reported as False.
"""
import logging
from email.mime.text import MIMEText

import aiosmtplib

from app.core.config import settings

logger = logging.getLogger(__name__)


def _subject(subject: str) -> str:
    if settings.ENVIRONMENT == "production":
        return subject
    return f"[{settings.ENVIRONMENT}] {subject}"


async def send_email(subject: str, body: str) -> bool:
    """Email the operator (EMAIL_TO). Returns True once SMTP accepts the message."""
    if not settings.EMAIL_HOST or not settings.EMAIL_TO:
        logger.warning("send_email: EMAIL_HOST/EMAIL_TO not configured, dropping %r", subject)
        return False

    msg = MIMEText(body, "plain")
    msg["Subject"] = _subject(subject)
    msg["From"] = settings.EMAIL_FROM
    msg["To"] = settings.EMAIL_TO

    try:
        await aiosmtplib.send(
            msg,
            hostname=settings.EMAIL_HOST,
            port=settings.EMAIL_PORT,
            username=settings.EMAIL_USERNAME or None,
            password=settings.EMAIL_PASSWORD or None,
            start_tls=True,
        )
    except Exception:
        logger.exception("send_email: delivery of %r to %s failed", subject, settings.EMAIL_TO)
        return False

    logger.info("send_email: sent %r to %s", subject, settings.EMAIL_TO)
    return True
