"""Outgoing account emails."""

from __future__ import annotations

import asyncio
import logging
from email.mime.text import MIMEText

import aiosmtplib
from flask import current_app

logger = logging.getLogger(__name__)


def _build_message(recipient: str, code: str) -> MIMEText:
    body = (
        "Welcome to the cake shop!\n\n"
        f"Your verification code is {code}.\n"
        "Enter it in the app to activate your account.\n"
    )
    message = MIMEText(body, "plain", "utf-8")
    message["Subject"] = "Verify your account"
    message["From"] = current_app.config.get("MAIL_SENDER", "no-reply@cakes.local")
    message["To"] = recipient
    return message


def send_verification_code(recipient: str, code: str) -> bool:
    """Email ``code`` to ``recipient``.

    Without ``MAIL_SERVER`` configured the code is only logged. Returns True
    when a message was handed to the SMTP server.
    """

    config = current_app.config
    server = config.get("MAIL_SERVER")
    if not server:
        logger.info("MAIL_SERVER not configured; verification code for %s is %s", recipient, code)
        return False

    message = _build_message(recipient, code)
    try:
        # Views are synchronous, so each send runs its own event loop.
        asyncio.run(
            aiosmtplib.send(
                message,
                hostname=server,
                port=int(config.get("MAIL_PORT", 587)),
                username=config.get("MAIL_USERNAME") or None,
                password=config.get("MAIL_PASSWORD") or None,
                start_tls=bool(config.get("MAIL_USE_TLS", True)),
                timeout=10,
            )
        )
    except (aiosmtplib.SMTPException, OSError):
        logger.exception("Failed to send verification email to %s", recipient)
        return False

    logger.info("Verification email sent to %s", recipient)
    return True
