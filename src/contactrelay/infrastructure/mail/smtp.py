"""SMTP mail sender using account credentials (Gmail by default)."""

from __future__ import annotations

import asyncio
import smtplib
import ssl
from dataclasses import dataclass
from email.message import EmailMessage

from loguru import logger

from contactrelay.domain.errors import MailDeliveryError
from contactrelay.domain.models import OutboundEmail

SMTP_SSL_PORT = 465


@dataclass(frozen=True)
class SmtpConfig:
    host: str
    port: int
    username: str
    password: str
    use_tls: bool = True
    timeout: float = 30.0


def build_mime_message(email: OutboundEmail) -> EmailMessage:
    """multipart/alternative message with a plain-text and an HTML part."""
    msg = EmailMessage()
    msg["From"] = email.sender
    msg["To"] = email.recipient
    msg["Reply-To"] = email.reply_to
    msg["Subject"] = email.subject
    msg.set_content(email.text)
    msg.add_alternative(email.html, subtype="html")
    return msg


class SmtpMailSender:
    """Sends mail through an authenticated SMTP account."""

    name = "smtp"

    def __init__(self, cfg: SmtpConfig) -> None:
        self.cfg = cfg

    def _connect(self) -> smtplib.SMTP:
        if self.cfg.port == SMTP_SSL_PORT:
            return smtplib.SMTP_SSL(
                self.cfg.host,
                self.cfg.port,
                timeout=self.cfg.timeout,
                context=ssl.create_default_context(),
            )

        conn = smtplib.SMTP(self.cfg.host, self.cfg.port, timeout=self.cfg.timeout)
        if self.cfg.use_tls:
            conn.starttls(context=ssl.create_default_context())
        return conn

    def send_sync(self, email: OutboundEmail) -> None:
        msg = build_mime_message(email)
        try:
            with self._connect() as conn:
                conn.login(self.cfg.username, self.cfg.password)
                conn.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP delivery to {email.recipient} via {self.cfg.host} failed: {e}")
            raise MailDeliveryError(f"SMTP delivery failed: {e}", provider=self.name) from e

        logger.info(f"SMTP message accepted by {self.cfg.host} for {email.recipient}")

    async def send(self, email: OutboundEmail) -> None:
        # smtplib blocks; keep it off the event loop
        await asyncio.to_thread(self.send_sync, email)
