"""Resend HTTP API mail sender."""

from __future__ import annotations

import asyncio

import resend
from loguru import logger

from contactrelay.domain.errors import MailDeliveryError
from contactrelay.domain.models import OutboundEmail


class ResendMailSender:
    """Sends mail through the Resend API."""

    name = "resend"

    def __init__(self, api_key: str) -> None:
        if not api_key:
            raise ValueError("RESEND_API_KEY is required")
        resend.api_key = api_key

    @staticmethod
    def build_params(email: OutboundEmail) -> dict:
        return {
            "from": email.sender,
            "to": [email.recipient],
            "reply_to": email.reply_to,
            "subject": email.subject,
            "text": email.text,
            "html": email.html,
        }

    def send_sync(self, email: OutboundEmail) -> str | None:
        try:
            response = resend.Emails.send(self.build_params(email))
        except Exception as e:
            logger.error(f"Resend API error sending to {email.recipient}: {e}")
            raise MailDeliveryError(f"Resend delivery failed: {e}", provider=self.name) from e

        message_id = response.get("id") if isinstance(response, dict) else None
        logger.info(f"Resend accepted message for {email.recipient}, id={message_id}")
        return message_id

    async def send(self, email: OutboundEmail) -> None:
        await asyncio.to_thread(self.send_sync, email)
