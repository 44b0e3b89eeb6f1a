from __future__ import annotations
from typing import Protocol
from contactrelay.domain.models import OutboundEmail


class MailSender(Protocol):
    name: str

    async def send(self, email: OutboundEmail) -> None: ...
