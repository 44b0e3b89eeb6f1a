"""Domain models for the contact relay."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class RelayOutcome(str, Enum):
    """Terminal outcomes of a relay attempt."""

    SENT = "sent"
    REJECTED = "rejected"
    CAPTCHA_FAILED = "captcha_failed"
    FAILED = "failed"


@dataclass(frozen=True)
class Submission:
    """A contact form submission. Lives for a single request only."""

    email: str | None
    message: str | None
    token: str | None = None
    remote_ip: str | None = None

    @property
    def has_token(self) -> bool:
        return bool(self.token)


@dataclass(frozen=True)
class OutboundEmail:
    """Email handed to a mail sender."""

    sender: str
    recipient: str
    reply_to: str
    subject: str
    text: str
    html: str


@dataclass(frozen=True)
class RelayResult:
    """Result of handling a submission, mapped 1:1 onto the HTTP response."""

    outcome: RelayOutcome
    status_code: int
    message: str | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.outcome is RelayOutcome.SENT

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": self.success}
        if self.message is not None:
            payload["message"] = self.message
        if self.error is not None:
            payload["error"] = self.error
        return payload

    @classmethod
    def sent(cls, message: str) -> RelayResult:
        return cls(outcome=RelayOutcome.SENT, status_code=200, message=message)

    @classmethod
    def rejected(cls, error: str) -> RelayResult:
        return cls(outcome=RelayOutcome.REJECTED, status_code=400, error=error)

    @classmethod
    def captcha_failed(cls, error: str) -> RelayResult:
        return cls(outcome=RelayOutcome.CAPTCHA_FAILED, status_code=400, error=error)

    @classmethod
    def failed(cls, error: str) -> RelayResult:
        return cls(outcome=RelayOutcome.FAILED, status_code=500, error=error)
