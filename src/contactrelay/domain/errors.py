"""Errors raised while relaying a submission."""

from __future__ import annotations


class ContactRelayError(Exception):
    """Base class for contact relay errors."""


class SubmissionValidationError(ContactRelayError):
    """Submission is missing fields or the email is malformed."""


class CaptchaRejectedError(ContactRelayError):
    """The verifier reported the CAPTCHA token as invalid."""


class CaptchaVerificationError(ContactRelayError):
    """The verifier could not be reached or returned an unusable reply."""


class MailDeliveryError(ContactRelayError):
    """The mail provider failed to accept the message."""

    def __init__(self, message: str, provider: str | None = None) -> None:
        super().__init__(message)
        self.provider = provider
