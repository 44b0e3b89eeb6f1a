"""Use case for relaying a contact form submission by email."""

from __future__ import annotations

import re

from loguru import logger

from contactrelay.application.compose import compose_email
from contactrelay.application.ports import CaptchaVerifier, MailSender
from contactrelay.domain.errors import (
    CaptchaRejectedError,
    SubmissionValidationError,
)
from contactrelay.domain.models import RelayResult, Submission

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MISSING_FIELDS_ERROR = "Email and message are required"
INVALID_EMAIL_ERROR = "Invalid email format"
CAPTCHA_FAILED_ERROR = "Captcha verification failed"
DELIVERY_FAILED_ERROR = "Failed to send email. Please try again later."
SENT_MESSAGE = "Email sent successfully"


def validate_submission(submission: Submission) -> None:
    """Raise SubmissionValidationError unless email and message are usable."""
    if not submission.email or not submission.message:
        raise SubmissionValidationError(MISSING_FIELDS_ERROR)

    if not EMAIL_PATTERN.fullmatch(submission.email):
        raise SubmissionValidationError(INVALID_EMAIL_ERROR)


class RelayContactUseCase:
    """
    Relay a contact form submission.

    Flow:
    1. Validate email and message (no external calls on failure)
    2. Verify the CAPTCHA token when a verifier is configured and a token was sent
    3. Compose the email and hand it to the mail sender
    4. Map the outcome onto a RelayResult
    """

    def __init__(
        self,
        mail_sender: MailSender,
        sender: str,
        recipient: str,
        captcha_verifier: CaptchaVerifier | None = None,
        escape_html: bool = True,
    ):
        self.mail_sender = mail_sender
        self.captcha_verifier = captcha_verifier
        self.sender = sender
        self.recipient = recipient
        self.escape_html = escape_html

    @property
    def captcha_enabled(self) -> bool:
        return self.captcha_verifier is not None

    async def handle(self, submission: Submission) -> RelayResult:
        """
        Handle a single submission.

        Args:
            submission: The inbound contact form payload

        Returns:
            RelayResult carrying the HTTP status and response payload
        """
        logger.info(
            f"Contact submission received from {submission.email!r} "
            f"(token {'present' if submission.has_token else 'missing'})"
        )

        try:
            validate_submission(submission)
        except SubmissionValidationError as e:
            logger.info(f"Submission rejected: {e}")
            return RelayResult.rejected(str(e))

        try:
            await self._verify_captcha(submission)
        except CaptchaRejectedError as e:
            return RelayResult.captcha_failed(str(e))
        except Exception as e:
            logger.exception(f"Captcha verification errored for {submission.email}: {e}")
            return RelayResult.failed(DELIVERY_FAILED_ERROR)

        email = compose_email(
            submission,
            sender=self.sender,
            recipient=self.recipient,
            escape_html=self.escape_html,
        )

        try:
            logger.info(f"Sending contact email via {self.mail_sender.name} to {email.recipient}")
            await self.mail_sender.send(email)
        except Exception as e:
            logger.exception(f"Failed to relay contact email from {submission.email}: {e}")
            return RelayResult.failed(DELIVERY_FAILED_ERROR)

        logger.info(f"Contact email from {submission.email} sent successfully")
        return RelayResult.sent(SENT_MESSAGE)

    async def _verify_captcha(self, submission: Submission) -> None:
        """Raise CaptchaRejectedError when the configured verifier refuses the token."""
        if self.captcha_verifier is None or not submission.has_token:
            return

        logger.debug("Verifying captcha token")
        ok = await self.captcha_verifier.verify(submission.token, remote_ip=submission.remote_ip)
        logger.info(f"Captcha verification result: {'success' if ok else 'failure'}")

        if not ok:
            raise CaptchaRejectedError(CAPTCHA_FAILED_ERROR)
