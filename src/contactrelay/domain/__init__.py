"""Domain models and errors."""

from contactrelay.domain.errors import (
    CaptchaRejectedError,
    CaptchaVerificationError,
    ContactRelayError,
    MailDeliveryError,
    SubmissionValidationError,
)
from contactrelay.domain.models import (
    OutboundEmail,
    RelayOutcome,
    RelayResult,
    Submission,
)

__all__ = [
    "Submission",
    "OutboundEmail",
    "RelayOutcome",
    "RelayResult",
    "ContactRelayError",
    "SubmissionValidationError",
    "CaptchaRejectedError",
    "CaptchaVerificationError",
    "MailDeliveryError",
]
