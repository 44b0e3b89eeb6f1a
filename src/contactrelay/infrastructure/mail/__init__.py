"""Mail sender adapters."""

from __future__ import annotations

from contactrelay.application.ports import MailSender
from contactrelay.infrastructure.mail.resend_api import ResendMailSender
from contactrelay.infrastructure.mail.smtp import SmtpConfig, SmtpMailSender
from contactrelay.infrastructure.settings import Settings


def build_mail_sender(settings: Settings) -> MailSender:
    """Build the mail sender selected by MAIL_PROVIDER."""
    if settings.mail_provider == "resend":
        if settings.resend_api_key is None:
            raise ValueError("RESEND_API_KEY is required when MAIL_PROVIDER=resend")
        return ResendMailSender(settings.resend_api_key.get_secret_value())

    if not settings.email_user or settings.email_pass is None:
        raise ValueError("EMAIL_USER and EMAIL_PASS are required when MAIL_PROVIDER=smtp")

    return SmtpMailSender(
        SmtpConfig(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.email_user,
            password=settings.email_pass.get_secret_value(),
            use_tls=settings.smtp_use_tls,
        )
    )


__all__ = [
    "SmtpConfig",
    "SmtpMailSender",
    "ResendMailSender",
    "build_mail_sender",
]
