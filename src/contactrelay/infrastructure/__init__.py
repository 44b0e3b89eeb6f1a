"""Infrastructure layer - external services and configuration."""

from contactrelay.infrastructure.captcha import RecaptchaVerifier, build_captcha_verifier
from contactrelay.infrastructure.logging_setup import configure_logging
from contactrelay.infrastructure.mail import (
    ResendMailSender,
    SmtpConfig,
    SmtpMailSender,
    build_mail_sender,
)
from contactrelay.infrastructure.settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "configure_logging",
    # Captcha
    "RecaptchaVerifier",
    "build_captcha_verifier",
    # Mail
    "SmtpConfig",
    "SmtpMailSender",
    "ResendMailSender",
    "build_mail_sender",
]
