"""Captcha verification adapters."""

from __future__ import annotations

from contactrelay.infrastructure.captcha.recaptcha import RecaptchaVerifier
from contactrelay.infrastructure.settings import Settings


def build_captcha_verifier(settings: Settings) -> RecaptchaVerifier | None:
    """Build the verifier, or None when no secret is configured."""
    if not settings.captcha_enabled:
        return None

    return RecaptchaVerifier(
        secret=settings.recaptcha_secret_key.get_secret_value(),
        verify_url=settings.recaptcha_verify_url,
        timeout=settings.http_timeout,
    )


__all__ = ["RecaptchaVerifier", "build_captcha_verifier"]
