"""reCAPTCHA-compatible token verifier."""

from __future__ import annotations

import httpx
from loguru import logger

from contactrelay.domain.errors import CaptchaVerificationError
from contactrelay.infrastructure.settings import RECAPTCHA_VERIFY_URL


class RecaptchaVerifier:
    """
    Verifies CAPTCHA tokens against a siteverify endpoint.

    Google reCAPTCHA and Cloudflare Turnstile share the same contract:
    POST form fields `secret`, `response` and optionally `remoteip`, and get
    back JSON with a boolean `success` plus `error-codes`.
    """

    def __init__(
        self,
        secret: str,
        verify_url: str = RECAPTCHA_VERIFY_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not secret:
            raise ValueError("Captcha secret is required")

        self.secret = secret
        self.verify_url = verify_url
        self.timeout = timeout
        self._transport = transport

    async def verify(self, token: str, remote_ip: str | None = None) -> bool:
        """Return the verifier's success flag for `token`."""
        if not token:
            logger.warning("No captcha token provided")
            return False

        payload = {"secret": self.secret, "response": token}
        if remote_ip:
            payload["remoteip"] = remote_ip

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.post(self.verify_url, data=payload)
        except httpx.TimeoutException as e:
            logger.error("Captcha verification timeout")
            raise CaptchaVerificationError("Captcha verification timed out") from e
        except httpx.HTTPError as e:
            logger.error(f"Captcha verification network error: {e}")
            raise CaptchaVerificationError(f"Captcha verification request failed: {e}") from e

        if response.status_code != 200:
            logger.error(f"Captcha API returned status {response.status_code}: {response.text[:200]}")
            raise CaptchaVerificationError(f"Captcha API error: {response.status_code}")

        try:
            result = response.json()
        except ValueError as e:
            raise CaptchaVerificationError("Captcha API returned invalid JSON") from e

        if result.get("success") is True:
            logger.info("Captcha token verified successfully")
            return True

        logger.warning(f"Captcha verification failed: {result.get('error-codes', [])}")
        return False
