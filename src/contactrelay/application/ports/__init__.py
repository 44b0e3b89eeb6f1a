from contactrelay.application.ports.captcha_verifier import CaptchaVerifier
from contactrelay.application.ports.mail_sender import MailSender

__all__ = ["CaptchaVerifier", "MailSender"]
