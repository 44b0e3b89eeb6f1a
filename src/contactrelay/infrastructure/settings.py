"""Application settings using Pydantic Settings for configuration management."""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

RECAPTCHA_VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Contact Relay"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=5000, validation_alias=AliasChoices("port", "api_port"))
    cors_origins: list[str] = ["*"]

    # Mail delivery
    mail_provider: Literal["smtp", "resend"] = "smtp"
    email_user: str | None = None
    email_pass: SecretStr | None = None
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_use_tls: bool = True
    resend_api_key: SecretStr | None = None
    mail_from: str | None = None
    mail_to: str | None = None
    escape_html: bool = True

    # Captcha verification
    recaptcha_secret_key: SecretStr | None = None
    recaptcha_verify_url: str = RECAPTCHA_VERIFY_URL
    http_timeout: float = 10.0

    @computed_field
    @property
    def sender_address(self) -> str | None:
        """Fixed sender; must be an address the mail account may send as."""
        return self.mail_from or self.email_user

    @computed_field
    @property
    def recipient_address(self) -> str | None:
        """Inbox receiving contact messages, the sender's own by default."""
        return self.mail_to or self.sender_address

    @computed_field
    @property
    def captcha_enabled(self) -> bool:
        return self.recaptcha_secret_key is not None and bool(
            self.recaptcha_secret_key.get_secret_value()
        )

    def config_report(self) -> dict[str, bool]:
        """Which credentials are present, without revealing their values."""
        return {
            "EMAIL_USER": bool(self.email_user),
            "EMAIL_PASS": self.email_pass is not None and bool(self.email_pass.get_secret_value()),
            "RESEND_API_KEY": self.resend_api_key is not None
            and bool(self.resend_api_key.get_secret_value()),
            "RECAPTCHA_SECRET_KEY": self.captcha_enabled,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
