from __future__ import annotations

from contextlib import ExitStack
from dataclasses import dataclass, field

import pytest
from fastapi.testclient import TestClient

from contactrelay.api.main import create_app
from contactrelay.application.use_cases import RelayContactUseCase
from contactrelay.domain import OutboundEmail
from contactrelay.infrastructure.settings import Settings

SENDER = "owner@example.com"


@dataclass
class FakeMailSender:
    """Records every email; raises `error` instead when set."""

    name: str = "fake"
    error: Exception | None = None
    sent: list[OutboundEmail] = field(default_factory=list)

    async def send(self, email: OutboundEmail) -> None:
        if self.error is not None:
            raise self.error
        self.sent.append(email)


@dataclass
class FakeCaptchaVerifier:
    """Answers `result` for every token; raises `error` instead when set."""

    result: bool = True
    error: Exception | None = None
    calls: list[tuple[str, str | None]] = field(default_factory=list)

    async def verify(self, token: str, remote_ip: str | None = None) -> bool:
        self.calls.append((token, remote_ip))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def mail_sender() -> FakeMailSender:
    return FakeMailSender()


@pytest.fixture
def verifier() -> FakeCaptchaVerifier:
    return FakeCaptchaVerifier()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        email_user=SENDER,
        email_pass="app-password",
        recaptcha_secret_key=None,
    )


def make_use_case(mail_sender, verifier=None, escape_html=True) -> RelayContactUseCase:
    return RelayContactUseCase(
        mail_sender=mail_sender,
        captcha_verifier=verifier,
        sender=SENDER,
        recipient=SENDER,
        escape_html=escape_html,
    )


@pytest.fixture
def make_client(settings):
    """Build a TestClient around a use case wired with fakes."""
    with ExitStack() as stack:

        def _make(mail_sender, verifier=None) -> TestClient:
            app = create_app(settings=settings, relay_use_case=make_use_case(mail_sender, verifier))
            return stack.enter_context(TestClient(app))

        yield _make


@pytest.fixture
def build_use_case():
    return make_use_case
