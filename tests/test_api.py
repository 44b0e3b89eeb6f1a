"""HTTP tests for the contact relay API using fakes for the outbound calls."""

from __future__ import annotations

from fastapi.testclient import TestClient

from contactrelay.api.main import create_app

from .conftest import FakeCaptchaVerifier, FakeMailSender


def test_root_health(make_client, mail_sender):
    client = make_client(mail_sender)

    r = client.get("/")

    assert r.status_code == 200
    assert r.json() == {"message": "Backend is running!"}


def test_health_reports_services(make_client, mail_sender, verifier):
    client = make_client(mail_sender, verifier)

    r = client.get("/health")

    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "healthy"
    assert data["services"] == {"mail": "fake", "captcha": "enabled"}


def test_send_email_success(make_client, mail_sender):
    client = make_client(mail_sender)

    r = client.post("/send-email", json={"email": "a@example.com", "message": "hello"})

    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Email sent successfully"}
    assert len(mail_sender.sent) == 1
    assert mail_sender.sent[0].reply_to == "a@example.com"
    assert "hello" in mail_sender.sent[0].text


def test_send_email_missing_fields(make_client, mail_sender):
    client = make_client(mail_sender)

    r = client.post("/send-email", json={"email": "a@example.com"})

    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Email and message are required"}
    assert mail_sender.sent == []


def test_send_email_invalid_email(make_client, mail_sender):
    client = make_client(mail_sender)

    r = client.post("/send-email", json={"email": "a@b", "message": "hello"})

    assert r.status_code == 400
    assert r.json()["error"] == "Invalid email format"


def test_send_email_captcha_rejected(make_client, mail_sender):
    verifier = FakeCaptchaVerifier(result=False)
    client = make_client(mail_sender, verifier)

    r = client.post("/send-email", json={"email": "a@example.com", "message": "hello", "token": "t"})

    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Captcha verification failed"}
    assert len(verifier.calls) == 1
    assert mail_sender.sent == []


def test_send_email_delivery_failure(make_client):
    sender = FakeMailSender(error=ConnectionError("smtp.gmail.com refused connection"))
    client = make_client(sender)

    r = client.post("/send-email", json={"email": "a@example.com", "message": "hello"})

    assert r.status_code == 500
    body = r.json()
    assert body == {"success": False, "error": "Failed to send email. Please try again later."}
    assert "refused" not in r.text


def test_malformed_json_is_bad_request(make_client, mail_sender):
    client = make_client(mail_sender)

    r = client.post(
        "/send-email",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Invalid request body"}
    assert mail_sender.sent == []


def test_wrong_field_type_is_bad_request(make_client, mail_sender):
    client = make_client(mail_sender)

    r = client.post("/send-email", json={"email": 42, "message": "hello"})

    assert r.status_code == 400
    assert mail_sender.sent == []


def test_cors_preflight_allows_post(make_client, mail_sender):
    client = make_client(mail_sender)

    r = client.options(
        "/send-email",
        headers={
            "Origin": "https://portfolio.example.com",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert r.status_code == 200
    assert "POST" in r.headers["access-control-allow-methods"]


def test_empty_body_reports_missing_fields(make_client, mail_sender):
    client = make_client(mail_sender)

    r = client.post("/send-email")

    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Email and message are required"}
    assert mail_sender.sent == []


class ExplodingUseCase:
    """Use case whose handler fails outside its own error mapping."""

    mail_sender = FakeMailSender()
    captcha_enabled = False

    async def handle(self, submission):
        raise RuntimeError("database password is hunter2")


def test_unhandled_error_returns_generic_500(settings):
    app = create_app(settings=settings, relay_use_case=ExplodingUseCase())

    with TestClient(app, raise_server_exceptions=False) as client:
        r = client.post("/send-email", json={"email": "a@example.com", "message": "hello"})

    assert r.status_code == 500
    assert r.json() == {"success": False, "error": "Internal server error"}
    assert "hunter2" not in r.text
