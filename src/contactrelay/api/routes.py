"""
API routes for the contact relay service.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from contactrelay.api.dependencies import get_app_settings, get_relay_use_case
from contactrelay.application.use_cases import RelayContactUseCase
from contactrelay.domain import Submission
from contactrelay.infrastructure.settings import Settings

router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class ContactRequest(BaseModel):
    """Request body for the contact form endpoint."""

    email: str | None = Field(None, description="Submitter's reply address")
    message: str | None = Field(None, description="Message body")
    token: str | None = Field(None, description="CAPTCHA response token (optional)")

    def to_submission(self, remote_ip: str | None = None) -> Submission:
        return Submission(
            email=self.email,
            message=self.message,
            token=self.token,
            remote_ip=remote_ip,
        )


class RelayResponse(BaseModel):
    """Response contract shared by every outcome."""

    success: bool
    message: str | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response with configured integrations."""

    status: str
    timestamp: str
    version: str
    services: dict[str, str]


# ============================================================================
# Health Endpoints
# ============================================================================


@router.get("/")
async def root() -> dict:
    """Static liveness response."""
    return {"message": "Backend is running!"}


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: Settings = Depends(get_app_settings),
    use_case: RelayContactUseCase = Depends(get_relay_use_case),
) -> HealthResponse:
    """Report which mail provider is wired and whether captcha is enforced."""
    services = {
        "mail": use_case.mail_sender.name,
        "captcha": "enabled" if use_case.captcha_enabled else "disabled",
    }
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.app_version,
        services=services,
    )


# ============================================================================
# Contact Endpoint
# ============================================================================


@router.post(
    "/send-email",
    response_model=RelayResponse,
    responses={400: {"model": RelayResponse}, 500: {"model": RelayResponse}},
)
async def send_email(
    request: Request,
    payload: ContactRequest | None = None,
    use_case: RelayContactUseCase = Depends(get_relay_use_case),
) -> JSONResponse:
    """
    Relay a contact form submission by email.

    - 200: email handed to the mail provider
    - 400: missing/invalid fields or captcha rejected
    - 500: verifier or mail provider failure
    """
    # an empty body is treated as {}
    payload = payload or ContactRequest()
    remote_ip = request.client.host if request.client else None
    result = await use_case.handle(payload.to_submission(remote_ip=remote_ip))
    return JSONResponse(status_code=result.status_code, content=result.to_payload())
