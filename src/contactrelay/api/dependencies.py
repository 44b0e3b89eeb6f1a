"""FastAPI dependencies resolving objects built at startup."""

from __future__ import annotations

from fastapi import HTTPException, Request

from contactrelay.application.use_cases import RelayContactUseCase
from contactrelay.infrastructure.settings import Settings


def get_relay_use_case(request: Request) -> RelayContactUseCase:
    use_case = getattr(request.app.state, "relay_use_case", None)
    if use_case is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    return use_case


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
