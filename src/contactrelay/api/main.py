"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from contactrelay.application.use_cases import RelayContactUseCase
from contactrelay.infrastructure import (
    Settings,
    build_captcha_verifier,
    build_mail_sender,
    get_settings,
)


def build_relay_use_case(settings: Settings) -> RelayContactUseCase:
    """Construct the use case and its collaborators once for the process."""
    mail_sender = build_mail_sender(settings)
    captcha_verifier = build_captcha_verifier(settings)

    if not settings.sender_address:
        raise ValueError("MAIL_FROM or EMAIL_USER must be set")

    return RelayContactUseCase(
        mail_sender=mail_sender,
        captcha_verifier=captcha_verifier,
        sender=settings.sender_address,
        recipient=settings.recipient_address,
        escape_html=settings.escape_html,
    )


def log_config_check(settings: Settings) -> None:
    logger.info("Environment check:")
    for name, present in settings.config_report().items():
        logger.info(f"- {name}: {'✓' if present else '✗'}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    log_config_check(settings)

    if getattr(app.state, "relay_use_case", None) is None:
        try:
            app.state.relay_use_case = build_relay_use_case(settings)
        except ValueError as e:
            logger.error(f"Contact relay misconfigured: {e}")
            raise

    use_case: RelayContactUseCase = app.state.relay_use_case
    logger.info(
        f"Mail provider: {use_case.mail_sender.name}, "
        f"captcha: {'enabled' if use_case.captcha_enabled else 'disabled'}"
    )

    yield

    logger.info("Shutdown complete")


async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"success": False, "error": "Invalid request body"})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(f"Server error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"success": False, "error": "Internal server error"})


def create_app(
    settings: Settings | None = None,
    relay_use_case: RelayContactUseCase | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Relays contact form submissions by email",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.relay_use_case = relay_use_case

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, invalid_body_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    from contactrelay.api.routes import router

    app.include_router(router)

    return app


# Create app instance
app = create_app()
