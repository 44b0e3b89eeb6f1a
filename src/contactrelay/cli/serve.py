"""Run the contact relay API under uvicorn."""

from __future__ import annotations

import argparse

import uvicorn
from loguru import logger

from contactrelay.infrastructure import configure_logging, get_settings


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Contact relay API server")
    parser.add_argument("--host", default=settings.api_host)
    parser.add_argument("--port", type=int, default=settings.api_port)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the contact-relay command."""
    settings = get_settings()
    configure_logging(settings.log_level)
    args = parse_args(argv)

    logger.info(f"Server running on port {args.port}")
    uvicorn.run(
        "contactrelay.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
