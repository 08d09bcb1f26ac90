"""
FastAPI Application Entry Point for PokerSettle.

This module creates and configures the FastAPI application with:
- HTTP routes for hand evaluation, pot settlement and AI decisions
- Exception handlers mapping settlement errors to HTTP status codes
- CORS middleware for development
"""

import argparse
import logging
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pokersettle import __version__
from pokersettle.core.errors import InternalConsistencyError, InvalidInputSizeError
from pokersettle.server.routes import router

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("critical", "error", "warning", "info", "debug")

# Configure logging
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


async def invalid_input_size_handler(request: Request, exc: InvalidInputSizeError) -> JSONResponse:
    """Wrong card counts are the caller's fault."""
    return JSONResponse(
        status_code=400,
        content={"error": "invalid_input_size", "detail": str(exc)},
    )


async def internal_consistency_handler(request: Request, exc: InternalConsistencyError) -> JSONResponse:
    """A pot could not be paid out."""
    logger.error(f"Internal consistency error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "internal_consistency", "detail": str(exc)},
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="PokerSettle",
        description="Texas Hold'em hand evaluation, side pots and AI decisions",
        version=__version__,
    )

    # CORS middleware for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidInputSizeError, invalid_input_size_handler)
    app.add_exception_handler(InternalConsistencyError, internal_consistency_handler)

    app.include_router(router)

    logger.info(f"PokerSettle {__version__} application created")
    return app


# Create the application instance
app = create_app()


def build_parser() -> argparse.ArgumentParser:
    """Command line options for the server."""
    parser = argparse.ArgumentParser(description="PokerSettle settlement server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=LOG_LEVELS,
        help="Level for PokerSettle and uvicorn loggers",
    )
    return parser


def main(argv: Optional[List[str]] = None):
    """Run the server (for use as entry point)."""
    import uvicorn

    args = build_parser().parse_args(argv)

    # basicConfig already ran at import; only the level changes here
    logging.getLogger().setLevel(args.log_level.upper())
    logger.info(f"Starting PokerSettle on {args.host}:{args.port} (log level {args.log_level})")

    uvicorn.run(
        "pokersettle.server.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
