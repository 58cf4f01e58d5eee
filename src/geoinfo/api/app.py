"""FastAPI application for the geoinfo service."""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from geoinfo import __version__
from geoinfo.api.routes import health, info
from geoinfo.core.context import AppContext
from geoinfo.core.errors import (
    AddressError,
    AddressNotFoundError,
    GeoInfoError,
    InvalidAddressError,
)
from geoinfo.core.logging import configure_logging
from geoinfo.core.models.config import Config

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = structlog.get_logger(__name__)

# Config file used by the uvicorn factory entry point
CONFIG_ENV_VAR = "GEOINFO_CONFIG_FILE"


def error_status(error: GeoInfoError) -> int:
    """HTTP status code for a resolution failure."""
    if isinstance(error, (AddressError, InvalidAddressError)):
        return 400
    if isinstance(error, AddressNotFoundError):
        return 404
    return 500


async def geoinfo_error_handler(request: Request, exc: GeoInfoError) -> PlainTextResponse:
    """Log a resolution failure and answer with a plain text error."""
    status_code = error_status(exc)
    logger.warning(
        "Request resolution failed",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        status_code=status_code,
    )
    return PlainTextResponse(f"ERROR: {exc}\n", status_code=status_code)


def create_app(context: AppContext) -> FastAPI:
    """Create FastAPI application.

    Args:
        context: Application context; it is closed when the app shuts down.

    Returns:
        Configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting geoinfo API", addr=context.config.addr)
        yield
        logger.info("Shutting down geoinfo API")
        context.close()

    app = FastAPI(
        title="geoinfo",
        description="IP address geolocation",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.context = context

    app.add_exception_handler(GeoInfoError, geoinfo_error_handler)

    app.include_router(health.router, tags=["health"])
    app.include_router(info.router, tags=["info"])

    logger.info("FastAPI app created", cache_size=context.cache.capacity)
    return app


def create_app_from_env() -> FastAPI:
    """Factory for uvicorn: configuration file taken from the environment."""
    path = os.environ.get(CONFIG_ENV_VAR)
    config = Config.from_file(path) if path else Config()
    configure_logging(config.log.level, config.log.structured)
    return create_app(AppContext.open(config))
