"""Health and version endpoints."""

from __future__ import annotations

import platform
from typing import Annotated

from fastapi import APIRouter, Depends

from geoinfo import __version__
from geoinfo.api.deps import get_context
from geoinfo.api.schemas import CacheStatsResponse, HealthResponse, VersionResponse
from geoinfo.core.context import AppContext

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(context: Annotated[AppContext, Depends(get_context)]) -> HealthResponse:
    """Health check with location cache statistics."""
    stats = context.cache.stats
    return HealthResponse(
        status="closed" if context.closed else "healthy",
        cache=CacheStatsResponse(**stats.to_dict()),
    )


@router.get("/version", response_model=VersionResponse)
def version() -> VersionResponse:
    """Build information."""
    return VersionResponse(
        name="geoinfo",
        version=__version__,
        python_version=platform.python_version(),
    )
