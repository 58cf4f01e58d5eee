"""Caller location endpoints."""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from geoinfo.api.deps import get_context, get_request_data
from geoinfo.api.render import render_compact, render_full, render_short
from geoinfo.api.schemas import LocationResponse
from geoinfo.core.context import AppContext
from geoinfo.core.models.request import RequestData

logger = structlog.get_logger(__name__)

router = APIRouter()

NO_CACHE_HEADERS = {"Cache-Control": "no-cache, no-store, must-revalidate"}

ContextDep = Annotated[AppContext, Depends(get_context)]
RequestDep = Annotated[RequestData, Depends(get_request_data)]


@router.api_route("/", methods=["GET", "POST"], response_class=PlainTextResponse)
def full_text(context: ContextDep, data: RequestDep) -> PlainTextResponse:
    """Request details, headers, params and location as plain text."""
    logger.debug("request", remote_addr=data.remote_addr, uri=data.uri)
    info = context.resolver.resolve(data)
    body = render_full(data, context.header_filter, info)
    return PlainTextResponse(body, headers=NO_CACHE_HEADERS)


@router.get("/short", response_class=PlainTextResponse)
def short_text(context: ContextDep, data: RequestDep) -> PlainTextResponse:
    """IP, country, city and time as plain text."""
    info = context.resolver.resolve(data)
    return PlainTextResponse(render_short(info), headers=NO_CACHE_HEADERS)


@router.get("/compact", response_class=PlainTextResponse)
def compact_text(context: ContextDep, data: RequestDep) -> PlainTextResponse:
    """Location, IP and local time on three lines."""
    info = context.resolver.resolve(data)
    return PlainTextResponse(render_compact(info), headers=NO_CACHE_HEADERS)


@router.get("/json", response_model=LocationResponse)
def location_json(context: ContextDep, data: RequestDep) -> LocationResponse:
    """Caller location as JSON."""
    info = context.resolver.resolve(data)
    return LocationResponse.from_info(info)
