"""Request dependencies shared by the routes."""

from __future__ import annotations

from fastapi import Request

from geoinfo.core.context import AppContext
from geoinfo.core.models.request import (
    BODY_METHODS,
    MULTIPART_CONTENT_TYPE,
    RequestData,
    media_type,
)


def get_context(request: Request) -> AppContext:
    """Application context attached by ``create_app``."""
    context: AppContext | None = getattr(request.app.state, "context", None)
    if context is None:
        raise RuntimeError("Application context not initialized. Call create_app() first.")
    return context


async def get_request_data(request: Request) -> RequestData:
    """Snapshot of the inbound request, body and multipart text fields included."""
    body = await request.body()
    form: list[tuple[str, str]] = []
    if (
        request.method in BODY_METHODS
        and media_type(request.headers.get("content-type", "")) == MULTIPART_CONTENT_TYPE
    ):
        # Uploaded files are not params
        async with request.form() as data:
            form = [(name, value) for name, value in data.multi_items() if isinstance(value, str)]
    return RequestData.from_request(request, body, form)
