"""API route modules."""

from geoinfo.api.routes import health, info

__all__ = [
    "health",
    "info",
]
