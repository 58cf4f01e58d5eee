"""Pydantic schemas for API response models."""

from __future__ import annotations

from pydantic import BaseModel

from geoinfo.core.models.location import LocationInfo


class LocationResponse(BaseModel):
    """Resolved caller location."""

    ip: str
    country: str
    city: str
    longitude: float
    latitude: float
    time_zone: str
    language: str
    utc_time: str
    timestamp: float

    @classmethod
    def from_info(cls, info: LocationInfo) -> LocationResponse:
        return cls(**info.to_dict())


class CacheStatsResponse(BaseModel):
    """Location cache statistics."""

    hits: int
    misses: int
    size: int
    capacity: int


class HealthResponse(BaseModel):
    """Service health."""

    status: str
    cache: CacheStatsResponse


class VersionResponse(BaseModel):
    """Build information."""

    name: str
    version: str
    python_version: str
