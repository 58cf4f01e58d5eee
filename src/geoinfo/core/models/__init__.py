"""Core data models."""

from geoinfo.core.models.config import Config, DatabaseConfig, LogConfig
from geoinfo.core.models.location import LocationInfo, LocationRecord
from geoinfo.core.models.request import RequestData

__all__ = [
    # Config
    "Config",
    "DatabaseConfig",
    "LogConfig",
    # Location
    "LocationInfo",
    "LocationRecord",
    # Request
    "RequestData",
]
