"""Core module - request resolution, caching and configuration."""

from geoinfo.core.context import AppContext
from geoinfo.core.errors import (
    AddressError,
    AddressNotFoundError,
    AddressParseError,
    CorruptDatabaseError,
    GeoInfoError,
    InvalidAddressError,
    LocationLookupError,
    NoTrustedHeaderError,
)

__all__ = [
    "AddressError",
    "AddressNotFoundError",
    "AddressParseError",
    "AppContext",
    "CorruptDatabaseError",
    "GeoInfoError",
    "InvalidAddressError",
    "LocationLookupError",
    "NoTrustedHeaderError",
]
