"""Location data models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Placeholder for values that cannot be derived (unknown time zone).
UNKNOWN = "-"

DEFAULT_LANGUAGE = "en"


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_rfc3339(moment: datetime) -> str:
    """Format an aware datetime as RFC3339 with second precision.

    A zero UTC offset is written as ``Z``.
    """
    text = moment.isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def _frozen(names: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(names or {}))


@dataclass(frozen=True)
class LocationRecord:
    """Raw geolocation data returned by a location store."""

    country_iso_code: str = ""
    country_names: Mapping[str, str] = field(default_factory=dict)
    city_names: Mapping[str, str] = field(default_factory=dict)
    latitude: float = 0.0
    longitude: float = 0.0
    time_zone: str = ""

    def __post_init__(self) -> None:
        # Read-only views, records are shared through the cache.
        object.__setattr__(self, "country_names", _frozen(self.country_names))
        object.__setattr__(self, "city_names", _frozen(self.city_names))


@dataclass(frozen=True)
class LocationInfo:
    """Resolved, presentation-ready location of a caller."""

    ip: str
    country: str
    city: str
    latitude: float
    longitude: float
    time_zone: str
    language: str
    utc_time: str
    timestamp: datetime

    def _zone(self) -> ZoneInfo | None:
        if not self.time_zone:
            return None
        try:
            return ZoneInfo(self.time_zone)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            return None

    def local_time(self) -> str:
        """Resolution instant in the caller's time zone as RFC3339, or ``-``."""
        zone = self._zone()
        if zone is None:
            return UNKNOWN
        return format_rfc3339(self.timestamp.astimezone(zone))

    def local_date_time(self) -> tuple[str, str]:
        """Local date and local time as separate strings, or ``("-", "-")``."""
        zone = self._zone()
        if zone is None:
            return UNKNOWN, UNKNOWN
        moment = self.timestamp.astimezone(zone)
        return moment.strftime("%Y-%m-%d"), moment.strftime("%H:%M:%S")

    @property
    def location(self) -> str:
        """Human readable label: ``Country, City``, ``Country`` or empty."""
        if not self.country:
            return ""
        if not self.city:
            return self.country
        return f"{self.country}, {self.city}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "ip": self.ip,
            "country": self.country,
            "city": self.city,
            "longitude": self.longitude,
            "latitude": self.latitude,
            "time_zone": self.time_zone,
            "language": self.language,
            "utc_time": self.utc_time,
            "timestamp": self.timestamp.timestamp(),
        }
