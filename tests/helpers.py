"""Shared test doubles and sample data."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from ipaddress import IPv4Address, IPv6Address

from geoinfo.core.errors import AddressNotFoundError
from geoinfo.core.models.location import LocationRecord

MALMO_IP = "193.138.218.226"

FIXED_NOW = datetime(2024, 6, 1, 12, 30, 0, tzinfo=timezone.utc)


def make_record(**overrides) -> LocationRecord:
    """Location record of the Malmo test address."""
    data = {
        "country_iso_code": "SE",
        "country_names": {"en": "Sweden", "de": "Schweden", "ru": "Швеция"},
        "city_names": {"en": "Malmo", "de": "Malmö", "ru": "Мальмё"},
        "latitude": 55.6078,
        "longitude": 12.9982,
        "time_zone": "Europe/Stockholm",
    }
    data.update(overrides)
    return LocationRecord(**data)


@dataclass
class FakeLocationStore:
    """In-memory location store that records every lookup."""

    records: dict[str, LocationRecord] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    closed: bool = False

    def lookup(self, ip: IPv4Address | IPv6Address) -> LocationRecord:
        self.calls.append(str(ip))
        try:
            return self.records[str(ip)]
        except KeyError:
            raise AddressNotFoundError(str(ip)) from None

    def close(self) -> None:
        self.closed = True
