"""MaxMind GeoIP2 location store."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import geoip2.database
import geoip2.errors
import structlog
from maxminddb import InvalidDatabaseError

from geoinfo.core.errors import AddressNotFoundError, CorruptDatabaseError
from geoinfo.core.models.location import LocationRecord

if TYPE_CHECKING:
    from ipaddress import IPv4Address, IPv6Address

    from geoip2.models import City

logger = structlog.get_logger(__name__)


class GeoIP2LocationStore:
    """Location store backed by a GeoLite2/GeoIP2 City database.

    The reader memory-maps the database and is safe for concurrent reads.
    """

    def __init__(self, db_path: Path | str) -> None:
        """Open the database.

        Args:
            db_path: Path to a ``GeoLite2-City.mmdb`` file

        Raises:
            FileNotFoundError: If the database file doesn't exist
            CorruptDatabaseError: If the file is not a valid database
        """
        db_path = Path(db_path)
        if not db_path.exists():
            raise FileNotFoundError(f"GeoIP database not found: {db_path}")

        try:
            self._reader = geoip2.database.Reader(str(db_path))
        except InvalidDatabaseError as e:
            raise CorruptDatabaseError(f"invalid database {db_path}: {e}") from e

        self._db_path = db_path
        self._closed = False
        metadata = self._reader.metadata()
        logger.info(
            "GeoIP database opened",
            path=str(db_path),
            database_type=metadata.database_type,
            build_epoch=metadata.build_epoch,
        )

    @property
    def path(self) -> Path:
        return self._db_path

    def lookup(self, ip: IPv4Address | IPv6Address) -> LocationRecord:
        """Look up the city-level location of an address."""
        try:
            response = self._reader.city(ip)
        except geoip2.errors.AddressNotFoundError as e:
            raise AddressNotFoundError(str(ip)) from e
        except InvalidDatabaseError as e:
            raise CorruptDatabaseError(f"database {self._db_path} is corrupt: {e}") from e

        return record_from_city(response)

    def close(self) -> None:
        """Close the database reader."""
        if self._closed:
            return
        self._reader.close()
        self._closed = True
        logger.info("GeoIP database closed", path=str(self._db_path))

    def __enter__(self) -> GeoIP2LocationStore:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def record_from_city(response: City) -> LocationRecord:
    """Convert a City response into a LocationRecord."""
    location = response.location
    return LocationRecord(
        country_iso_code=response.country.iso_code or "",
        country_names=dict(response.country.names or {}),
        city_names=dict(response.city.names or {}),
        latitude=location.latitude or 0.0,
        longitude=location.longitude or 0.0,
        time_zone=location.time_zone or "",
    )
