"""Request to location resolution."""

from __future__ import annotations

import ipaddress
from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from geoinfo.core.errors import InvalidAddressError
from geoinfo.core.models.location import (
    DEFAULT_LANGUAGE,
    LocationInfo,
    LocationRecord,
    format_rfc3339,
    utc_now,
)

if TYPE_CHECKING:
    from geoinfo.core.geo.cache import GeoCache
    from geoinfo.core.geo.extractor import AddressExtractor
    from geoinfo.core.interfaces.store import ILocationStore
    from geoinfo.core.models.request import RequestData


def resolve_language(record: LocationRecord) -> str:
    """Pick the locale for all localized names of a record.

    The lowercased country ISO code is used when the country names have a
    translation for it, otherwise ``"en"``. City names use the same locale
    even if that leaves them empty.
    """
    iso_code = record.country_iso_code.lower()
    if iso_code in record.country_names:
        return iso_code
    return DEFAULT_LANGUAGE


class Resolver:
    """Resolves requests to LocationInfo through the cache and the store."""

    def __init__(
        self,
        extractor: AddressExtractor,
        store: ILocationStore,
        cache: GeoCache,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.extractor = extractor
        self.store = store
        self.cache = cache
        self._clock = clock

    def record(self, address: str) -> LocationRecord:
        """Location record for an address, from cache or store.

        Store results are cached; failures are not.

        Raises:
            LocationLookupError: If the address is invalid or unknown
        """
        record = self.cache.get(address)
        if record is not None:
            return record

        try:
            ip = ipaddress.ip_address(address)
        except ValueError as e:
            raise InvalidAddressError(address) from e

        record = self.store.lookup(ip)
        self.cache.put(address, record)
        return record

    def locate(self, address: str) -> LocationInfo:
        """Resolve an explicit address."""
        record = self.record(address)
        language = resolve_language(record)
        now = self._clock().astimezone(timezone.utc)
        return LocationInfo(
            ip=address,
            country=record.country_names.get(language, ""),
            city=record.city_names.get(language, ""),
            latitude=record.latitude,
            longitude=record.longitude,
            time_zone=record.time_zone,
            language=language,
            utc_time=format_rfc3339(now),
            timestamp=now,
        )

    def resolve(self, request: RequestData) -> LocationInfo:
        """Resolve the caller of a request.

        Raises:
            AddressError: If the caller's address cannot be extracted
            LocationLookupError: If the address has no location
        """
        return self.locate(self.extractor.extract(request))
