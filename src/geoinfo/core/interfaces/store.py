"""Location store interface definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ipaddress import IPv4Address, IPv6Address

    from geoinfo.core.models.location import LocationRecord


@runtime_checkable
class ILocationStore(Protocol):
    """Contract for geolocation databases."""

    def lookup(self, ip: IPv4Address | IPv6Address) -> LocationRecord:
        """
        Look up the location of an address.

        Args:
            ip: Parsed IPv4 or IPv6 address

        Returns:
            Raw location record

        Raises:
            AddressNotFoundError: If the address is not in the database
            CorruptDatabaseError: If the database cannot be read
        """
        ...

    def close(self) -> None:
        """Release the database handle."""
        ...
