"""Error taxonomy for address extraction and location lookup."""

from __future__ import annotations


class GeoInfoError(Exception):
    """Base error for request resolution failures."""


class AddressError(GeoInfoError):
    """The caller's address could not be determined from the request."""


class AddressParseError(AddressError):
    """Transport peer address is not a valid host:port pair."""

    def __init__(self, address: str, reason: str) -> None:
        self.address = address
        self.reason = reason
        super().__init__(f"address {address!r}: {reason}")


class NoTrustedHeaderError(AddressError):
    """Configured trusted IP header is absent or empty."""

    def __init__(self, header: str) -> None:
        self.header = header
        super().__init__(f"no value for trusted header {header!r}")


class LocationLookupError(GeoInfoError, LookupError):
    """Backing store could not provide a location for the address."""


class InvalidAddressError(LocationLookupError):
    """Address is not a valid IPv4 or IPv6 literal."""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"{address!r} is not a valid IP address")


class AddressNotFoundError(LocationLookupError):
    """Address is not present in the location database."""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"address {address} not found in the database")


class CorruptDatabaseError(LocationLookupError):
    """Location database is unreadable or inconsistent."""
