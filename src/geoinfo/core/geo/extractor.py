"""Caller address extraction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from geoinfo.core.errors import AddressParseError, NoTrustedHeaderError
from geoinfo.core.models.request import canonical_header_key

if TYPE_CHECKING:
    from geoinfo.core.models.request import RequestData


def split_host_port(address: str) -> tuple[str, str]:
    """Split ``host:port`` or ``[host]:port`` into host and port.

    Raises:
        AddressParseError: If the address has no port or misplaced
            colons or brackets.
    """
    i = address.rfind(":")
    if i < 0:
        raise AddressParseError(address, "missing port in address")

    if address.startswith("["):
        end = address.find("]")
        if end < 0:
            raise AddressParseError(address, "missing ']' in address")
        if end + 1 == len(address):
            raise AddressParseError(address, "missing port in address")
        if end + 1 != i:
            reason = "too many colons in address" if address[end + 1] == ":" else "missing port in address"
            raise AddressParseError(address, reason)
        host = address[1:end]
        host_start, port_start = 1, end + 1
    else:
        host = address[:i]
        if ":" in host:
            raise AddressParseError(address, "too many colons in address")
        host_start, port_start = 0, 0

    if "[" in address[host_start:]:
        raise AddressParseError(address, "unexpected '[' in address")
    if "]" in address[port_start:]:
        raise AddressParseError(address, "unexpected ']' in address")

    return host, address[i + 1 :]


class AddressExtractor:
    """Derives the caller's IP address string from a request.

    Uses the transport peer address unless a trusted header (set by a
    reverse proxy) is configured, in which case only the first value of
    that header is taken.
    """

    def __init__(self, ip_header: str | None = None) -> None:
        self.ip_header = canonical_header_key(ip_header) if ip_header else None

    def extract(self, request: RequestData) -> str:
        """Return the caller's address.

        Raises:
            AddressParseError: If the peer address is malformed
            NoTrustedHeaderError: If the trusted header is absent or empty
        """
        if self.ip_header is None:
            host, _ = split_host_port(request.remote_addr)
            return host

        values = request.header_values(self.ip_header)
        if not values or not values[0]:
            raise NoTrustedHeaderError(self.ip_header)
        return values[0]
