"""Tests for AddressExtractor and host/port splitting."""

from __future__ import annotations

import pytest

from geoinfo.core.errors import AddressError, AddressParseError, NoTrustedHeaderError
from geoinfo.core.geo.extractor import AddressExtractor, split_host_port
from geoinfo.core.models.request import RequestData

# ============================================================================
# SPLIT_HOST_PORT TESTS
# ============================================================================


class TestSplitHostPort:
    """Tests for split_host_port."""

    @pytest.mark.parametrize(
        ("address", "expected"),
        [
            ("127.0.0.123:8082", ("127.0.0.123", "8082")),
            ("example.com:80", ("example.com", "80")),
            ("[::1]:443", ("::1", "443")),
            ("[2001:db8::1]:8080", ("2001:db8::1", "8080")),
            ("127.0.0.1:", ("127.0.0.1", "")),
            (":80", ("", "80")),
        ],
    )
    def test_valid_addresses(self, address, expected) -> None:
        """Test host extraction from valid host:port strings."""
        assert split_host_port(address) == expected

    @pytest.mark.parametrize(
        ("address", "reason"),
        [
            ("bad ip", "missing port"),
            ("", "missing port"),
            ("::1:80", "too many colons"),
            ("[::1]", "missing port"),
            ("[::1]x:80", "missing port"),
            ("[::1]::80", "too many colons"),
            ("[::1:80", "missing ']'"),
            ("a]b:80", "unexpected ']'"),
            ("a[b:80", "unexpected '['"),
        ],
    )
    def test_invalid_addresses(self, address, reason) -> None:
        """Test malformed host:port strings are rejected."""
        with pytest.raises(AddressParseError) as exc_info:
            split_host_port(address)
        assert reason in str(exc_info.value)
        assert exc_info.value.address == address


# ============================================================================
# ADDRESS EXTRACTOR TESTS
# ============================================================================


class TestPeerAddress:
    """Extraction from the transport peer address."""

    def test_ipv4_peer(self) -> None:
        """Test an IPv4 peer address."""
        extractor = AddressExtractor()
        request = RequestData(remote_addr="127.0.0.123:8082")
        assert extractor.extract(request) == "127.0.0.123"

    def test_ipv6_peer(self) -> None:
        """Test a bracketed IPv6 peer address."""
        extractor = AddressExtractor()
        assert extractor.extract(RequestData(remote_addr="[::1]:52000")) == "::1"

    def test_bad_peer_fails(self) -> None:
        """Test a peer address without a port."""
        extractor = AddressExtractor()
        with pytest.raises(AddressParseError):
            extractor.extract(RequestData(remote_addr="bad ip"))

    def test_headers_ignored_without_trusted_header(self) -> None:
        """Test headers are not consulted without a trusted header."""
        extractor = AddressExtractor(None)
        request = RequestData.build("10.0.0.1:1234", {"X-Real-Ip": "1.2.3.4"})
        assert extractor.extract(request) == "10.0.0.1"

    def test_extraction_is_idempotent(self) -> None:
        """Test repeated extraction gives the same address."""
        extractor = AddressExtractor()
        request = RequestData(remote_addr="192.168.1.10:9000")
        assert extractor.extract(request) == extractor.extract(request)


class TestTrustedHeader:
    """Extraction from a configured trusted header."""

    def test_first_value_used(self) -> None:
        """Test the first value of a repeated header wins."""
        extractor = AddressExtractor("X-Real-Ip")
        request = RequestData(
            remote_addr="bad ip",
            headers={"X-Real-Ip": ["193.138.218.226", "10.0.0.1"]},
        )
        assert extractor.extract(request) == "193.138.218.226"

    def test_header_name_is_canonicalized(self) -> None:
        """Test the configured header name is matched in any case."""
        extractor = AddressExtractor("x-real-ip")
        assert extractor.ip_header == "X-Real-Ip"
        request = RequestData.build("127.0.0.1:80", [("X-REAL-IP", "127.0.0.123")])
        assert extractor.extract(request) == "127.0.0.123"

    def test_forwarded_chain_not_parsed(self) -> None:
        """Test a comma separated chain is returned verbatim."""
        extractor = AddressExtractor("X-Forwarded-For")
        request = RequestData.build("127.0.0.1:80", {"X-Forwarded-For": "1.1.1.1, 2.2.2.2"})
        assert extractor.extract(request) == "1.1.1.1, 2.2.2.2"

    def test_missing_header_fails(self) -> None:
        """Test an absent trusted header."""
        extractor = AddressExtractor("X-Real-Ip")
        with pytest.raises(NoTrustedHeaderError) as exc_info:
            extractor.extract(RequestData(remote_addr="127.0.0.1:80"))
        assert exc_info.value.header == "X-Real-Ip"

    def test_empty_header_fails(self) -> None:
        """Test an empty trusted header."""
        extractor = AddressExtractor("X-Real-Ip")
        request = RequestData(remote_addr="127.0.0.1:80", headers={"X-Real-Ip": [""]})
        with pytest.raises(NoTrustedHeaderError):
            extractor.extract(request)

    def test_errors_share_address_error_base(self) -> None:
        """Test both extraction errors are AddressError."""
        assert issubclass(NoTrustedHeaderError, AddressError)
        assert issubclass(AddressParseError, AddressError)
