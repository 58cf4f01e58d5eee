"""Tests for HeaderFilter."""

from __future__ import annotations

from unittest.mock import patch

from geoinfo.core.geo.headers import HeaderFilter, NameValue
from geoinfo.core.models.request import RequestData


class TestHeaders:
    """Tests for HeaderFilter.headers."""

    def test_sorted_by_name(self) -> None:
        """Test headers are ordered by name."""
        request = RequestData(
            remote_addr="127.0.0.1:80",
            headers={"X-Header-B": ["b"], "X-Header-C": ["c"], "X-Header-A": ["a"]},
        )
        assert HeaderFilter().headers(request) == [
            ("X-Header-A", "a"),
            ("X-Header-B", "b"),
            ("X-Header-C", "c"),
        ]

    def test_multiple_values_joined(self) -> None:
        """Test repeated values are joined with "; "."""
        request = RequestData(remote_addr="127.0.0.1:80", headers={"Accept": ["text/plain", "text/html"]})
        assert HeaderFilter().headers(request) == [NameValue("Accept", "text/plain; text/html")]

    def test_ignored_headers_case_insensitive(self) -> None:
        """Test the ignore list matches regardless of case."""
        request = RequestData(
            remote_addr="127.0.0.1:80",
            headers={"User-Agent": ["curl"], "x-secret": ["s"], "Host": ["example.com"]},
        )
        header_filter = HeaderFilter({"USER-AGENT", "X-Secret"})
        assert header_filter.headers(request) == [("Host", "example.com")]

    def test_original_case_preserved(self) -> None:
        """Test visible names keep their canonical case."""
        request = RequestData(remote_addr="127.0.0.1:80", headers={"x-lower": ["1"]})
        assert HeaderFilter().headers(request)[0].name == "x-lower"

    def test_is_ignored(self) -> None:
        """Test is_ignored for listed and unlisted names."""
        header_filter = HeaderFilter(["Cookie"])
        assert header_filter.is_ignored("cookie")
        assert header_filter.is_ignored("COOKIE")
        assert not header_filter.is_ignored("Accept")

    def test_empty_headers(self) -> None:
        """Test a request without headers."""
        assert HeaderFilter().headers(RequestData(remote_addr="127.0.0.1:80")) == []


class TestParams:
    """Tests for HeaderFilter.params."""

    def test_query_params_sorted(self) -> None:
        """Test params are ordered by name."""
        request = RequestData(remote_addr="127.0.0.1:80", query="c=3&b=1&a=x")
        assert HeaderFilter().params(request) == [("a", "x"), ("b", "1"), ("c", "3")]

    def test_repeated_params_joined(self) -> None:
        """Test repeated params are joined with "; "."""
        request = RequestData(remote_addr="127.0.0.1:80", query="k=1&k=2")
        assert HeaderFilter().params(request) == [("k", "1; 2")]

    def test_form_values_before_query_values(self) -> None:
        """Test body values are listed before query values."""
        request = RequestData(
            remote_addr="127.0.0.1:80",
            method="POST",
            query="k=query",
            body=b"k=form&z=last",
            content_type="application/x-www-form-urlencoded; charset=utf-8",
        )
        assert HeaderFilter().params(request) == [("k", "form; query"), ("z", "last")]

    def test_params_not_filtered_by_ignore_set(self) -> None:
        """Test the ignore list only applies to headers."""
        request = RequestData(remote_addr="127.0.0.1:80", query="cookie=1")
        assert HeaderFilter(["COOKIE"]).params(request) == [("cookie", "1")]

    def test_form_parsed_once(self) -> None:
        """Test the body is parsed at most once."""
        request = RequestData(remote_addr="127.0.0.1:80", query="a=1")
        header_filter = HeaderFilter()
        with patch("geoinfo.core.models.request.parse_qsl", return_value=[("a", "1")]) as parse:
            header_filter.params(request)
            header_filter.params(request)
        assert parse.call_count == 1
