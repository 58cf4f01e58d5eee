"""Tests for AppContext."""

from __future__ import annotations

from unittest.mock import patch

from geoinfo.core.context import AppContext
from geoinfo.core.models.config import Config
from tests.helpers import FakeLocationStore


class TestAppContext:
    """Tests for AppContext wiring and teardown."""

    def test_wiring_from_config(self, config, fake_store) -> None:
        """Test components are built from the config."""
        ctx = AppContext(config, fake_store)
        assert ctx.cache.capacity == 16
        assert ctx.extractor.ip_header == "X-Real-Ip"
        assert ctx.header_filter.ignore_set == frozenset({"USER-AGENT", "ACCEPT-ENCODING"})
        assert ctx.resolver.store is fake_store
        assert ctx.resolver.cache is ctx.cache

    def test_close_closes_store_once(self) -> None:
        """Test closing twice closes the store once."""
        store = FakeLocationStore()
        with AppContext(Config(), store) as ctx:
            assert not ctx.closed
        assert store.closed
        assert ctx.closed
        store.closed = False
        ctx.close()
        assert not store.closed

    def test_open_uses_configured_database(self, config) -> None:
        """Test open reads the configured database path."""
        with patch("geoinfo.core.context.GeoIP2LocationStore") as store_cls:
            ctx = AppContext.open(config)
        store_cls.assert_called_once_with(config.db.path)
        assert ctx.store is store_cls.return_value
