"""Process-wide application context."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from geoinfo.core.geo.cache import GeoCache
from geoinfo.core.geo.extractor import AddressExtractor
from geoinfo.core.geo.headers import HeaderFilter
from geoinfo.core.geo.resolver import Resolver
from geoinfo.core.geo.store import GeoIP2LocationStore

if TYPE_CHECKING:
    from geoinfo.core.interfaces.store import ILocationStore
    from geoinfo.core.models.config import Config

logger = structlog.get_logger(__name__)


class AppContext:
    """Everything built once at startup and shared by request handlers.

    Owns the location store handle; closing the context closes the store.
    """

    def __init__(self, config: Config, store: ILocationStore) -> None:
        self.config = config
        self.store = store
        self.cache = GeoCache(config.cache_size)
        self.extractor = AddressExtractor(config.ip_header)
        self.header_filter = HeaderFilter(config.ignore_set)
        self.resolver = Resolver(self.extractor, store, self.cache)
        self._closed = False

        logger.debug(
            "Application context created",
            cache_size=config.cache_size,
            ip_header=config.ip_header,
            ignored_headers=len(config.ignore_headers),
        )

    @classmethod
    def open(cls, config: Config) -> AppContext:
        """Create a context backed by the configured GeoIP2 database."""
        return cls(config, GeoIP2LocationStore(config.db.path))

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Close the location store."""
        if self._closed:
            return
        self._closed = True
        self.store.close()

    def __enter__(self) -> AppContext:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
