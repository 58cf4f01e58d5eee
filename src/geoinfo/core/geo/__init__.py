"""Address extraction, caching and location resolution."""

from geoinfo.core.geo.cache import CacheStats, GeoCache
from geoinfo.core.geo.extractor import AddressExtractor, split_host_port
from geoinfo.core.geo.headers import HeaderFilter, NameValue
from geoinfo.core.geo.resolver import Resolver, resolve_language
from geoinfo.core.geo.store import GeoIP2LocationStore

__all__ = [
    "AddressExtractor",
    "CacheStats",
    "GeoCache",
    "GeoIP2LocationStore",
    "HeaderFilter",
    "NameValue",
    "Resolver",
    "resolve_language",
    "split_host_port",
]
