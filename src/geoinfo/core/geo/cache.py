"""Bounded LRU cache of resolved location records."""

from __future__ import annotations

import threading
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

from cachetools import LRUCache

if TYPE_CHECKING:
    from geoinfo.core.models.location import LocationRecord


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time cache statistics."""

    hits: int
    misses: int
    size: int
    capacity: int

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


class GeoCache:
    """Thread-safe address -> LocationRecord cache with LRU eviction.

    A capacity of zero or less disables the cache: every ``get`` misses
    and every ``put`` is dropped.
    """

    def __init__(self, capacity: int) -> None:
        self._capacity = max(capacity, 0)
        self._data: LRUCache[str, LocationRecord] | None = (
            LRUCache(maxsize=self._capacity) if self._capacity else None
        )
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def enabled(self) -> bool:
        return self._data is not None

    def get(self, key: str) -> LocationRecord | None:
        """Cached record for ``key``; a hit marks it most recently used."""
        if self._data is None:
            return None
        with self._lock:
            value = self._data.get(key)
            if value is None:
                self._misses += 1
            else:
                self._hits += 1
            return value

    def put(self, key: str, value: LocationRecord) -> None:
        """Insert or replace ``key``, evicting the least recently used when full."""
        if self._data is None:
            return
        with self._lock:
            self._data[key] = value

    def clear(self) -> None:
        if self._data is None:
            return
        with self._lock:
            self._data.clear()
            self._hits = 0
            self._misses = 0

    @property
    def stats(self) -> CacheStats:
        with self._lock:
            size = len(self._data) if self._data is not None else 0
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                size=size,
                capacity=self._capacity,
            )

    def __contains__(self, key: object) -> bool:
        if self._data is None:
            return False
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        if self._data is None:
            return 0
        with self._lock:
            return len(self._data)
