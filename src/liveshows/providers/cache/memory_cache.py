"""In-memory cache provider using cachetools.TLRUCache.

Each entry carries its own time-to-live, fixed at write time: expiry is
``write_time + ttl`` and a read never moves it.  The timer is injectable
so tests can step a fake monotonic clock across the expiry boundary.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, NamedTuple

import structlog
from cachetools import TLRUCache

from liveshows.interfaces.cache_provider import ICacheProvider

logger = structlog.get_logger(logger_name=__name__)


class _Entry(NamedTuple):
    value: Any
    ttl: float


def _time_to_use(_key: str, entry: _Entry, now: float) -> float:
    return now + entry.ttl


class MemoryCacheProvider(ICacheProvider):
    """In-memory TTL cache backed by ``cachetools.TLRUCache``.

    Parameters
    ----------
    max_size:
        Maximum number of entries before the least-recently-used entry
        is evicted.
    ttl:
        Default time-to-live in seconds, used when ``set`` gets none.
    timer:
        Monotonic clock returning seconds; ``time.monotonic`` by default.

    cachetools caches are not thread-safe, so every operation takes a
    lock.  The lock is only held for the dictionary access itself.
    """

    def __init__(
        self,
        max_size: int = 1000,
        ttl: float = 3600,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._default_ttl = ttl
        self._lock = threading.Lock()
        self._cache: TLRUCache[str, _Entry] = TLRUCache(
            maxsize=max_size, ttu=_time_to_use, timer=timer
        )

    # ------------------------------------------------------------------
    # ICacheProvider implementation
    # ------------------------------------------------------------------

    async def get(self, key: str) -> Any | None:
        """Retrieve the cached value for *key*, or ``None`` if missing/expired."""
        with self._lock:
            entry = self._cache.get(key)
        if entry is not None:
            logger.debug("cache_hit", key=key)
            return entry.value
        logger.debug("cache_miss", key=key)
        return None

    async def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """Store *value* under *key*, expiring ``ttl`` seconds from now."""
        effective_ttl = self._default_ttl if ttl is None else ttl
        with self._lock:
            self._cache[key] = _Entry(value, effective_ttl)
        logger.debug("cache_set", key=key, ttl_seconds=effective_ttl)

    async def delete(self, key: str) -> None:
        """Remove *key* from the cache (no-op if absent)."""
        with self._lock:
            self._cache.pop(key, None)
        logger.debug("cache_delete", key=key)

    async def exists(self, key: str) -> bool:
        """Return ``True`` if *key* is present and not expired."""
        with self._lock:
            return key in self._cache
