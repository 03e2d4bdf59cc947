"""Get-or-refresh wrapper over an :class:`ICacheProvider`.

A hit returns the stored value untouched.  A miss awaits the refresh
coroutine and stores its result only if it succeeded, so a failing
upstream never leaves anything behind in the cache.

No lock is held while the refresh runs.  Two callers that miss at the same
moment both refresh and the later write wins.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Awaitable, Callable, TypeVar

from liveshows.interfaces.cache_provider import ICacheProvider
from liveshows.utils.logging import get_logger

T = TypeVar("T")


class CacheAsideStore:
    """Cache-aside access to a single injected cache provider."""

    def __init__(self, cache: ICacheProvider) -> None:
        self._cache = cache
        self._logger = get_logger(__name__)

    async def get_or_refresh(
        self,
        key: str,
        ttl: timedelta,
        refresh: Callable[[], Awaitable[T]],
    ) -> T:
        """Return the cached value for *key*, refreshing it on a miss.

        Args:
            key: Cache key.
            ttl: Absolute lifetime of a freshly written entry.
            refresh: Coroutine function producing the value on a miss.
                Exceptions propagate unchanged and nothing is cached.

        Returns:
            The cached or freshly produced value.
        """
        cached = await self._cache.get(key)
        if cached is not None:
            return cached

        self._logger.info("cache_refresh_started", key=key)
        value = await refresh()
        await self.put(key, value, ttl)
        return value

    async def put(self, key: str, value: T, ttl: timedelta) -> None:
        """Replace the entry under *key*, expiring *ttl* from now."""
        await self._cache.set(key, value, ttl=ttl.total_seconds())

    async def invalidate(self, key: str) -> None:
        """Drop the entry under *key* so the next lookup refreshes."""
        await self._cache.delete(key)
        self._logger.info("cache_invalidated", key=key)
