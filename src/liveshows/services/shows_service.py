"""Recorded-shows retrieval: fallback, bypass, or cache-aside.

Each call walks the same decision tree:

  1. No YouTube API key configured  -> built-in fallback list.  Neither
     the cache nor upstream is touched.
  2. Privileged bypass requested     -> live fetch returned directly.  The
     shared cache is left alone unless ``bypass_refreshes_cache`` is on,
     so ordinary callers keep seeing the cached list until it expires.
  3. Otherwise                       -> cached list, refreshed from
     upstream when missing or expired.

Upstream failures propagate as ``UpstreamFetchError``; there is no retry
and no stale-on-error fallback.
"""

from __future__ import annotations

from datetime import timedelta

import structlog

from liveshows.interfaces.shows_provider import IShowsProvider
from liveshows.models.show import ShowList
from liveshows.providers.shows.fallback_provider import FallbackShowsProvider
from liveshows.services.cache_aside import CacheAsideStore
from liveshows.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

SHOWS_CACHE_KEY = "YouTubeShowsService"
DEFAULT_CACHE_TTL = timedelta(days=1)


class ShowsService:
    """Coordinates the shows provider, the cache and the fallback set.

    Parameters
    ----------
    provider:
        Live source, or ``None`` when no upstream credential is configured.
    cache:
        Cache-aside store shared by every caller in the process.
    fallback:
        Offline data set served when *provider* is ``None``.
    cache_ttl:
        Absolute lifetime of a cached list.
    bypass_refreshes_cache:
        When True, a bypass fetch also replaces the cached list.
    """

    def __init__(
        self,
        provider: IShowsProvider | None,
        cache: CacheAsideStore,
        fallback: FallbackShowsProvider,
        cache_ttl: timedelta = DEFAULT_CACHE_TTL,
        bypass_refreshes_cache: bool = False,
    ) -> None:
        self._provider = provider
        self._cache = cache
        self._fallback = fallback
        self._cache_ttl = cache_ttl
        self._bypass_refreshes_cache = bypass_refreshes_cache

    @property
    def is_live_mode(self) -> bool:
        """True when shows come from upstream rather than the fallback set."""
        return self._provider is not None

    async def get_recorded_shows(self, bypass_cache: bool = False) -> ShowList:
        """Return the current list of recorded shows.

        Args:
            bypass_cache: Result of the caller's access check
                (authenticated AND asked to disable the cache).

        Raises:
            UpstreamFetchError: A live fetch was needed and failed.
        """
        if self._provider is None:
            _logger.debug("shows_fallback_mode")
            return ShowList(shows=self._fallback.get_shows())

        if bypass_cache:
            _logger.info(
                "shows_cache_bypassed",
                provider=self._provider.get_provider_name(),
                refreshes_cache=self._bypass_refreshes_cache,
            )
            result = await self._provider.fetch()
            if self._bypass_refreshes_cache:
                await self._cache.put(SHOWS_CACHE_KEY, result, self._cache_ttl)
            return result

        return await self._cache.get_or_refresh(
            SHOWS_CACHE_KEY, self._cache_ttl, self._provider.fetch
        )

    async def clear_cache(self) -> None:
        """Discard the cached list so the next ordinary call refetches."""
        await self._cache.invalidate(SHOWS_CACHE_KEY)
