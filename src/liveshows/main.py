"""liveshows composition root.

Builds every provider and service once per process and hands them out
through the ``application`` async context manager.  The shared
``httpx.AsyncClient`` and the in-memory cache live exactly as long as that
context; nothing is reachable through module globals.
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from datetime import datetime, timedelta
from typing import Any, AsyncIterator, Callable

import httpx
import structlog

from liveshows.config.loader import load_config
from liveshows.config.settings import Settings
from liveshows.interfaces.shows_provider import IShowsProvider
from liveshows.providers.cache.memory_cache import MemoryCacheProvider
from liveshows.providers.shows.fallback_provider import FallbackShowsProvider
from liveshows.providers.shows.youtube_provider import YouTubeShowsProvider
from liveshows.providers.telemetry.log_telemetry import LogTelemetryProvider
from liveshows.services.cache_aside import CacheAsideStore
from liveshows.services.shows_service import ShowsService
from liveshows.utils.errors import ConfigurationError
from liveshows.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

_DEFAULT_CACHE_ENTRIES = 16


def _build_shows_provider(
    app_settings: Settings,
    http_client: httpx.AsyncClient,
) -> IShowsProvider | None:
    """Return the live provider, or ``None`` to run on fallback data."""
    if not app_settings.is_live_mode:
        return None
    return YouTubeShowsProvider(
        settings=app_settings,
        http_client=http_client,
        telemetry=LogTelemetryProvider(),
    )


def build_components(
    app_settings: Settings,
    config: dict[str, Any] | None = None,
    http_client: httpx.AsyncClient | None = None,
    cache_timer: Callable[[], float] = time.monotonic,
    fallback_clock: Callable[[], datetime] | None = None,
) -> dict[str, Any]:
    """Construct every provider and service instance.

    Returns a flat dict of named components: ``http_client``, ``cache``,
    ``shows_provider``, ``shows_service``.
    """
    if app_settings.is_live_mode and not app_settings.youtube_playlist_id:
        raise ConfigurationError(
            message="YOUTUBE_API_KEY is set but YOUTUBE_PLAYLIST_ID is empty",
            provider_name="youtube",
        )

    config = config if config is not None else load_config(settings=app_settings)
    cache_config = config.get("cache", {})
    cache_ttl = timedelta(
        hours=float(cache_config.get("ttl_hours", app_settings.shows_cache_ttl_hours))
    )

    http_client = http_client or httpx.AsyncClient(
        timeout=app_settings.upstream_timeout_seconds
    )
    cache = MemoryCacheProvider(
        max_size=int(cache_config.get("max_entries", _DEFAULT_CACHE_ENTRIES)),
        ttl=cache_ttl.total_seconds(),
        timer=cache_timer,
    )
    fallback = (
        FallbackShowsProvider(clock=fallback_clock) if fallback_clock else FallbackShowsProvider()
    )
    shows_provider = _build_shows_provider(app_settings, http_client)

    shows_service = ShowsService(
        provider=shows_provider,
        cache=CacheAsideStore(cache),
        fallback=fallback,
        cache_ttl=cache_ttl,
        bypass_refreshes_cache=app_settings.bypass_refreshes_cache,
    )

    return {
        "http_client": http_client,
        "cache": cache,
        "shows_provider": shows_provider,
        "shows_service": shows_service,
    }


@asynccontextmanager
async def application(
    app_settings: Settings | None = None,
    **overrides: Any,
) -> AsyncIterator[dict[str, Any]]:
    """Build the components on entry and close the HTTP client on exit."""
    app_settings = app_settings or Settings()
    components = build_components(app_settings, **overrides)
    _logger.info(
        "app_startup",
        environment=app_settings.app_env,
        live_mode=components["shows_service"].is_live_mode,
        cache_ttl_hours=app_settings.shows_cache_ttl_hours,
    )
    try:
        yield components
    finally:
        http_client: httpx.AsyncClient = components["http_client"]
        await http_client.aclose()
        _logger.info("app_shutdown", message="HTTP client closed")
