"""Public interface definitions for external collaborators.

Concrete adapters live in ``liveshows/providers/`` and are wired together
by ``liveshows.main.build_components``:

    Interface            ->  Concrete implementations
    -------------------------------------------------------------
    ICacheProvider       ->  MemoryCacheProvider
    IShowsProvider       ->  YouTubeShowsProvider
    ITelemetryProvider   ->  LogTelemetryProvider
"""

from liveshows.interfaces.cache_provider import ICacheProvider
from liveshows.interfaces.shows_provider import IShowsProvider
from liveshows.interfaces.telemetry_provider import ITelemetryProvider

__all__ = [
    "ICacheProvider",
    "IShowsProvider",
    "ITelemetryProvider",
]
