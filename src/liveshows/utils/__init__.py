"""Utility modules for liveshows.

- **errors** -- exception hierarchy rooted at LiveShowsError.
- **logging** -- structlog setup with console/JSON renderers.
- **text_normalizer** -- display-title extraction from upstream titles.
- **youtube_urls** -- percent-encoded watch and playlist URL builders.
"""

from liveshows.utils.errors import (
    ConfigurationError,
    LiveShowsError,
    MalformedItemError,
    RateLimitError,
    UpstreamFetchError,
)
from liveshows.utils.logging import configure_logging, get_logger
from liveshows.utils.text_normalizer import extract_display_title
from liveshows.utils.youtube_urls import playlist_url, watch_url

__all__ = [
    "ConfigurationError",
    "LiveShowsError",
    "MalformedItemError",
    "RateLimitError",
    "UpstreamFetchError",
    "configure_logging",
    "extract_display_title",
    "get_logger",
    "playlist_url",
    "watch_url",
]
