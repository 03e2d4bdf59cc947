"""Recorded-show sources: the live YouTube provider and the offline fallback."""

from liveshows.providers.shows.fallback_provider import FallbackShowsProvider
from liveshows.providers.shows.youtube_provider import YouTubeShowsProvider

__all__ = ["FallbackShowsProvider", "YouTubeShowsProvider"]
