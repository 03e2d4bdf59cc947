"""liveshows domain models."""

from __future__ import annotations

from liveshows.models.show import YOUTUBE_PROVIDER, Show, ShowList

__all__ = [
    "YOUTUBE_PROVIDER",
    "Show",
    "ShowList",
]
