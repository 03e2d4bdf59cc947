"""Canonical YouTube URL builders.

Upstream payloads carry ids, not links, so watch and playlist URLs are
assembled here.  Every query component is percent-encoded with no safe
characters, which turns a space into ``%20`` and a slash into ``%2F``.
"""

from urllib.parse import quote

_WATCH_URL = "https://www.youtube.com/watch?v={video_id}&list={playlist_id}&index={index}"
_PLAYLIST_URL = "https://www.youtube.com/playlist?list={playlist_id}"


def _encode(value: object) -> str:
    return quote(str(value), safe="")


def watch_url(video_id: str, playlist_id: str, index: int) -> str:
    """Build the watch URL for the item at *index* (zero-based) in a playlist."""
    return _WATCH_URL.format(
        video_id=_encode(video_id),
        playlist_id=_encode(playlist_id),
        index=_encode(index),
    )


def playlist_url(playlist_id: str) -> str:
    """Build the canonical playlist page URL."""
    return _PLAYLIST_URL.format(playlist_id=_encode(playlist_id))
