"""Built-in recorded shows for running without a YouTube API key.

Three historical community standups are fixed.  A fourth entry is dated
28 days before the provider was created so local pages always show one
"recent" recording; the clock is injectable for tests and is read once,
so the list is stable for the lifetime of the provider.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

from liveshows.models.show import YOUTUBE_PROVIDER, Show

# Fixed UTC-8; daylight saving is not applied.
PST = timezone(timedelta(hours=-8), "PST")

RECENT_SHOW_AGE = timedelta(days=28)

_PLAYLIST_ID = "PL0M0zPgJ3HSftTAAHttA3JQU4vOjXFquF"


def _show(video_id: str, index: int, title: str, show_date: datetime) -> Show:
    return Show(
        provider=YOUTUBE_PROVIDER,
        provider_id=video_id,
        title=title,
        show_date=show_date,
        thumbnail_url=f"http://img.youtube.com/vi/{video_id}/mqdefault.jpg",
        url=f"https://www.youtube.com/watch?v={video_id}&index={index}&list={_PLAYLIST_ID}",
    )


HISTORICAL_SHOWS: tuple[Show, ...] = (
    _show(
        "7O81CAjmOXk",
        1,
        "ASP.NET Community Standup - July 21st 2015",
        datetime(2015, 7, 21, 9, 30, tzinfo=PST),
    ),
    _show(
        "bFXseBPGAyQ",
        2,
        "ASP.NET Community Standup - July 14th 2015",
        datetime(2015, 7, 14, 15, 30, tzinfo=PST),
    ),
    _show(
        "APagQ1CIVGA",
        3,
        "ASP.NET Community Standup - July 7th 2015",
        datetime(2015, 7, 7, 15, 30, tzinfo=PST),
    ),
)


def _local_now() -> datetime:
    return datetime.now().astimezone()


class FallbackShowsProvider:
    """Serves the built-in shows list.

    Parameters
    ----------
    clock:
        Returns the current timezone-aware time.  Defaults to local time
        with the local UTC offset.
    """

    def __init__(self, clock: Callable[[], datetime] = _local_now) -> None:
        recent = HISTORICAL_SHOWS[0].model_copy(
            update={"show_date": clock() - RECENT_SHOW_AGE}
        )
        self._shows: tuple[Show, ...] = (*HISTORICAL_SHOWS, recent)

    def get_shows(self) -> list[Show]:
        """Return the fallback shows, historical entries first."""
        return list(self._shows)
