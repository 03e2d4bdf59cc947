"""Shared pytest fixtures for the liveshows test suite."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import structlog

from liveshows.config.settings import Settings
from liveshows.interfaces.shows_provider import IShowsProvider
from liveshows.interfaces.telemetry_provider import ITelemetryProvider
from liveshows.models.show import Show, ShowList


def _configure_silent_structlog() -> None:
    # ReturnLogger writes nothing, so no logger ever holds on to a pytest
    # capture stream that is closed once its test finishes.
    structlog.reset_defaults()
    structlog.configure(
        processors=[structlog.processors.KeyValueRenderer()],
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )


_configure_silent_structlog()


@pytest.fixture(autouse=True)
def _silent_structlog() -> None:
    _configure_silent_structlog()


# ---------------------------------------------------------------------------
# Clocks
# ---------------------------------------------------------------------------


class FakeTimer:
    """Monotonic timer that only moves when a test advances it."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_timer() -> FakeTimer:
    return FakeTimer()


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def live_settings() -> Settings:
    """Settings with a YouTube credential, i.e. live mode."""
    return Settings(
        _env_file=None,
        youtube_application_name="liveshows-tests",
        youtube_api_key="test-api-key",
        youtube_playlist_id="PLtest",
    )


@pytest.fixture
def fallback_settings() -> Settings:
    """Settings without a YouTube credential, i.e. fallback mode."""
    return Settings(_env_file=None, youtube_api_key="", youtube_playlist_id="")


# ---------------------------------------------------------------------------
# Upstream payloads
# ---------------------------------------------------------------------------


@pytest.fixture
def make_playlist_item() -> Callable[..., dict[str, Any]]:
    """Factory for ``youtube#playlistItem`` resources as returned by the API."""

    def _make(
        video_id: str,
        title: str = "ASP.NET Community Standup - May 3rd 2016 - Tag Helpers",
        published_at: str = "2016-05-03T17:45:12Z",
        position: int | None = 0,
        playlist_id: str = "PLtest",
        description: str = "Weekly standup.",
    ) -> dict[str, Any]:
        snippet: dict[str, Any] = {
            "publishedAt": published_at,
            "channelId": "UCtest",
            "title": title,
            "description": description,
            "thumbnails": {
                "default": {"url": f"https://i.ytimg.com/vi/{video_id}/default.jpg"},
                "high": {"url": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg"},
            },
            "playlistId": playlist_id,
            "resourceId": {"kind": "youtube#video", "videoId": video_id},
        }
        if position is not None:
            snippet["position"] = position
        return {"kind": "youtube#playlistItem", "id": f"item-{video_id}", "snippet": snippet}

    return _make


@pytest.fixture
def playlist_response(make_playlist_item: Callable[..., dict[str, Any]]) -> dict[str, Any]:
    """A two-item playlistItems page with no further pages."""
    return {
        "kind": "youtube#playlistItemListResponse",
        "items": [
            make_playlist_item(
                "vid-one",
                title="ASP.NET Community Standup - May 10th 2016 - RC2 is out",
                published_at="2016-05-10T09:30:00-07:00",
                position=0,
            ),
            make_playlist_item(
                "vid-two",
                title="ASP.NET Community Standup - May 3rd 2016 - Tag Helpers",
                published_at="2016-05-03T17:45:12Z",
                position=1,
            ),
        ],
        "pageInfo": {"totalResults": 2, "resultsPerPage": 24},
    }


@pytest.fixture
def mock_http_client() -> MagicMock:
    """``httpx.AsyncClient`` stand-in; set ``get.return_value`` per test."""
    client = MagicMock(spec=httpx.AsyncClient)
    client.get = AsyncMock(return_value=httpx.Response(200, json={"items": []}))
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def mock_telemetry() -> MagicMock:
    return MagicMock(spec=ITelemetryProvider)


# ---------------------------------------------------------------------------
# Domain objects
# ---------------------------------------------------------------------------


def _show(video_id: str, title: str) -> Show:
    return Show(
        provider_id=video_id,
        title=title,
        show_date=datetime(2016, 5, 3, 17, 45, tzinfo=timezone.utc),
        thumbnail_url=f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg",
        url=f"https://www.youtube.com/watch?v={video_id}&list=PLtest&index=0",
    )


@pytest.fixture
def show_list_a() -> ShowList:
    return ShowList(shows=[_show("aaa", "First list")])


@pytest.fixture
def show_list_b() -> ShowList:
    return ShowList(
        shows=[_show("bbb", "Second list")],
        more_shows_url="https://www.youtube.com/playlist?list=PLtest",
    )


@pytest.fixture
def mock_shows_provider(show_list_a: ShowList) -> MagicMock:
    """Mock IShowsProvider whose ``fetch`` returns ``show_list_a``."""
    mock = MagicMock(spec=IShowsProvider)
    mock.get_provider_name.return_value = "mock-youtube"
    mock.fetch = AsyncMock(return_value=show_list_a)
    return mock
