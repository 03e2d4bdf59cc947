"""YouTube Data API v3 provider for recorded shows.

Lists the configured playlist through ``playlistItems.list`` and maps each
item's snippet to a :class:`~liveshows.models.show.Show`:

  - ``title``         <- display segment of ``snippet.title``
  - ``show_date``     <- ``snippet.publishedAt`` (offset preserved)
  - ``thumbnail_url`` <- ``snippet.thumbnails.high.url``
  - ``url``           <- built from video id, playlist id and position

Only the first page (24 items) is fetched.  A ``nextPageToken`` in the
response turns into a link to the playlist page rather than a second call.

Every HTTP call is reported to the injected telemetry sink as
``YouTube.PlayListItemsApi`` / ``List``.  The ``httpx.AsyncClient`` is
injected for connection pooling and testability.
"""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx

from liveshows.config.settings import ItemErrorPolicy, Settings
from liveshows.interfaces.shows_provider import IShowsProvider
from liveshows.interfaces.telemetry_provider import ITelemetryProvider
from liveshows.models.show import YOUTUBE_PROVIDER, Show, ShowList
from liveshows.utils.errors import MalformedItemError, RateLimitError, UpstreamFetchError
from liveshows.utils.logging import get_logger
from liveshows.utils.text_normalizer import extract_display_title
from liveshows.utils.youtube_urls import playlist_url, watch_url

_PLAYLIST_ITEMS_URL = "https://www.googleapis.com/youtube/v3/playlistItems"
_MAX_RESULTS = 3 * 8  # three rows of eight on the listing page
_DEPENDENCY_NAME = "YouTube.PlayListItemsApi"
_COMMAND_NAME = "List"
_PROVIDER_NAME = "youtube"

# 403 is only a rate limit when Google says so; otherwise it is a bad key
# or a private playlist and retrying later will not help.
_RATE_LIMIT_REASONS = frozenset({
    "quotaExceeded",
    "rateLimitExceeded",
    "userRateLimitExceeded",
    "dailyLimitExceeded",
})


def parse_published_at(raw: str) -> datetime:
    """Parse an ISO-8601 ``publishedAt`` value, keeping its UTC offset.

    A trailing ``Z`` is read as ``+00:00``; a value without any offset is
    taken to be UTC.

    Raises:
        ValueError: If *raw* is not an ISO-8601 timestamp.
    """
    if not isinstance(raw, str):
        raise ValueError(f"timestamp must be a string, got {type(raw).__name__}")
    value = raw.strip()
    if value[-1:] in ("Z", "z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class YouTubeShowsProvider(IShowsProvider):
    """Fetches recorded shows from a YouTube playlist.

    Parameters
    ----------
    settings:
        Supplies the API key, playlist id, application name, timeout and
        item error policy.
    http_client:
        Shared ``httpx.AsyncClient``; owned and closed by the caller.
    telemetry:
        Sink receiving one observation per upstream call.
    """

    def __init__(
        self,
        settings: Settings,
        http_client: httpx.AsyncClient,
        telemetry: ITelemetryProvider,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._telemetry = telemetry
        self._logger = get_logger(__name__)

    # -- IShowsProvider implementation ---------------------------------------

    def get_provider_name(self) -> str:
        return _PROVIDER_NAME

    async def fetch(self) -> ShowList:
        """Fetch the newest page of the configured playlist."""
        playlist_id = self._settings.youtube_playlist_id
        payload = await self._list_playlist_items(playlist_id)

        raw_items = payload.get("items", [])
        if not isinstance(raw_items, list):
            raise UpstreamFetchError(
                message="playlistItems response has a non-list 'items' field",
                provider_name=_PROVIDER_NAME,
            )

        shows: list[Show] = []
        for position, item in enumerate(raw_items):
            try:
                shows.append(self._map_item(item))
            except MalformedItemError as exc:
                if self._settings.item_error_policy is not ItemErrorPolicy.SKIP:
                    raise
                self._logger.warning(
                    "youtube_item_skipped",
                    item_id=exc.item_id,
                    position=position,
                    error=exc.message,
                )

        more_shows_url = None
        if payload.get("nextPageToken"):
            more_shows_url = playlist_url(playlist_id)

        self._logger.info(
            "youtube_playlist_fetch_complete",
            playlist_id=playlist_id,
            show_count=len(shows),
            has_more=more_shows_url is not None,
        )
        return ShowList(shows=shows, more_shows_url=more_shows_url)

    # -- Private helpers -------------------------------------------------------

    async def _list_playlist_items(self, playlist_id: str) -> dict[str, Any]:
        """Call ``playlistItems.list`` and return the decoded JSON body."""
        params = {
            "part": "snippet",
            "playlistId": playlist_id,
            "maxResults": _MAX_RESULTS,
            "key": self._settings.youtube_api_key,
        }
        headers = {
            "User-Agent": self._settings.youtube_application_name,
            "Accept": "application/json",
        }

        request_start = datetime.now(tz=timezone.utc)
        started = time.perf_counter()
        try:
            response = await self._http.get(
                _PLAYLIST_ITEMS_URL,
                params=params,
                headers=headers,
                timeout=self._settings.upstream_timeout_seconds,
            )
        except httpx.HTTPError as exc:
            self._track(request_start, started, success=False)
            self._logger.error(
                "youtube_request_failed",
                playlist_id=playlist_id,
                error=str(exc),
            )
            raise UpstreamFetchError(
                message=f"playlistItems request failed: {exc}",
                provider_name=_PROVIDER_NAME,
            ) from exc

        if response.status_code != 200:
            self._track(request_start, started, success=False)
            raise self._error_for_response(response)

        try:
            payload = response.json()
        except ValueError as exc:
            self._track(request_start, started, success=False)
            raise UpstreamFetchError(
                message="playlistItems response is not valid JSON",
                provider_name=_PROVIDER_NAME,
                status_code=response.status_code,
            ) from exc

        if not isinstance(payload, dict):
            self._track(request_start, started, success=False)
            raise UpstreamFetchError(
                message="playlistItems response is not a JSON object",
                provider_name=_PROVIDER_NAME,
                status_code=response.status_code,
            )

        self._track(request_start, started, success=True)
        return payload

    def _track(self, request_start: datetime, started: float, success: bool) -> None:
        """Report the call to telemetry; a failing sink is logged, never raised."""
        duration = timedelta(seconds=time.perf_counter() - started)
        try:
            self._telemetry.track_dependency(
                _DEPENDENCY_NAME, _COMMAND_NAME, request_start, duration, success
            )
        except Exception as exc:  # noqa: BLE001
            self._logger.warning("telemetry_emit_failed", error=str(exc))

    def _error_for_response(self, response: httpx.Response) -> UpstreamFetchError:
        """Translate a non-200 response into the matching error type."""
        message, reason = _google_error_details(response)
        status = response.status_code
        self._logger.error(
            "youtube_request_rejected",
            status=status,
            reason=reason,
            error=message,
        )
        text = f"playlistItems returned HTTP {status}"
        if message:
            text = f"{text}: {message}"

        if status == 429 or (status == 403 and reason in _RATE_LIMIT_REASONS):
            return RateLimitError(message=text, provider_name=_PROVIDER_NAME, status_code=status)
        return UpstreamFetchError(message=text, provider_name=_PROVIDER_NAME, status_code=status)

    def _map_item(self, item: Any) -> Show:
        """Map one ``playlistItem`` resource to a :class:`Show`."""
        item_id = item.get("id") if isinstance(item, dict) else None
        try:
            snippet = item["snippet"]
            video_id = snippet["resourceId"]["videoId"]
            raw_title = snippet.get("title") or ""
            published_at = parse_published_at(snippet["publishedAt"])
            thumbnail = snippet["thumbnails"]["high"]["url"]
            item_playlist_id = snippet.get("playlistId") or self._settings.youtube_playlist_id
            position = snippet.get("position")
            index = int(position) if position is not None else 0
            # pydantic.ValidationError is a ValueError, so bad field types land below too.
            return Show(
                provider=YOUTUBE_PROVIDER,
                provider_id=video_id,
                title=extract_display_title(raw_title),
                description=snippet.get("description") or "",
                show_date=published_at,
                thumbnail_url=thumbnail,
                url=watch_url(video_id, item_playlist_id, index),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise MalformedItemError(
                message=f"cannot map playlist item {item_id!r}: {exc!r}",
                provider_name=_PROVIDER_NAME,
                item_id=item_id,
            ) from exc


def _google_error_details(response: httpx.Response) -> tuple[str, str | None]:
    """Pull ``error.message`` and the first ``error.errors[].reason`` from a body."""
    try:
        body = response.json()
    except ValueError:
        return "", None
    if not isinstance(body, dict) or not isinstance(body.get("error"), dict):
        return "", None

    error = body["error"]
    reason = None
    details = error.get("errors")
    if isinstance(details, list) and details and isinstance(details[0], dict):
        reason = details[0].get("reason")
    return str(error.get("message") or ""), reason
