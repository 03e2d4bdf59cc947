"""Unit tests for the Show / ShowList models and the error hierarchy."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from liveshows.models.show import Show, ShowList
from liveshows.utils.errors import (
    LiveShowsError,
    MalformedItemError,
    RateLimitError,
    UpstreamFetchError,
)


def _show(**overrides) -> Show:  # noqa: ANN003
    fields = {
        "provider_id": "vid-one",
        "show_date": datetime(2016, 5, 10, 9, 30, tzinfo=timezone(timedelta(hours=-7))),
        "url": "https://www.youtube.com/watch?v=vid-one&list=PLtest&index=0",
    }
    fields.update(overrides)
    return Show(**fields)


class TestShow:
    def test_defaults(self) -> None:
        show = _show()
        assert show.provider == "YouTube"
        assert show.title == ""
        assert show.description == ""
        assert show.thumbnail_url == ""

    def test_is_frozen(self) -> None:
        show = _show()
        with pytest.raises(ValidationError):
            show.title = "changed"  # type: ignore[misc]

    def test_offset_is_kept(self) -> None:
        assert _show().show_date.utcoffset() == timedelta(hours=-7)

    def test_missing_required_field(self) -> None:
        with pytest.raises(ValidationError):
            Show(provider_id="x", url="u")  # type: ignore[call-arg]


class TestShowList:
    def test_empty_defaults(self) -> None:
        result = ShowList()
        assert result.shows == ()
        assert result.more_shows_url is None

    def test_is_frozen(self) -> None:
        result = ShowList(shows=[_show()])
        with pytest.raises(ValidationError):
            result.more_shows_url = "https://example.com"  # type: ignore[misc]

    def test_shows_cannot_be_edited_in_place(self) -> None:
        result = ShowList(shows=[_show()])
        assert isinstance(result.shows, tuple)
        with pytest.raises(AttributeError):
            result.shows.append(_show(provider_id="vid-two"))  # type: ignore[attr-defined]
        assert len(result.shows) == 1


class TestErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(RateLimitError, UpstreamFetchError)
        assert issubclass(MalformedItemError, UpstreamFetchError)
        assert issubclass(UpstreamFetchError, LiveShowsError)

    def test_fields_and_str(self) -> None:
        exc = RateLimitError("quota exceeded", provider_name="youtube", status_code=403)
        assert exc.message == "quota exceeded"
        assert exc.provider_name == "youtube"
        assert exc.status_code == 403
        assert str(exc) == "[youtube] quota exceeded"

    def test_malformed_item_carries_item_id(self) -> None:
        exc = MalformedItemError("bad date", provider_name="youtube", item_id="item-1")
        assert exc.item_id == "item-1"
        assert exc.status_code is None
