"""Recorded-show models.

Pydantic v2 models, frozen so a cached :class:`ShowList` can be handed to
any number of concurrent callers without copying.  A refresh replaces the
cached list wholesale instead of editing it.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

YOUTUBE_PROVIDER = "YouTube"


class Show(BaseModel):
    """One recorded episode of the show."""

    model_config = ConfigDict(frozen=True)

    provider: str = Field(default=YOUTUBE_PROVIDER, description="Hosting platform name.")
    provider_id: str = Field(description="Upstream video id.")
    # Derived from the raw upstream title; empty when the title does not
    # follow the "<series> - <date> - <topic>" convention.
    title: str = ""
    description: str = ""
    show_date: datetime = Field(description="Publication time with its original UTC offset.")
    thumbnail_url: str = ""
    url: str = Field(description="Watch URL built from video id, playlist id and position.")


class ShowList(BaseModel):
    """The result of one retrieval, either live or from the fallback set."""

    model_config = ConfigDict(frozen=True)

    # A tuple, so a cached list shared between callers cannot be edited in place.
    shows: tuple[Show, ...] = ()
    # Only set when upstream reported a further page of results.
    more_shows_url: str | None = None
