"""Unit tests for the shows CLI."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from liveshows.cli import shows as shows_cli
from liveshows.cli.shows import build_parser, format_json_output, format_text_output, main
from liveshows.models.show import Show, ShowList


@pytest.fixture()
def offline_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI in fallback mode with logging left to the test config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("YOUTUBE_API_KEY", "")
    monkeypatch.setenv("YOUTUBE_PLAYLIST_ID", "")
    monkeypatch.setenv("ADMIN_USERS", "alice")
    monkeypatch.setattr(shows_cli, "configure_logging", lambda *a, **kw: None)


def _show_list() -> ShowList:
    return ShowList(
        shows=[
            Show(
                provider_id="vid-one",
                title="RC2 is out",
                show_date=datetime(2016, 5, 10, 9, 30, tzinfo=timezone(timedelta(hours=-7))),
                thumbnail_url="https://i.ytimg.com/vi/vid-one/hqdefault.jpg",
                url="https://www.youtube.com/watch?v=vid-one&list=PLtest&index=0",
            ),
            Show(
                provider_id="vid-two",
                show_date=datetime(2016, 5, 3, 17, 45, tzinfo=timezone.utc),
                thumbnail_url="https://i.ytimg.com/vi/vid-two/hqdefault.jpg",
                url="https://www.youtube.com/watch?v=vid-two&list=PLtest&index=1",
            ),
        ],
        more_shows_url="https://www.youtube.com/playlist?list=PLtest",
    )


class TestFormatting:
    def test_text_output(self) -> None:
        text = format_text_output(_show_list())

        lines = text.splitlines()
        assert lines[0] == "2016-05-10 09:30 -0700  RC2 is out"
        assert lines[1] == "    https://www.youtube.com/watch?v=vid-one&list=PLtest&index=0"
        assert lines[2] == "2016-05-03 17:45 +0000  (untitled)"
        assert lines[-1] == "More shows: https://www.youtube.com/playlist?list=PLtest"

    def test_text_output_empty(self) -> None:
        assert format_text_output(ShowList(shows=[])) == "No recorded shows."

    def test_json_output_keeps_offsets(self) -> None:
        data = json.loads(format_json_output(_show_list()))

        assert data["more_shows_url"] == "https://www.youtube.com/playlist?list=PLtest"
        assert data["shows"][0]["provider"] == "YouTube"
        assert data["shows"][0]["show_date"] == "2016-05-10T09:30:00-07:00"
        assert data["shows"][1]["title"] == ""


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.no_cache is False
        assert args.user is None
        assert args.repeat == 1
        assert args.json_output is False

    def test_flags(self) -> None:
        args = build_parser().parse_args(["--no-cache", "--user", "alice", "--json", "-q"])
        assert args.no_cache is True
        assert args.user == "alice"
        assert args.json_output is True
        assert args.quiet is True


@pytest.mark.usefixtures("offline_env")
class TestMain:
    def test_fallback_listing_as_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["--json", "--quiet"])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert [s["provider_id"] for s in data["shows"]] == [
            "7O81CAjmOXk",
            "bFXseBPGAyQ",
            "APagQ1CIVGA",
            "7O81CAjmOXk",
        ]
        assert data["more_shows_url"] is None

    def test_fallback_listing_as_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--repeat", "2"]) == 0
        out = capsys.readouterr().out
        assert "ASP.NET Community Standup - July 21st 2015" in out

    def test_unauthenticated_bypass_is_logged(self) -> None:
        with capture_logs() as logs:
            assert main(["--no-cache", "--user", "mallory", "-q"]) == 0

        denied = [entry for entry in logs if entry["event"] == "cache_bypass_denied"]
        assert denied and denied[0]["user"] == "mallory"

    def test_authenticated_bypass_is_not_denied(self) -> None:
        with capture_logs() as logs:
            assert main(["--no-cache", "--user", "alice", "-q"]) == 0

        assert not any(entry["event"] == "cache_bypass_denied" for entry in logs)

    def test_configuration_error_exits_non_zero(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("YOUTUBE_API_KEY", "AIza-test")

        assert main(["-q"]) == 1
        assert "YOUTUBE_PLAYLIST_ID is empty" in capsys.readouterr().err
