"""Command-line listing of recorded shows.

Usage::

    python -m liveshows.cli.shows
    python -m liveshows.cli.shows --json
    python -m liveshows.cli.shows --user alice --no-cache
    python -m liveshows.cli.shows --repeat 3

``--no-cache`` only bypasses the cache for a user named in ADMIN_USERS;
anyone else silently gets the cached list.  Logs go to stderr so stdout
carries nothing but the listing.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from liveshows.config.settings import Settings
from liveshows.models.show import ShowList
from liveshows.services.access import is_authenticated_operator, is_privileged_bypass_request
from liveshows.utils.errors import LiveShowsError
from liveshows.utils.logging import configure_logging, get_logger


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_text_output(show_list: ShowList) -> str:
    """Format a show list as a human-readable table."""
    lines: list[str] = []
    if not show_list.shows:
        lines.append("No recorded shows.")

    for show in show_list.shows:
        date = show.show_date.strftime("%Y-%m-%d %H:%M %z")
        lines.append(f"{date}  {show.title or '(untitled)'}")
        lines.append(f"    {show.url}")

    if show_list.more_shows_url:
        lines.append("")
        lines.append(f"More shows: {show_list.more_shows_url}")
    return "\n".join(lines)


def format_json_output(show_list: ShowList) -> str:
    """Serialize a show list to JSON; datetimes keep their UTC offsets."""
    return json.dumps(show_list.model_dump(mode="json"), indent=2)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


def _suppress_logs() -> None:
    """Send only WARNING+ events to stderr, including httpx's own logger."""
    configure_logging(log_level="WARNING", stream=sys.stderr)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


async def run(args: argparse.Namespace, settings: Settings) -> int:
    """Retrieve and print the shows; returns the process exit code."""
    from liveshows.main import application

    logger = get_logger(__name__)
    authenticated = is_authenticated_operator(args.user, settings.get_admin_users())
    if args.no_cache and not authenticated:
        logger.warning("cache_bypass_denied", user=args.user)
    bypass = is_privileged_bypass_request(authenticated, args.no_cache)

    try:
        async with application(settings) as components:
            service = components["shows_service"]
            if args.clear_cache:
                await service.clear_cache()

            show_list = None
            for _ in range(max(args.repeat, 1)):
                show_list = await service.get_recorded_shows(bypass_cache=bypass)
    except LiveShowsError as exc:
        logger.error(
            "shows_retrieval_failed",
            error_type=type(exc).__name__,
            message=exc.message,
            provider=exc.provider_name,
        )
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json_output:
        print(format_json_output(show_list))
    else:
        print(format_text_output(show_list))
    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the shows CLI."""
    parser = argparse.ArgumentParser(
        prog="python -m liveshows.cli.shows",
        description="List recorded shows from the configured YouTube playlist.",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Fetch live from YouTube instead of the cache (requires --user).",
    )
    parser.add_argument(
        "--user",
        type=str,
        default=None,
        help="Operator name, checked against ADMIN_USERS.",
    )
    parser.add_argument(
        "--clear-cache",
        action="store_true",
        help="Discard the cached list before retrieving.",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=1,
        help="Retrieve N times in one process (later calls hit the cache).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output results as JSON instead of a table.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point: parse arguments, configure logging, run."""
    args = build_parser().parse_args(argv)
    settings = Settings()

    if args.quiet:
        _suppress_logs()
    else:
        configure_logging(
            log_level=settings.log_level,
            json_output=settings.app_env == "production",
            stream=sys.stderr,
        )

    return asyncio.run(run(args, settings))


if __name__ == "__main__":
    sys.exit(main())
