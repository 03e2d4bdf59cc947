"""Application settings loaded from environment variables via pydantic-settings.

Sources, highest priority first:

  1. Environment variables, e.g. ``YOUTUBE_API_KEY=AIza...``
  2. A ``.env`` file in the working directory (local development)
  3. The defaults declared below

Field ``youtube_api_key`` maps to env var ``YOUTUBE_API_KEY``.  Leaving it
empty is a supported mode: the shows service then serves the built-in
fallback data set and never calls upstream.
"""

from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class ItemErrorPolicy(str, Enum):  # noqa: UP042
    """What to do when one playlist item cannot be mapped to a Show."""

    ABORT = "abort"  # fail the whole fetch, nothing is cached
    SKIP = "skip"    # log the item and keep the rest


class Settings(BaseSettings):
    """liveshows application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === YouTube Data API ===
    youtube_application_name: str = "liveshows"
    youtube_api_key: str = ""
    youtube_playlist_id: str = ""

    # === Shows cache ===
    shows_cache_ttl_hours: float = 24.0
    # When True, a privileged bypass fetch also replaces the shared cached
    # list. Off by default: bypass results are returned to the caller only.
    bypass_refreshes_cache: bool = False
    item_error_policy: ItemErrorPolicy = ItemErrorPolicy.ABORT
    upstream_timeout_seconds: float = 10.0

    # === Access control ===
    # Comma-separated operator names allowed to authenticate for bypass.
    admin_users: str = ""

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

    @property
    def is_live_mode(self) -> bool:
        """True when an upstream credential is configured."""
        return bool(self.youtube_api_key)

    def get_admin_users(self) -> list[str]:
        """Return the configured admin user names, blanks removed."""
        return [name.strip() for name in self.admin_users.split(",") if name.strip()]
