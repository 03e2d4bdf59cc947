"""Custom exception hierarchy for liveshows.

All application exceptions inherit from :class:`LiveShowsError`, which
carries an optional ``provider_name`` so error handlers can tell which
upstream service (e.g. "youtube") caused the failure.

    LiveShowsError  (base -- catch-all for any liveshows error)
    +-- ConfigurationError   (startup / inconsistent config)
    +-- UpstreamFetchError   (network failure or non-success upstream response)
        +-- RateLimitError       (quota exhausted / 403 / 429)
        +-- MalformedItemError   (one playlist item could not be mapped)

A missing API key is not an error: it switches the
shows service to the fallback data set instead of failing.
"""


class LiveShowsError(Exception):
    """Base exception for all liveshows errors.

    The ``__str__`` method prefixes the provider name in brackets for
    structured log output, e.g. ``[youtube] playlistItems returned 500``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class ConfigurationError(LiveShowsError):
    """Raised when configuration is invalid or inconsistent at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Upstream errors
# ---------------------------------------------------------------------------


class UpstreamFetchError(LiveShowsError):
    """Raised when the upstream listing call fails.

    Covers transport errors, non-200 responses and payloads that cannot be
    mapped to :class:`~liveshows.models.show.ShowList`.  There is no
    built-in retry; the caller decides how to surface the failure.
    """

    def __init__(
        self,
        message: str = "Upstream fetch failed",
        provider_name: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self._status_code = status_code

    @property
    def status_code(self) -> int | None:
        """HTTP status returned by upstream, or ``None`` for transport errors."""
        return self._status_code


class RateLimitError(UpstreamFetchError):
    """Raised when upstream rejects the call for quota or rate-limit reasons."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        provider_name: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name, status_code=status_code)


class MalformedItemError(UpstreamFetchError):
    """Raised when a single playlist item cannot be mapped to a Show.

    Under the default abort policy this fails the whole fetch; no partial
    list is ever cached.
    """

    def __init__(
        self,
        message: str = "Malformed playlist item",
        provider_name: str | None = None,
        item_id: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self._item_id = item_id

    @property
    def item_id(self) -> str | None:
        return self._item_id
