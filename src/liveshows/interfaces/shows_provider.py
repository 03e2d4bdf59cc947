"""Abstract base class for recorded-show sources.

The shows service depends on this contract rather than on a concrete
YouTube client, so tests (and any future second platform) can inject
their own source.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from liveshows.models.show import ShowList


class IShowsProvider(ABC):
    """Contract for a live source of recorded shows."""

    @abstractmethod
    async def fetch(self) -> ShowList:
        """Fetch the current page of recorded shows from upstream.

        Returns
        -------
        ShowList
            Shows in upstream order, with ``more_shows_url`` set when
            upstream has further pages.

        Raises
        ------
        liveshows.utils.errors.UpstreamFetchError
            On transport failure, a non-success response, or a payload
            that cannot be mapped.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for this source, e.g. ``"youtube"``."""
