"""Abstract base class for dependency-call telemetry sinks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta


class ITelemetryProvider(ABC):
    """Receives one observation per outbound dependency call.

    Emission is fire-and-forget.  Callers guard every call so that a
    failing sink can never fail the operation being observed.
    """

    @abstractmethod
    def track_dependency(
        self,
        dependency_name: str,
        command_name: str,
        start_time: datetime,
        duration: timedelta,
        success: bool,
    ) -> None:
        """Record a completed dependency call.

        Parameters
        ----------
        dependency_name:
            Logical name of the dependency, e.g. ``"YouTube.PlayListItemsApi"``.
        command_name:
            Operation invoked on it, e.g. ``"List"``.
        start_time:
            UTC time the call started.
        duration:
            Wall-clock duration of the call.
        success:
            Whether the call produced a usable result.
        """
