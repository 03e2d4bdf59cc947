"""Telemetry sink that writes dependency observations to the structured log.

Good enough for local runs and for log-shipping deployments; an APM
exporter would implement the same :class:`ITelemetryProvider` contract.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from liveshows.interfaces.telemetry_provider import ITelemetryProvider
from liveshows.utils.logging import get_logger


class LogTelemetryProvider(ITelemetryProvider):
    """Emit one ``dependency_call`` log event per tracked call."""

    def __init__(self) -> None:
        self._logger = get_logger(__name__)

    def track_dependency(
        self,
        dependency_name: str,
        command_name: str,
        start_time: datetime,
        duration: timedelta,
        success: bool,
    ) -> None:
        self._logger.info(
            "dependency_call",
            dependency=dependency_name,
            command=command_name,
            start_time=start_time.isoformat(),
            duration_ms=round(duration.total_seconds() * 1000, 2),
            success=success,
        )
