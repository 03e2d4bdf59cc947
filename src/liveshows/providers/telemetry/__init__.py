"""Telemetry sinks."""

from liveshows.providers.telemetry.log_telemetry import LogTelemetryProvider

__all__ = ["LogTelemetryProvider"]
