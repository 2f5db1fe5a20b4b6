"""Runtime services (telemetry) shared by the ziplist package."""

from . import telemetry

__all__ = ["telemetry"]
