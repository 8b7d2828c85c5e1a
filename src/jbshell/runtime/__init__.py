"""Runtime services shared across the shell (telemetry)."""

from . import telemetry

__all__ = ["telemetry"]
