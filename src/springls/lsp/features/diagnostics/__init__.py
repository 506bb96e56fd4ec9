"""Diagnostics feature for springls."""

from .diagnostics import DiagnosticsService, register_diagnostics

__all__ = ["DiagnosticsService", "register_diagnostics"]
