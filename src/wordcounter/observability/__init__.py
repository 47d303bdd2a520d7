"""Logging and metrics for wordcounter."""

from __future__ import annotations

from .logging import configure_logging
from .metrics import METRICS, export_prometheus, increment, timed

__all__ = ["METRICS", "configure_logging", "export_prometheus", "increment", "timed"]
