"""Freizeit-Engine (Statusberechnung, Zeitquellen, Polling)."""

from .free_time import FreeTimeEngine, current_status, is_active
from .clock import Clock, FixedClock, SystemClock, calendar_weekday
from .poller import StatusPoller

__all__ = [
    "FreeTimeEngine",
    "current_status",
    "is_active",
    "Clock",
    "FixedClock",
    "SystemClock",
    "calendar_weekday",
    "StatusPoller",
]
