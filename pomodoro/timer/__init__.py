"""Timer package."""

from .engine import (
    TimerEngine,
    Snapshot,
    Mode,
    DisplayFormat,
    WORK_DURATION,
    REST_DURATION,
    TICK_INTERVAL,
    format_centiseconds,
    format_minutes,
)
from .clock import TimerClock

__all__ = [
    "TimerEngine",
    "TimerClock",
    "Snapshot",
    "Mode",
    "DisplayFormat",
    "WORK_DURATION",
    "REST_DURATION",
    "TICK_INTERVAL",
    "format_centiseconds",
    "format_minutes",
]
