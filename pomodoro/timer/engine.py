"""Timer state machine for Pomodoro.

States
------
WORKING × {running, paused}   Work interval counting down (or frozen).
RESTING × {running, paused}   Rest interval counting down (or frozen).

Transitions
-----------
(mode, paused)  ↔ (mode, running)     toggle_running()
(mode, running) → (other, paused)     remaining time reaches 0

The engine never schedules itself.  Whoever owns it (``TimerClock`` in
the app) calls ``tick(delta)`` at a fixed cadence while running and reads
back a ``Snapshot`` to render.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum


logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class Mode(Enum):
    WORKING = "working"
    RESTING = "resting"


class DisplayFormat(Enum):
    CENTISECONDS = "centiseconds"  # SS:CC
    MINUTES = "minutes"            # MM:SS


# ── constants ─────────────────────────────────────────────────────────────

WORK_DURATION = 25.0   # seconds
REST_DURATION = 10.0   # seconds
TICK_INTERVAL = 0.01   # seconds between scheduler ticks

# remaining time is kept at nanosecond precision so repeated fractional
# ticks land exactly on zero
_PRECISION = 9


# ── formatting ────────────────────────────────────────────────────────────


def format_centiseconds(remaining: float) -> str:
    """``SS:CC`` — whole seconds, then hundredths (truncated)."""
    centis = int(round(max(0.0, remaining) * 100, _PRECISION - 2))
    seconds, hundredths = divmod(centis, 100)
    return f"{seconds:02d}:{hundredths:02d}"


def format_minutes(remaining: float) -> str:
    """``MM:SS`` — partial seconds count as a full second."""
    whole = math.ceil(round(max(0.0, remaining), _PRECISION))
    minutes, seconds = divmod(whole, 60)
    return f"{minutes:02d}:{seconds:02d}"


_FORMATTERS = {
    DisplayFormat.CENTISECONDS: format_centiseconds,
    DisplayFormat.MINUTES: format_minutes,
}


# ── snapshot ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Snapshot:
    """Everything the presentation layer needs to draw one frame."""

    display: str
    progress: float
    mode: Mode
    is_running: bool


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine:
    """Work/rest countdown with an automatic pause at every interval end.

    Durations, tick interval and display format are fixed at
    construction.  The only mutators are ``tick`` and ``toggle_running``.
    """

    def __init__(
        self,
        work_duration: float = WORK_DURATION,
        rest_duration: float = REST_DURATION,
        *,
        tick_interval: float = TICK_INTERVAL,
        display_format: DisplayFormat = DisplayFormat.CENTISECONDS,
    ) -> None:
        for name, value in (
            ("work_duration", work_duration),
            ("rest_duration", rest_duration),
            ("tick_interval", tick_interval),
        ):
            if not math.isfinite(value) or value <= 0:
                raise ValueError(
                    f"{name} must be positive and finite, got {value!r}"
                )

        # ── configuration ─────────────────────────────────────────────
        self._durations: dict[Mode, float] = {
            Mode.WORKING: float(work_duration),
            Mode.RESTING: float(rest_duration),
        }
        self._tick_interval: float = float(tick_interval)
        self._formatter = _FORMATTERS[display_format]
        self._display_format = display_format

        # ── countdown state ───────────────────────────────────────────
        self._mode: Mode = Mode.WORKING
        self._remaining: float = self._durations[Mode.WORKING]
        self._running: bool = False

        # ── bookkeeping for observers ─────────────────────────────────
        self._intervals_completed: int = 0
        self._last_finished: Snapshot | None = None

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def remaining(self) -> float:
        """Seconds left in the current interval."""
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def work_duration(self) -> float:
        return self._durations[Mode.WORKING]

    @property
    def rest_duration(self) -> float:
        return self._durations[Mode.RESTING]

    @property
    def tick_interval(self) -> float:
        """Cadence the owner should tick at.  Informational only."""
        return self._tick_interval

    @property
    def display_format(self) -> DisplayFormat:
        return self._display_format

    @property
    def intervals_completed(self) -> int:
        """How many times the countdown has reached zero."""
        return self._intervals_completed

    @property
    def last_finished(self) -> Snapshot | None:
        """Frame of the interval that ended most recently (full ring)."""
        return self._last_finished

    @property
    def display(self) -> str:
        return self._formatter(self._remaining)

    @property
    def progress(self) -> float:
        """0.0 → 1.0 through the current interval."""
        return self.progress_for(self._mode, self._remaining)

    def duration_for(self, mode: Mode) -> float:
        return self._durations[mode]

    def progress_for(self, mode: Mode, remaining: float) -> float:
        duration = self._durations[mode]
        return max(0.0, min(1.0, 1.0 - remaining / duration))

    def snapshot(self) -> Snapshot:
        return Snapshot(
            display=self.display,
            progress=self.progress,
            mode=self._mode,
            is_running=self._running,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def toggle_running(self) -> Snapshot:
        """Play ↔ pause.  Always succeeds."""
        self._running = not self._running
        logger.debug(
            "%s %s at %.2fs",
            "resumed" if self._running else "paused",
            self._mode.value, self._remaining,
        )
        return self.snapshot()

    def tick(self, delta: float) -> Snapshot:
        """Advance the countdown by *delta* seconds.

        Stray ticks while paused and non-positive deltas leave the state
        untouched.
        """
        if not self._running or delta <= 0:
            return self.snapshot()

        self._remaining = round(self._remaining - delta, _PRECISION)
        if self._remaining <= 0:
            self._switch_mode()
        return self.snapshot()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _switch_mode(self) -> None:
        finished = self._mode
        self._last_finished = Snapshot(
            display=self._formatter(0.0),
            progress=1.0,
            mode=finished,
            is_running=False,
        )
        self._intervals_completed += 1

        if finished == Mode.WORKING:
            self._mode = Mode.RESTING
        else:
            self._mode = Mode.WORKING
        self._remaining = self._durations[self._mode]
        self._running = False

        logger.debug(
            "%s finished, %s ready (%.2fs)",
            finished.value, self._mode.value, self._remaining,
        )
