"""Qt scheduler that drives a ``TimerEngine``.

The engine is pure state; this object owns the repeating ``QTimer`` and
turns engine snapshots into Qt signals for the widgets.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, Qt, pyqtSignal

from .engine import TimerEngine, Snapshot


logger = logging.getLogger(__name__)


class TimerClock(QObject):
    """Starts/stops the periodic tick to match the engine's running flag.

    Signals
    -------
    snapshot_changed(snapshot: Snapshot)
        Emitted after every tick and every toggle.
    mode_changed(mode: Mode)
        Emitted when an interval ends and the mode flips.
    interval_completed(snapshot: Snapshot)
        Final full-ring frame of the interval that just ended.
    running_changed(is_running: bool)
        Emitted on toggle and on the automatic pause at interval end.
    """

    snapshot_changed = pyqtSignal(object)
    mode_changed = pyqtSignal(object)
    interval_completed = pyqtSignal(object)
    running_changed = pyqtSignal(bool)

    def __init__(self, engine: TimerEngine, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._engine = engine

        # ── Qt timer ──────────────────────────────────────────────────
        self._qt_timer = QTimer(self)
        self._qt_timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._qt_timer.setInterval(max(1, round(engine.tick_interval * 1000)))
        self._qt_timer.timeout.connect(self._on_timeout)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def is_active(self) -> bool:
        """True while the scheduler is firing."""
        return self._qt_timer.isActive()

    def snapshot(self) -> Snapshot:
        return self._engine.snapshot()

    def toggle(self) -> None:
        """Play/pause.  Keeps the scheduler in step with the engine."""
        snap = self._engine.toggle_running()
        if snap.is_running:
            self._qt_timer.start()
            logger.debug("scheduler started (%d ms)", self._qt_timer.interval())
        else:
            self._qt_timer.stop()
            logger.debug("scheduler stopped")
        self.running_changed.emit(snap.is_running)
        self.snapshot_changed.emit(snap)

    def stop(self) -> None:
        """Release the scheduler (window closing).  Pauses a running engine."""
        self._qt_timer.stop()
        if self._engine.is_running:
            snap = self._engine.toggle_running()
            self.running_changed.emit(False)
            self.snapshot_changed.emit(snap)
        logger.debug("clock stopped")

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _on_timeout(self) -> None:
        completed_before = self._engine.intervals_completed
        snap = self._engine.tick(self._engine.tick_interval)

        if self._engine.intervals_completed != completed_before:
            self._qt_timer.stop()
            finished = self._engine.last_finished
            logger.info(
                "%s interval complete, %s up next",
                finished.mode.value, snap.mode.value,
            )
            self.interval_completed.emit(finished)
            self.mode_changed.emit(snap.mode)
            self.running_changed.emit(False)
        elif not snap.is_running:
            # tick arrived while paused; nothing should be scheduled
            self._qt_timer.stop()
            return

        self.snapshot_changed.emit(snap)
