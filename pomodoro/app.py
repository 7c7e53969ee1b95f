"""Main application window for Pomodoro."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QMainWindow

from .timer.engine import TimerEngine
from .timer.clock import TimerClock
from .ui.timer_widget import TimerWidget
from .ui.styles import PALETTE, build_stylesheet
from .settings import Settings, load_settings, save_settings


logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> TimerEngine:
    """Construct the engine from the timer fields of *settings*."""
    return TimerEngine(
        settings.work_duration,
        settings.rest_duration,
        tick_interval=settings.tick_interval,
        display_format=settings.display_format_enum(),
    )


class PomodoroApp(QMainWindow):
    """Main application window."""

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Pomodoro")
        self.setMinimumSize(280, 360)

        # ── geometry save timer (debounced) ────────────────────────────
        self._geometry_save_timer = QTimer(self)
        self._geometry_save_timer.setSingleShot(True)
        self._geometry_save_timer.setInterval(500)
        self._geometry_save_timer.timeout.connect(self._save_geometry)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()

        # ── timer ─────────────────────────────────────────────────────
        self._engine = build_engine(self._settings)
        self._clock = TimerClock(self._engine, self)

        # ── central widget ────────────────────────────────────────────
        self.setStyleSheet(build_stylesheet(PALETTE))
        self._timer_widget = TimerWidget(self._clock, self)
        self.setCentralWidget(self._timer_widget)

        # ── restore window state ───────────────────────────────────────
        self._restore_geometry()
        if self._settings.always_on_top:
            self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)

        logger.debug(
            "window ready: work=%ss rest=%ss tick=%ss",
            self._engine.work_duration,
            self._engine.rest_duration,
            self._engine.tick_interval,
        )

    @property
    def clock(self) -> TimerClock:
        return self._clock

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW STATE
    # ══════════════════════════════════════════════════════════════════

    def _restore_geometry(self) -> None:
        """Restore window position and size from settings."""
        s = self._settings
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)
        if s.window_width and s.window_height:
            self.resize(s.window_width, s.window_height)

    def _save_geometry(self) -> None:
        """Persist current window geometry to settings."""
        if not self.isVisible():
            return
        pos = self.pos()
        size = self.size()
        self._settings.window_x = pos.x()
        self._settings.window_y = pos.y()
        self._settings.window_width = size.width()
        self._settings.window_height = size.height()
        save_settings(self._settings)

    def _schedule_geometry_save(self) -> None:
        """Debounce geometry saves — restart 500ms timer on each move/resize."""
        if hasattr(self, "_geometry_save_timer"):
            self._geometry_save_timer.start()

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _on_space(self) -> None:
        """Start or pause the timer."""
        self._clock.toggle()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Stop ticking before the window goes away."""
        self._geometry_save_timer.stop()
        self._save_geometry()
        self._clock.stop()
        event.accept()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._schedule_geometry_save()

    def moveEvent(self, event) -> None:  # type: ignore[override]
        super().moveEvent(event)
        self._schedule_geometry_save()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Space toggles play/pause."""
        if event.key() == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        super().keyPressEvent(event)
