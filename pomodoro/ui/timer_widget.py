"""Main timer card: progress ring with the countdown, play/pause below."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QSizePolicy,
)

from ..timer.clock import TimerClock
from ..timer.engine import Mode, Snapshot
from .progress_ring import ProgressRing
from .styles import play_pause_style


PLAY_GLYPH = "▶"
PAUSE_GLYPH = "❚❚"


class TimerWidget(QWidget):
    """Renders ``TimerClock`` snapshots and forwards play/pause clicks."""

    def __init__(self, clock: TimerClock, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._clock = clock
        # ring stays full from an interval end until the next run starts
        self._holding_full = False
        self._build_ui()
        self._connect_signals()

        snap = clock.snapshot()
        self._apply_mode(snap.mode)
        self._on_snapshot(snap)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 24)
        layout.setSpacing(0)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._ring = ProgressRing(
            self, tick_interval=self._clock.engine.tick_interval,
        )
        self._ring.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding,
        )
        layout.addWidget(self._ring, 1)

        layout.addSpacing(32)

        btn_row = QHBoxLayout()
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._play_pause_btn = QPushButton(PLAY_GLYPH, self)
        self._play_pause_btn.setObjectName("playPauseButton")
        self._play_pause_btn.setToolTip("Start / pause (Space)")
        self._play_pause_btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        btn_row.addWidget(self._play_pause_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._play_pause_btn.clicked.connect(self._clock.toggle)
        self._clock.snapshot_changed.connect(self._on_snapshot)
        self._clock.interval_completed.connect(self._on_interval_completed)
        self._clock.mode_changed.connect(self._apply_mode)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_snapshot(self, snap: Snapshot) -> None:
        self._ring.set_time_text(snap.display)
        if snap.is_running:
            self._holding_full = False
        if not self._holding_full:
            self._ring.set_progress(snap.progress)
        self._play_pause_btn.setText(
            PAUSE_GLYPH if snap.is_running else PLAY_GLYPH
        )

    def _on_interval_completed(self, finished: Snapshot) -> None:
        self._ring.set_progress(finished.progress, animate=False)
        self._holding_full = True

    def _apply_mode(self, mode: Mode) -> None:
        # Colors only change here, never per tick
        self._ring.set_mode(mode)
        self._play_pause_btn.setStyleSheet(play_pause_style(mode))
