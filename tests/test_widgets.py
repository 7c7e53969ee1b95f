"""Tests for the ring, the timer card and the main window."""

from __future__ import annotations

import pytest
from PyQt6.QtCore import Qt, QEvent, QAbstractAnimation
from PyQt6.QtGui import QColor, QKeyEvent

from pomodoro.app import PomodoroApp, build_engine
from pomodoro.settings import Settings, load_settings
from pomodoro.timer.engine import Mode, DisplayFormat
from pomodoro.ui.progress_ring import ProgressRing
from pomodoro.ui.styles import MODE_COLORS
from pomodoro.ui.timer_widget import TimerWidget, PLAY_GLYPH, PAUSE_GLYPH


# ═══════════════════════════════════════════════════════════════════════
#  PROGRESS RING
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestProgressRing:
    def test_defaults(self):
        ring = ProgressRing()
        assert ring.progress == 0.0
        assert ring.caption == "WORK"
        assert ring.target_color == QColor(MODE_COLORS[Mode.WORKING])

    def test_set_progress_clamps(self):
        ring = ProgressRing()
        ring.set_progress(1.7)
        assert ring.progress == 1.0
        ring.set_progress(-0.2)
        assert ring.progress == 0.0

    def test_zero_progress_snaps(self):
        ring = ProgressRing()
        ring._display_progress = 0.8
        ring.set_progress(0.0)
        assert ring._display_progress == 0.0

    def test_set_progress_without_animation(self):
        ring = ProgressRing()
        ring.set_progress(0.7, animate=False)
        assert ring._display_progress == 0.7
        assert ring._arc_anim.state() != QAbstractAnimation.State.Running

    def test_arc_animation_spans_one_tick(self):
        ring = ProgressRing(tick_interval=0.01)
        assert ring._arc_anim.duration() == 10

    def test_set_mode_changes_caption_and_target(self):
        ring = ProgressRing()
        ring.set_mode(Mode.RESTING)
        assert ring.caption == "REST"
        assert ring.target_color == QColor(MODE_COLORS[Mode.RESTING])

    def test_same_accent_does_not_restart_fade(self):
        ring = ProgressRing()
        ring.set_accent(MODE_COLORS[Mode.WORKING])
        assert ring._color_anim.state() != QAbstractAnimation.State.Running

    def test_paints_without_error(self):
        ring = ProgressRing()
        ring.resize(300, 300)
        ring.set_time_text("12:34")
        ring._display_progress = 0.5
        ring.grab()


# ═══════════════════════════════════════════════════════════════════════
#  TIMER WIDGET
# ═══════════════════════════════════════════════════════════════════════


class TestTimerWidget:
    def test_initial_render(self, clock):
        w = TimerWidget(clock)
        assert w._ring.time_text == "25:00"
        assert w._ring.progress == 0.0
        assert w._play_pause_btn.text() == PLAY_GLYPH

    def test_click_toggles(self, clock):
        w = TimerWidget(clock)
        w._play_pause_btn.click()
        assert clock.engine.is_running is True
        assert w._play_pause_btn.text() == PAUSE_GLYPH

        w._play_pause_btn.click()
        assert clock.engine.is_running is False
        assert w._play_pause_btn.text() == PLAY_GLYPH

    def test_tick_updates_ring(self, clock):
        w = TimerWidget(clock)
        clock.toggle()
        for _ in range(100):
            clock._on_timeout()
        assert w._ring.time_text == "24:00"
        assert w._ring.progress == pytest.approx(0.04)

    def test_mode_switch_recolors(self, clock):
        w = TimerWidget(clock)
        clock.toggle()
        clock.engine._remaining = 0.01
        clock._on_timeout()

        assert w._ring.caption == "REST"
        assert w._ring.target_color == QColor(MODE_COLORS[Mode.RESTING])
        assert MODE_COLORS[Mode.RESTING] in w._play_pause_btn.styleSheet()
        assert w._ring.time_text == "10:00"
        assert w._ring.progress == 1.0
        assert w._play_pause_btn.text() == PLAY_GLYPH

    def test_ring_stays_full_until_resumed(self, clock):
        w = TimerWidget(clock)
        clock.toggle()
        clock.engine._remaining = 0.01
        clock._on_timeout()

        assert w._ring.progress == 1.0
        assert w._ring._display_progress == 1.0
        assert w._ring.time_text == "10:00"

        clock._on_timeout()  # stray tick while paused
        assert w._ring.progress == 1.0

        clock.toggle()
        assert w._ring.progress == 0.0
        assert w._ring._display_progress == 0.0

        clock._on_timeout()
        assert w._ring.progress == pytest.approx(0.001)

    def test_ticks_do_not_recolor(self, clock):
        w = TimerWidget(clock)
        style_before = w._play_pause_btn.styleSheet()
        clock.toggle()
        clock._on_timeout()
        assert w._play_pause_btn.styleSheet() == style_before


# ═══════════════════════════════════════════════════════════════════════
#  MAIN WINDOW
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestPomodoroApp:
    def test_build_engine_from_settings(self):
        eng = build_engine(Settings(
            work_duration=50, rest_duration=20, tick_interval=0.1,
            display_format="minutes",
        ))
        assert eng.work_duration == 50.0
        assert eng.rest_duration == 20.0
        assert eng.tick_interval == 0.1
        assert eng.display_format == DisplayFormat.MINUTES

    def test_window_uses_defaults(self):
        win = PomodoroApp(Settings())
        assert win.windowTitle() == "Pomodoro"
        assert win.engine.snapshot().display == "25:00"
        assert win.clock.is_active is False

    def test_space_toggles(self):
        win = PomodoroApp(Settings())
        press = QKeyEvent(
            QEvent.Type.KeyPress, Qt.Key.Key_Space,
            Qt.KeyboardModifier.NoModifier,
        )
        win.keyPressEvent(press)
        assert win.engine.is_running is True
        assert win.clock.is_active is True

        win.keyPressEvent(press)
        assert win.engine.is_running is False

    def test_close_stops_clock(self):
        win = PomodoroApp(Settings())
        win.show()
        win.clock.toggle()
        win.close()
        assert win.clock.is_active is False
        assert win.engine.is_running is False

    def test_close_saves_geometry(self, settings_path):
        win = PomodoroApp(Settings())
        win.resize(400, 520)
        win.show()
        win.close()
        assert settings_path.exists()
        loaded = load_settings()
        assert loaded.window_width == 400
        assert loaded.window_height == 520

    def test_always_on_top_flag(self):
        win = PomodoroApp(Settings(always_on_top=True))
        assert win.windowFlags() & Qt.WindowType.WindowStaysOnTopHint

    def test_restores_size(self):
        win = PomodoroApp(Settings(window_width=420, window_height=600))
        assert win.width() == 420
        assert win.height() == 600
