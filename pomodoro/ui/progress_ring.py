"""Circular progress ring widget rendered with QPainter.

- Fills clockwise from 12 o'clock as the interval elapses.
- Gray background track under a round-capped accent arc.
- Countdown text and a WORK/REST caption painted in the centre.
- Arc moves smoothly between ticks; the accent crossfades on mode change.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF, QVariantAnimation, QEasingCurve
from PyQt6.QtGui import QPainter, QPen, QColor, QFont
from PyQt6.QtWidgets import QWidget

from .styles import TRACK_COLOR, MODE_COLORS, PALETTE, resolve_font_family
from ..timer.engine import Mode, TICK_INTERVAL


# ── helpers ──────────────────────────────────────────────────────────────────

def _lerp_color(c1: QColor, c2: QColor, t: float) -> QColor:
    """Linearly interpolate between two QColors."""
    t = max(0.0, min(1.0, t))
    return QColor(
        int(c1.red()   + (c2.red()   - c1.red())   * t),
        int(c1.green() + (c2.green() - c1.green()) * t),
        int(c1.blue()  + (c2.blue()  - c1.blue())  * t),
        int(c1.alpha() + (c2.alpha() - c1.alpha()) * t),
    )


MODE_CAPTIONS: dict[Mode, str] = {
    Mode.WORKING: "WORK",
    Mode.RESTING: "REST",
}


# ── main widget ──────────────────────────────────────────────────────────────


class ProgressRing(QWidget):
    """Custom-painted circular countdown ring."""

    RING_THICKNESS = 10
    RING_MARGIN = 20  # gap between ring and widget edge
    COLOR_FADE_MS = 300

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        tick_interval: float = TICK_INTERVAL,
    ) -> None:
        super().__init__(parent)
        self.setMinimumSize(200, 200)

        # ── state ──────────────────────────────────────────────────────
        self._progress: float = 0.0          # 0..1 target fill
        self._display_progress: float = 0.0  # animated fill
        self._time_text: str = "00:00"
        self._caption: str = MODE_CAPTIONS[Mode.WORKING]

        self._color = QColor(MODE_COLORS[Mode.WORKING])
        self._old_color = QColor(self._color)
        self._target_color = QColor(self._color)
        self._track_color = QColor(TRACK_COLOR)
        self._text_color = QColor(self._color)

        # ── arc animation (one tick long) ──────────────────────────────
        self._arc_anim = QVariantAnimation(self)
        self._arc_anim.setDuration(max(1, round(tick_interval * 1000)))
        self._arc_anim.setEasingCurve(QEasingCurve.Type.Linear)
        self._arc_anim.valueChanged.connect(self._on_arc_anim)

        # ── color transition animation ─────────────────────────────────
        self._color_anim = QVariantAnimation(self)
        self._color_anim.setDuration(self.COLOR_FADE_MS)
        self._color_anim.setStartValue(0.0)
        self._color_anim.setEndValue(1.0)
        self._color_anim.setEasingCurve(QEasingCurve.Type.InOutQuad)
        self._color_anim.valueChanged.connect(self._on_color_anim)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def time_text(self) -> str:
        return self._time_text

    @property
    def caption(self) -> str:
        return self._caption

    @property
    def target_color(self) -> QColor:
        return QColor(self._target_color)

    def set_progress(self, fraction: float, *, animate: bool = True) -> None:
        """Update the arc fill (0..1).

        Animates over one tick unless *animate* is off or a new interval
        starts (0 snaps to empty).
        """
        fraction = max(0.0, min(1.0, fraction))
        self._progress = fraction
        self._arc_anim.stop()
        if fraction == 0.0 or not animate:
            self._display_progress = fraction
            self.update()
            return
        self._arc_anim.setStartValue(self._display_progress)
        self._arc_anim.setEndValue(fraction)
        self._arc_anim.start()

    def set_time_text(self, text: str) -> None:
        self._time_text = text
        self.update()

    def set_mode(self, mode: Mode) -> None:
        """Swap caption and crossfade to the mode's accent."""
        self._caption = MODE_CAPTIONS[mode]
        self.set_accent(MODE_COLORS[mode])

    def set_accent(self, color: str) -> None:
        target = QColor(color)
        if target == self._target_color:
            return
        self._old_color = QColor(self._color)
        self._target_color = target
        self._text_color = QColor(target)
        self._color_anim.stop()
        self._color_anim.start()
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  ANIMATION SLOTS
    # ══════════════════════════════════════════════════════════════════

    def _on_arc_anim(self, value: object) -> None:
        self._display_progress = float(value)  # type: ignore[arg-type]
        self.update()

    def _on_color_anim(self, value: object) -> None:
        t = float(value)  # type: ignore[arg-type]
        self._color = _lerp_color(self._old_color, self._target_color, t)
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w = self.width()
        h = self.height()
        cx, cy = w / 2, h / 2
        radius = max(10.0, min(w, h) / 2 - self.RING_MARGIN)
        thickness = self.RING_THICKNESS

        ring_rect = QRectF(cx - radius, cy - radius, radius * 2, radius * 2)

        # ── background track ─────────────────────────────────────────
        track_pen = QPen(self._track_color, thickness, Qt.PenStyle.SolidLine)
        track_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(track_pen)
        painter.drawEllipse(ring_rect)

        # ── progress arc ─────────────────────────────────────────────
        pct = self._display_progress
        if pct > 0.0005:
            arc_pen = QPen(self._color, thickness, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc_pen)

            # Qt arcs: start at 12 o'clock (90*16), go clockwise (negative)
            start_angle = 90 * 16
            span_angle = -int(pct * 360 * 16)
            painter.drawArc(ring_rect, start_angle, span_angle)

        # ── centre text: countdown ───────────────────────────────────
        time_font = QFont(resolve_font_family())
        time_font.setPixelSize(40)
        time_font.setWeight(QFont.Weight.Medium)
        painter.setFont(time_font)
        painter.setPen(self._text_color)
        painter.drawText(
            ring_rect, Qt.AlignmentFlag.AlignCenter, self._time_text,
        )

        # ── centre text: mode caption ────────────────────────────────
        label_font = QFont()
        label_font.setPixelSize(12)
        label_font.setWeight(QFont.Weight.DemiBold)
        label_font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 3)
        painter.setFont(label_font)
        painter.setPen(QColor(PALETTE["text_muted"]))

        label_rect = QRectF(ring_rect)
        label_rect.moveTop(label_rect.top() + 44)
        painter.drawText(
            label_rect, Qt.AlignmentFlag.AlignCenter, self._caption,
        )

        painter.end()
