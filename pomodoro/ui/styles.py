"""QSS stylesheet and mode colors for Pomodoro."""

from __future__ import annotations

from ..timer.engine import Mode

# ── mode accents — ring stroke, countdown text and play/pause glyph ──────

MODE_COLORS: dict[Mode, str] = {
    Mode.WORKING: "#FF3B30",   # red
    Mode.RESTING: "#34C759",   # green
}

TRACK_COLOR = "#8E8E93"        # gray ring background

# ── palette ───────────────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":         "#FFFFFF",
    "text":       "#1C1C1E",
    "text_muted": "#8E8E93",
    "border":     "#D1D1D6",
}


def accent_for(mode: Mode) -> str:
    return MODE_COLORS[mode]


# ── font resolution ───────────────────────────────────────────────────

_resolved_font: str | None = None


def resolve_font_family() -> str:
    """Detect the best available monospaced-digit font.  Must be called
    after QApplication is created (font database needs the app context)."""
    global _resolved_font
    if _resolved_font is None:
        from PyQt6.QtGui import QFontDatabase
        families = set(QFontDatabase.families())
        for candidate in ("SF Mono", "Menlo", "DejaVu Sans Mono"):
            if candidate in families:
                _resolved_font = candidate
                break
        else:
            _resolved_font = QFontDatabase.systemFont(
                QFontDatabase.SystemFont.FixedFont,
            ).family()
    return _resolved_font


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str]) -> str:
    p = palette
    return f"""
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-size: 14px;
    }}

    QMainWindow {{
        background-color: {p['bg']};
    }}

    QPushButton#playPauseButton {{
        background-color: transparent;
        border: none;
        font-size: 28px;
        padding: 4px 16px;
    }}

    QPushButton#playPauseButton:pressed {{
        color: {p['text_muted']};
    }}
    """


def play_pause_style(mode: Mode) -> str:
    """Per-mode tint for the play/pause glyph."""
    return f"color: {accent_for(mode)};"
