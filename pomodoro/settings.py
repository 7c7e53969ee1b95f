"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/Pomodoro/settings.json

Only construction-time configuration and window geometry live here; the
timer itself always starts fresh.

Usage::

    settings = load_settings()
    engine = TimerEngine(
        settings.work_duration,
        settings.rest_duration,
        tick_interval=settings.tick_interval,
        display_format=settings.display_format_enum(),
    )
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .timer.engine import (
    DisplayFormat, WORK_DURATION, REST_DURATION, TICK_INTERVAL,
)


logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "Pomodoro"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    work_duration: float = WORK_DURATION    # seconds
    rest_duration: float = REST_DURATION
    tick_interval: float = TICK_INTERVAL
    display_format: str = DisplayFormat.CENTISECONDS.value

    # ── window ────────────────────────────────────────────────────────
    always_on_top: bool = False
    window_x: int | None = None
    window_y: int | None = None
    window_width: int = 360
    window_height: int = 480

    def display_format_enum(self) -> DisplayFormat:
        return DisplayFormat(self.display_format)

    def validate(self) -> None:
        """Raise ``ValueError`` if a field has the wrong type or range."""
        for name in ("work_duration", "rest_duration", "tick_interval"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be positive and finite, got {value!r}")
        if not isinstance(self.display_format, str):
            raise ValueError(f"display_format must be a string, got {self.display_format!r}")
        self.display_format_enum()

        # ── window ────────────────────────────────────────────────────
        if not isinstance(self.always_on_top, bool):
            raise ValueError(f"always_on_top must be true/false, got {self.always_on_top!r}")
        for name in ("window_x", "window_y"):
            value = getattr(self, name)
            if value is not None and not _is_int(value):
                raise ValueError(f"{name} must be an integer or null, got {value!r}")
        for name in ("window_width", "window_height"):
            value = getattr(self, name)
            if not _is_int(value) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        settings = Settings(**filtered)
        settings.validate()
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("ignoring settings at %s: %s", SETTINGS_PATH, exc)
        return Settings()
    return settings


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
