"""Shared pytest fixtures for Pomodoro tests."""

import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from PyQt6.QtWidgets import QApplication

from pomodoro.timer.engine import TimerEngine
from pomodoro.timer.clock import TimerClock


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def settings_path(tmp_path, monkeypatch):
    """Point every test at a throwaway settings file."""
    path = tmp_path / "settings.json"
    monkeypatch.setattr("pomodoro.settings.SETTINGS_PATH", path)
    monkeypatch.setattr("pomodoro.settings.APP_SUPPORT_DIR", tmp_path)
    yield path


@pytest.fixture
def engine():
    """Fresh TimerEngine with default durations (25 s work, 10 s rest)."""
    return TimerEngine()


@pytest.fixture
def running_engine(engine):
    engine.toggle_running()
    return engine


@pytest.fixture
def clock(qapp, engine):
    """TimerClock wrapping the default engine."""
    c = TimerClock(engine)
    yield c
    c.stop()
