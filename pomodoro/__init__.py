"""Pomodoro: a work/rest countdown with a progress ring."""

__version__ = "0.1.0"
