"""Roth Pomodoro: a desktop Pomodoro timer."""

__version__ = "0.1.0"
