"""UI package."""

from .timer_screen import TimerScreen
from .settings_screen import SettingsScreen

__all__ = ["TimerScreen", "SettingsScreen"]
