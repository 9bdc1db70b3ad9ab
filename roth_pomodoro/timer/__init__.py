"""Timer package."""

from .engine import (
    AppState,
    TimerState,
    PeriodKind,
    format_clock,
    update,
)
from .controller import TimerController, TICK_INTERVAL_MS

__all__ = [
    "AppState",
    "TimerState",
    "PeriodKind",
    "format_clock",
    "update",
    "TimerController",
    "TICK_INTERVAL_MS",
]
