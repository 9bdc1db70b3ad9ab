"""Pomodoro state machine.

States
------
Idle-Work       Work period waiting to start (or paused).
Running-Work    Work period counting down.
Idle-Break      Break waiting to start (or paused).
Running-Break   Break counting down.

Each of these is shown on either the Timer or the Settings screen.

Transitions
-----------
Idle → Running                 (StartStop)
Running → Idle                 (StartStop, OpenSettings)
Running-Work → Idle-Break      (Tick reaches 0, alarm)
Running-Break → Idle-Work      (Tick reaches 0, alarm)
Any → Idle-Work                (Reset, successful SaveSettings)

:func:`update` is pure: it takes the current :class:`AppState` and one
event, and returns the next state plus the side effects to run.  Nothing
here touches Qt, the database or the sound device.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Union

from ..audio.worker import AudioCommand
from ..settings import (
    INVALID_SETTINGS_MESSAGE,
    Screen,
    Settings,
    SettingsDraft,
)


class PeriodKind(Enum):
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


# ── state ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerState:
    """The live countdown.

    ``end_time`` is a monotonic-clock deadline in seconds and is set
    exactly while ``is_running``.  ``started`` tells "never started" apart
    from "paused".
    """

    time_left: int
    end_time: float | None = None
    work_periods: int = 0
    completed_pomodoros: int = 0
    is_running: bool = False
    started: bool = False
    is_work_period: bool = True


@dataclass(frozen=True)
class AppState:
    timer: TimerState
    settings: Settings = field(default_factory=Settings)
    screen: Screen = Screen.TIMER
    draft: SettingsDraft = field(default_factory=SettingsDraft)
    settings_error: str | None = None

    @classmethod
    def initial(cls, settings: Settings, completed_pomodoros: int = 0) -> AppState:
        return cls(
            timer=TimerState(
                time_left=settings.work_seconds,
                completed_pomodoros=completed_pomodoros,
            ),
            settings=settings,
            draft=SettingsDraft.from_settings(settings),
        )

    # ── presentation helpers ──────────────────────────────────────────

    @property
    def period_kind(self) -> PeriodKind:
        if self.timer.is_work_period:
            return PeriodKind.WORK
        if self.timer.work_periods % self.settings.long_break_every == 0:
            return PeriodKind.LONG_BREAK
        return PeriodKind.SHORT_BREAK

    @property
    def cycle_position(self) -> int:
        """Which work period of the current long-break cycle (1-based)."""
        return self.timer.work_periods % self.settings.long_break_every + 1

    @property
    def start_label(self) -> str:
        if self.timer.is_running:
            return "Pause"
        if self.timer.started:
            return "Resume"
        return "Start"


def format_clock(seconds: int) -> str:
    """``MM:SS``; minutes are not wrapped into hours."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


# ── events ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Tick:
    now: float


@dataclass(frozen=True)
class StartStop:
    now: float


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class ResetPomoCounter:
    pass


@dataclass(frozen=True)
class OpenSettings:
    pass


@dataclass(frozen=True)
class CloseSettings:
    pass


@dataclass(frozen=True)
class WorkMinutesChanged:
    value: str


@dataclass(frozen=True)
class ShortBreakMinutesChanged:
    value: str


@dataclass(frozen=True)
class LongBreakMinutesChanged:
    value: str


@dataclass(frozen=True)
class LongBreakEveryChanged:
    value: str


@dataclass(frozen=True)
class SaveSettings:
    pass


Event = Union[
    Tick, StartStop, Reset, ResetPomoCounter, OpenSettings, CloseSettings,
    WorkMinutesChanged, ShortBreakMinutesChanged, LongBreakMinutesChanged,
    LongBreakEveryChanged, SaveSettings,
]


# ── commands ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SendAudio:
    command: AudioCommand


@dataclass(frozen=True)
class PersistSettings:
    settings: Settings


@dataclass(frozen=True)
class PersistCompletedPomodoros:
    count: int


Command = Union[SendAudio, PersistSettings, PersistCompletedPomodoros]

_DRAFT_FIELDS: dict[type, str] = {
    WorkMinutesChanged: "work_minutes",
    ShortBreakMinutesChanged: "short_break_minutes",
    LongBreakMinutesChanged: "long_break_minutes",
    LongBreakEveryChanged: "long_break_every",
}


# ══════════════════════════════════════════════════════════════════════════
#  TRANSITION FUNCTION
# ══════════════════════════════════════════════════════════════════════════


def update(state: AppState, event: Event) -> tuple[AppState, list[Command]]:
    """Apply *event* to *state*.  Returns ``(new_state, commands)``."""
    timer = state.timer

    if isinstance(event, Tick):
        return _tick(state, event.now)

    if isinstance(event, StartStop):
        if timer.is_running:
            return replace(state, timer=replace(timer, is_running=False, end_time=None)), []
        timer = replace(
            timer,
            is_running=True,
            started=True,
            end_time=event.now + timer.time_left,
        )
        return replace(state, timer=timer), [SendAudio(AudioCommand.STOP)]

    if isinstance(event, Reset):
        return _reset(state), [SendAudio(AudioCommand.STOP)]

    if isinstance(event, ResetPomoCounter):
        timer = replace(timer, completed_pomodoros=0)
        return replace(state, timer=timer), [PersistCompletedPomodoros(0)]

    if isinstance(event, OpenSettings):
        return replace(
            state,
            timer=replace(timer, is_running=False, end_time=None),
            settings_error=None,
            draft=SettingsDraft.from_settings(state.settings),
            screen=Screen.SETTINGS,
        ), []

    if isinstance(event, CloseSettings):
        return replace(state, settings_error=None, screen=Screen.TIMER), []

    draft_field = _DRAFT_FIELDS.get(type(event))
    if draft_field is not None:
        return replace(state, draft=replace(state.draft, **{draft_field: event.value})), []

    if isinstance(event, SaveSettings):
        settings = state.draft.parse()
        if settings is None:
            return replace(state, settings_error=INVALID_SETTINGS_MESSAGE), []
        state = _reset(replace(state, settings=settings, settings_error=None))
        state = replace(state, screen=Screen.TIMER)
        return state, [PersistSettings(settings), SendAudio(AudioCommand.STOP)]

    raise TypeError(f"Unknown event: {event!r}")


def _tick(state: AppState, now: float) -> tuple[AppState, list[Command]]:
    timer = state.timer
    if not timer.is_running:
        return state, []

    time_left = max(0, math.floor(timer.end_time - now))
    if time_left > 0:
        return replace(state, timer=replace(timer, time_left=time_left)), []

    # ── period finished ───────────────────────────────────────────────
    commands: list[Command] = []
    work_periods = timer.work_periods
    completed = timer.completed_pomodoros
    if timer.is_work_period:
        work_periods += 1
        completed += 1
        commands.append(PersistCompletedPomodoros(completed))

    settings = state.settings
    is_work_period = not timer.is_work_period
    if is_work_period:
        next_length = settings.work_seconds
    elif work_periods % settings.long_break_every == 0:
        next_length = settings.long_break_seconds
    else:
        next_length = settings.short_break_seconds

    timer = replace(
        timer,
        time_left=next_length,
        end_time=None,
        work_periods=work_periods,
        completed_pomodoros=completed,
        is_running=False,
        started=False,
        is_work_period=is_work_period,
    )
    commands.append(SendAudio(AudioCommand.ALARM))
    return replace(state, timer=timer), commands


def _reset(state: AppState) -> AppState:
    """Back to an idle first work period.  The counter is kept."""
    timer = replace(
        state.timer,
        is_running=False,
        is_work_period=True,
        time_left=state.settings.work_seconds,
        started=False,
        end_time=None,
        work_periods=0,
    )
    return replace(state, timer=timer)
