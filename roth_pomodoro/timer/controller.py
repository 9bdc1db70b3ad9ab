"""Qt adapter around the pure state machine in :mod:`.engine`.

The controller owns the current :class:`AppState`, feeds it events built
from user gestures and a 100 ms tick, and carries out the commands that
come back: audio goes to the worker, persistence goes to the store.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ..audio.worker import AudioCommand
from ..database.store import SettingsStore
from . import engine as fsm
from .engine import AppState

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 100


class AudioSink(Protocol):
    def send(self, command: AudioCommand) -> None: ...


class TimerController(QObject):
    """Drives :func:`engine.update` from the Qt event loop.

    Signals
    -------
    state_changed(state: AppState)
        Emitted after every event, whether or not anything changed.
    period_finished(state: AppState)
        Emitted when a countdown reaches zero and the period flips.
    """

    state_changed = pyqtSignal(object)
    period_finished = pyqtSignal(object)

    def __init__(
        self,
        audio: AudioSink,
        store: SettingsStore,
        parent: QObject | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(parent)
        self._audio = audio
        self._store = store
        self._clock = clock
        self._state = AppState.initial(
            store.load_settings(),
            store.load_completed_pomodoros(),
        )

        self._tick_timer = QTimer(self)
        self._tick_timer.setInterval(TICK_INTERVAL_MS)
        self._tick_timer.timeout.connect(self.tick)

    # ── properties ────────────────────────────────────────────────────

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def ticking(self) -> bool:
        return self._tick_timer.isActive()

    # ══════════════════════════════════════════════════════════════════
    #  GESTURES
    # ══════════════════════════════════════════════════════════════════

    def tick(self) -> None:
        self.dispatch(fsm.Tick(self._clock()))

    def start_stop(self) -> None:
        self.dispatch(fsm.StartStop(self._clock()))

    def reset(self) -> None:
        self.dispatch(fsm.Reset())

    def reset_counter(self) -> None:
        self.dispatch(fsm.ResetPomoCounter())

    def open_settings(self) -> None:
        self.dispatch(fsm.OpenSettings())

    def close_settings(self) -> None:
        self.dispatch(fsm.CloseSettings())

    def set_work_minutes(self, text: str) -> None:
        self.dispatch(fsm.WorkMinutesChanged(text))

    def set_short_break_minutes(self, text: str) -> None:
        self.dispatch(fsm.ShortBreakMinutesChanged(text))

    def set_long_break_minutes(self, text: str) -> None:
        self.dispatch(fsm.LongBreakMinutesChanged(text))

    def set_long_break_every(self, text: str) -> None:
        self.dispatch(fsm.LongBreakEveryChanged(text))

    def save_settings(self) -> None:
        self.dispatch(fsm.SaveSettings())

    # ══════════════════════════════════════════════════════════════════
    #  DISPATCH
    # ══════════════════════════════════════════════════════════════════

    def dispatch(self, event: fsm.Event) -> None:
        previous = self._state
        self._state, commands = fsm.update(previous, event)
        for command in commands:
            self._execute(command)
        self._sync_tick_timer()

        if isinstance(event, fsm.Tick) and previous.timer.is_running and not self._state.timer.is_running:
            logger.info(
                "Period finished; next is %s (%s completed)",
                self._state.period_kind.value,
                self._state.timer.completed_pomodoros,
            )
            self.period_finished.emit(self._state)
        self.state_changed.emit(self._state)

    def _execute(self, command: fsm.Command) -> None:
        logger.debug("Executing %s", command)
        if isinstance(command, fsm.SendAudio):
            # A closed channel is a programming error; let it propagate.
            self._audio.send(command.command)
        elif isinstance(command, fsm.PersistSettings):
            if not self._store.save_settings(command.settings):
                logger.info("Settings kept in memory only")
        elif isinstance(command, fsm.PersistCompletedPomodoros):
            if not self._store.save_completed_pomodoros(command.count):
                logger.info("Pomodoro counter kept in memory only")
        else:
            raise TypeError(f"Unknown command: {command!r}")

    def _sync_tick_timer(self) -> None:
        if self._state.timer.is_running:
            if not self._tick_timer.isActive():
                self._tick_timer.start()
        else:
            self._tick_timer.stop()
