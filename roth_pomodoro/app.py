"""Main application window for Roth Pomodoro."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QMainWindow, QStackedWidget

from .audio.worker import AudioWorker
from .database.store import SettingsStore
from .settings import Screen
from .timer.controller import TimerController
from .timer.engine import AppState
from .ui.settings_screen import SettingsScreen
from .ui.styles import build_stylesheet
from .ui.timer_screen import TimerScreen

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Pomodoro Timer"
WINDOW_SIZE = (600, 500)


class PomodoroWindow(QMainWindow):
    """Main window: one controller, one audio worker, two screens."""

    def __init__(
        self,
        *,
        audio: AudioWorker | None = None,
        store: SettingsStore | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*WINDOW_SIZE)
        self.setStyleSheet(build_stylesheet())

        # ── audio worker ──────────────────────────────────────────────
        self._audio = audio or AudioWorker()
        if not self._audio.is_alive() and not self._audio.closed:
            self._audio.start()

        # ── controller ────────────────────────────────────────────────
        self._controller = TimerController(self._audio, store or SettingsStore(), self)
        self._controller.state_changed.connect(self._render)

        # ── screens ───────────────────────────────────────────────────
        self._stack = QStackedWidget(self)
        self._timer_screen = TimerScreen(self._controller, self._stack)
        self._settings_screen = SettingsScreen(self._controller, self._stack)
        self._stack.addWidget(self._timer_screen)
        self._stack.addWidget(self._settings_screen)
        self.setCentralWidget(self._stack)

        self._render(self._controller.state)

    @property
    def controller(self) -> TimerController:
        return self._controller

    @property
    def current_screen(self) -> Screen:
        if self._stack.currentWidget() is self._settings_screen:
            return Screen.SETTINGS
        return Screen.TIMER

    def _render(self, state: AppState) -> None:
        if state.screen is Screen.SETTINGS:
            self._settings_screen.show_state(state)
            self._stack.setCurrentWidget(self._settings_screen)
        else:
            self._timer_screen.show_state(state)
            self._stack.setCurrentWidget(self._timer_screen)

    def closeEvent(self, event: QCloseEvent) -> None:
        logger.info("Shutting down audio worker")
        self._audio.shutdown(timeout=1.0)
        super().closeEvent(event)
