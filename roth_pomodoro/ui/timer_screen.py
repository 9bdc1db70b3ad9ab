"""Timer screen: period header, big clock, progress and controls.

Layout (top → bottom):
    - Reset / Reset Count / Settings tool buttons, right-aligned
    - Period header ("Work Time", "Short Break", "Long Break")
    - MM:SS clock
    - Cycle progress and completed count
    - Start / Pause / Resume button
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QToolButton,
)

from ..timer.controller import TimerController
from ..timer.engine import AppState, PeriodKind, format_clock
from .styles import PERIOD_COLORS


PERIOD_LABELS: dict[PeriodKind, str] = {
    PeriodKind.WORK:        "🍅 Work Time",
    PeriodKind.SHORT_BREAK: "☕ Short Break",
    PeriodKind.LONG_BREAK:  "☕ Long Break",
}

START_ICONS = {"Start": "▶ Start", "Resume": "▶ Resume", "Pause": "⏸ Pause"}


class TimerScreen(QWidget):
    """Renders :class:`AppState` and forwards clicks to the controller."""

    def __init__(self, controller: TimerController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._build_ui()
        self._connect_signals()
        self.show_state(controller.state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(10, 10, 10, 10)

        top_bar = QHBoxLayout()
        top_bar.addStretch()
        top_bar.setSpacing(10)
        self._reset_btn = self._tool_button("↻", "Reset")
        self._reset_count_btn = self._tool_button("⟲", "Reset Count")
        self._settings_btn = self._tool_button("⚙", "Settings")
        for btn in (self._reset_btn, self._reset_count_btn, self._settings_btn):
            top_bar.addWidget(btn)
        root.addLayout(top_bar)

        center = QVBoxLayout()
        center.setSpacing(30)
        center.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._period_label = QLabel(self)
        self._period_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        center.addWidget(self._period_label)

        self._clock_label = QLabel(self)
        self._clock_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        center.addWidget(self._clock_label)

        info = QVBoxLayout()
        info.setSpacing(5)
        self._progress_label = QLabel(self)
        self._progress_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._progress_label.setStyleSheet("font-size: 16px;")
        self._completed_label = QLabel(self)
        self._completed_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._completed_label.setStyleSheet("font-size: 18px;")
        info.addWidget(self._progress_label)
        info.addWidget(self._completed_label)
        center.addLayout(info)

        self._start_btn = QPushButton(self)
        self._start_btn.setObjectName("startButton")
        center.addWidget(self._start_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        root.addStretch()
        root.addLayout(center)
        root.addStretch()

    def _tool_button(self, glyph: str, tooltip: str) -> QToolButton:
        btn = QToolButton(self)
        btn.setText(glyph)
        btn.setToolTip(tooltip)
        btn.setStyleSheet("font-size: 20px;")
        return btn

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_btn.clicked.connect(self._controller.start_stop)
        self._reset_btn.clicked.connect(self._controller.reset)
        self._reset_count_btn.clicked.connect(self._controller.reset_counter)
        self._settings_btn.clicked.connect(self._controller.open_settings)

    # ── render ────────────────────────────────────────────────────────────

    def show_state(self, state: AppState) -> None:
        kind = state.period_kind
        color = PERIOD_COLORS[kind]

        self._period_label.setText(PERIOD_LABELS[kind])
        self._period_label.setStyleSheet(f"font-size: 32px; color: {color};")

        self._clock_label.setText(format_clock(state.timer.time_left))
        self._clock_label.setStyleSheet(f"font-size: 100px; color: {color};")

        if state.timer.is_work_period:
            self._progress_label.setText(
                f"Pomodoro {state.cycle_position}/{state.settings.long_break_every} "
                "until long break"
            )
        else:
            self._progress_label.setText("Break time - relax!")
        self._completed_label.setText(f"✓ Completed: {state.timer.completed_pomodoros}")

        self._start_btn.setText(START_ICONS[state.start_label])

    # ── test hooks ────────────────────────────────────────────────────────

    @property
    def clock_text(self) -> str:
        return self._clock_label.text()

    @property
    def start_button(self) -> QPushButton:
        return self._start_btn
