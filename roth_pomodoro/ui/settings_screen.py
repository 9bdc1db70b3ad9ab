"""Settings screen: four text inputs, Save / Cancel and an inline error.

Inputs are free text.  Nothing is validated until Save; a bad value shows
the error and leaves every field as typed.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton,
)

from ..timer.controller import TimerController
from ..timer.engine import AppState
from .styles import ERROR_COLOR


class SettingsScreen(QWidget):
    """Edits the settings draft held by the controller."""

    def __init__(self, controller: TimerController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._build_ui()
        self._connect_signals()
        self.show_state(controller.state)

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(40, 40, 40, 40)
        root.setSpacing(20)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)

        header = QLabel("⚙ Settings", self)
        header.setStyleSheet("font-size: 40px;")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(header)

        self._work_edit = self._field(root, "🍅 Work Duration (minutes)", "25")
        self._short_edit = self._field(root, "☕ Short Break (minutes)", "5")
        self._long_edit = self._field(root, "☕ Long Break (minutes)", "15")
        self._every_edit = self._field(root, "🔄 Long Break Every (pomodoros)", "4")

        self._error_label = QLabel(self)
        self._error_label.setStyleSheet(f"font-size: 16px; color: {ERROR_COLOR};")
        self._error_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._error_label.setVisible(False)
        root.addWidget(self._error_label)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(15)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._save_btn = QPushButton("✓ Save", self)
        self._cancel_btn = QPushButton("✕ Cancel", self)
        btn_row.addWidget(self._save_btn)
        btn_row.addWidget(self._cancel_btn)
        root.addLayout(btn_row)

    def _field(self, layout: QVBoxLayout, label: str, placeholder: str) -> QLineEdit:
        column = QVBoxLayout()
        column.setSpacing(8)
        column.addWidget(QLabel(label, self))
        edit = QLineEdit(self)
        edit.setPlaceholderText(placeholder)
        column.addWidget(edit)
        layout.addLayout(column)
        return edit

    def _connect_signals(self) -> None:
        self._work_edit.textEdited.connect(self._controller.set_work_minutes)
        self._short_edit.textEdited.connect(self._controller.set_short_break_minutes)
        self._long_edit.textEdited.connect(self._controller.set_long_break_minutes)
        self._every_edit.textEdited.connect(self._controller.set_long_break_every)
        self._save_btn.clicked.connect(self._controller.save_settings)
        self._cancel_btn.clicked.connect(self._controller.close_settings)

    # ══════════════════════════════════════════════════════════════════
    #  RENDER
    # ══════════════════════════════════════════════════════════════════

    def show_state(self, state: AppState) -> None:
        draft = state.draft
        for edit, text in (
            (self._work_edit, draft.work_minutes),
            (self._short_edit, draft.short_break_minutes),
            (self._long_edit, draft.long_break_minutes),
            (self._every_edit, draft.long_break_every),
        ):
            # Only touch changed fields so the cursor stays put while typing.
            if edit.text() != text:
                edit.setText(text)

        if state.settings_error:
            self._error_label.setText(f"⚠ {state.settings_error}")
            self._error_label.setVisible(True)
        else:
            self._error_label.clear()
            self._error_label.setVisible(False)

    # ── test hooks ────────────────────────────────────────────────────

    @property
    def error_text(self) -> str:
        return self._error_label.text()

    @property
    def work_edit(self) -> QLineEdit:
        return self._work_edit

    @property
    def save_button(self) -> QPushButton:
        return self._save_btn
