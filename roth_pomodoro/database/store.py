"""Best-effort settings and counter persistence.

Reads fall back to defaults and writes report failure by returning
``False``; neither ever raises, so the timer keeps working without a
usable data directory.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from ..settings import Settings
from .db import get_session, init_db
from .models import CounterRecord, SettingsRecord, SINGLE_ROW_ID

logger = logging.getLogger(__name__)

_STORE_ERRORS = (SQLAlchemyError, OSError)


class SettingsStore:
    """Loads and saves the two single-row records."""

    def _open(self) -> bool:
        try:
            init_db()
        except _STORE_ERRORS:
            logger.warning("Settings store unavailable", exc_info=True)
            return False
        return True

    # ── settings ──────────────────────────────────────────────────────

    def load_settings(self) -> Settings:
        if not self._open():
            return Settings()
        try:
            with get_session() as db:
                record = db.get(SettingsRecord, SINGLE_ROW_ID)
                if record is None:
                    return Settings()
                settings = Settings(
                    work_seconds=record.work_seconds,
                    short_break_seconds=record.short_break_seconds,
                    long_break_seconds=record.long_break_seconds,
                    long_break_every=record.long_break_every,
                )
        except _STORE_ERRORS:
            logger.warning("Could not read settings, using defaults", exc_info=True)
            return Settings()

        if not settings.is_valid:
            logger.warning("Stored settings are invalid (%s), using defaults", settings)
            return Settings()
        return settings

    def save_settings(self, settings: Settings) -> bool:
        if not self._open():
            return False
        try:
            with get_session() as db:
                record = db.get(SettingsRecord, SINGLE_ROW_ID)
                record.work_seconds = settings.work_seconds
                record.short_break_seconds = settings.short_break_seconds
                record.long_break_seconds = settings.long_break_seconds
                record.long_break_every = settings.long_break_every
        except _STORE_ERRORS:
            logger.warning("Could not save settings", exc_info=True)
            return False
        return True

    # ── completed pomodoros ───────────────────────────────────────────

    def load_completed_pomodoros(self) -> int:
        if not self._open():
            return 0
        try:
            with get_session() as db:
                record = db.get(CounterRecord, SINGLE_ROW_ID)
                completed = record.completed_pomodoros if record else 0
        except _STORE_ERRORS:
            logger.warning("Could not read pomodoro counter", exc_info=True)
            return 0
        if not isinstance(completed, int) or completed < 0:
            logger.warning("Stored pomodoro counter is invalid (%r), using 0", completed)
            return 0
        return completed

    def save_completed_pomodoros(self, completed: int) -> bool:
        if not self._open():
            return False
        try:
            with get_session() as db:
                record = db.get(CounterRecord, SINGLE_ROW_ID)
                record.completed_pomodoros = completed
        except _STORE_ERRORS:
            logger.warning("Could not save pomodoro counter", exc_info=True)
            return False
        return True
