"""Timer settings and the editable draft shown on the settings screen.

``Settings`` is what the timer runs on.  ``SettingsDraft`` is the raw text
the user types; it only becomes ``Settings`` through :meth:`SettingsDraft.parse`.

Usage::

    draft = SettingsDraft.from_settings(Settings())
    draft.work_minutes = "50"
    settings = draft.parse()   # None if anything is invalid
"""

from __future__ import annotations

import re
from dataclasses import dataclass, astuple
from enum import Enum


# ── defaults ──────────────────────────────────────────────────────────────

WORK_LENGTH = 25 * 60          # seconds
BREAK_LENGTH = 5 * 60
LONG_BREAK_LENGTH = 15 * 60
DEFAULT_LONG_BREAK_EVERY = 4

# Values are stored as unsigned 32-bit integers; minute conversion
# saturates here instead of growing without bound.
MAX_SECONDS = 2**32 - 1

INVALID_SETTINGS_MESSAGE = "Invalid settings. Use positive numbers for minutes and pomos."

_WHOLE_NUMBER = re.compile(r"\+?[0-9]+")


class Screen(Enum):
    TIMER = "timer"
    SETTINGS = "settings"


@dataclass(frozen=True)
class Settings:
    """Interval lengths and the long-break cadence."""

    work_seconds: int = WORK_LENGTH
    short_break_seconds: int = BREAK_LENGTH
    long_break_seconds: int = LONG_BREAK_LENGTH
    long_break_every: int = DEFAULT_LONG_BREAK_EVERY  # work periods per long break

    @property
    def is_valid(self) -> bool:
        return all(isinstance(v, int) and v > 0 for v in astuple(self))


@dataclass
class SettingsDraft:
    """Unvalidated text mirror of :class:`Settings` (minutes, not seconds)."""

    work_minutes: str = ""
    short_break_minutes: str = ""
    long_break_minutes: str = ""
    long_break_every: str = ""

    @classmethod
    def from_settings(cls, settings: Settings) -> SettingsDraft:
        return cls(
            work_minutes=str(settings.work_seconds // 60),
            short_break_minutes=str(settings.short_break_seconds // 60),
            long_break_minutes=str(settings.long_break_seconds // 60),
            long_break_every=str(settings.long_break_every),
        )

    def parse(self) -> Settings | None:
        """Validate every field; return ``None`` on the first bad one.

        Each field must be a whole number that fits in 32 unsigned bits and
        is not zero.  The draft itself is never modified.
        """
        values = []
        for text in (
            self.work_minutes,
            self.short_break_minutes,
            self.long_break_minutes,
            self.long_break_every,
        ):
            value = _parse_whole_number(text)
            if value is None or value == 0:
                return None
            values.append(value)

        work, short_break, long_break, every = values
        return Settings(
            work_seconds=_minutes_to_seconds(work),
            short_break_seconds=_minutes_to_seconds(short_break),
            long_break_seconds=_minutes_to_seconds(long_break),
            long_break_every=every,
        )


def _parse_whole_number(text: str) -> int | None:
    text = text.strip()
    if not _WHOLE_NUMBER.fullmatch(text):
        return None
    value = int(text)
    if value > MAX_SECONDS:
        return None
    return value


def _minutes_to_seconds(minutes: int) -> int:
    return min(minutes * 60, MAX_SECONDS)
