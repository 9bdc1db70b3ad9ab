"""Database package."""

from .db import configure_engine, get_session, init_db
from .models import CounterRecord, SettingsRecord
from .store import SettingsStore

__all__ = [
    "configure_engine",
    "get_session",
    "init_db",
    "CounterRecord",
    "SettingsRecord",
    "SettingsStore",
]
