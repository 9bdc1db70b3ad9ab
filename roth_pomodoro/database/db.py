"""Database connection and session management."""

import os
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session as OrmSession

from ..settings import Settings
from .models import Base, CounterRecord, SettingsRecord, SINGLE_ROW_ID

# ── paths ────────────────────────────────────────────────────────────────────

APP_DIR_NAME = "roth-pomodoro"
DB_FILE_NAME = "roth-pomodoro.sqlite"


def data_dir() -> Path:
    """``$XDG_DATA_HOME/roth-pomodoro``, else ``~/.local/share/roth-pomodoro``."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / APP_DIR_NAME
    return Path.home() / ".local" / "share" / APP_DIR_NAME


def db_path() -> Path:
    return data_dir() / DB_FILE_NAME


# ── engine & session factory (created lazily) ─────────────────────────────

_engine = None
_SessionFactory = None


def _get_engine():
    global _engine
    if _engine is None:
        path = db_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        _engine = create_engine(
            f"sqlite:///{path}",
            connect_args={"check_same_thread": False},
            echo=False,
        )
    return _engine


def _get_session_factory():
    global _SessionFactory
    if _SessionFactory is None:
        _SessionFactory = sessionmaker(bind=_get_engine(), expire_on_commit=False)
    return _SessionFactory


# ── public API ────────────────────────────────────────────────────────────


def configure_engine(url: str) -> None:
    """Override the database connection URL.  Used by tests to point at
    an in-memory SQLite database instead of the real one on disk."""
    global _engine, _SessionFactory
    _SessionFactory = None
    _engine = create_engine(
        url,
        connect_args={"check_same_thread": False},
        echo=False,
    )


def init_db() -> None:
    """Create both tables and seed the default rows if they are missing."""
    engine = _get_engine()
    Base.metadata.create_all(engine)

    defaults = Settings()
    factory = _get_session_factory()
    with factory() as session:
        if session.get(SettingsRecord, SINGLE_ROW_ID) is None:
            session.add(SettingsRecord(
                id=SINGLE_ROW_ID,
                work_seconds=defaults.work_seconds,
                short_break_seconds=defaults.short_break_seconds,
                long_break_seconds=defaults.long_break_seconds,
                long_break_every=defaults.long_break_every,
            ))
        if session.get(CounterRecord, SINGLE_ROW_ID) is None:
            session.add(CounterRecord(id=SINGLE_ROW_ID, completed_pomodoros=0))
        session.commit()


@contextmanager
def get_session():
    """Yield a SQLAlchemy session; commit on success, rollback on error."""
    factory = _get_session_factory()
    session: OrmSession = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
