"""Shared pytest fixtures for Roth Pomodoro tests."""

import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from PyQt6.QtWidgets import QApplication

from roth_pomodoro.database.db import configure_engine, init_db
from roth_pomodoro.database.store import SettingsStore
from roth_pomodoro.timer.controller import TimerController

from helpers import FakeAudio, FakeClock


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def store():
    return SettingsStore()


@pytest.fixture
def audio():
    return FakeAudio()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(qapp, audio, store, clock):
    """Controller on the in-memory store, fake audio and a manual clock."""
    return TimerController(audio, store, clock=clock)
