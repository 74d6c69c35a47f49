"""Shared test fixtures.

Qt runs on the offscreen platform and every store lives in a tmp SQLite file.
"""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from BackEnd.core.config import TimerConfig
from BackEnd.repos.kv_store import KeyValueStore
from BackEnd.repos.session_repo import SessionStore
from BackEnd.services.session_recorder import SessionRecorder
from BackEnd.services.timer_service import PhaseTimer

from helpers import FakeClock


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture()
def kv(tmp_path):
    store = KeyValueStore(tmp_path / "focus.db")
    yield store
    store.close()


@pytest.fixture()
def store(kv):
    return SessionStore(kv)


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def config():
    return TimerConfig(study_minutes=1, break_minutes=1)


@pytest.fixture()
def timer(store, clock, config):
    t = PhaseTimer(config, SessionRecorder(store, clock=clock), clock=clock)
    yield t
    t.reset()
