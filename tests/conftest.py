# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from daily_schedule.core.state import AppState
from daily_schedule.tasks.task_store import ScheduleStore

from .fakes import RecordingObserver


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="test-schedule",
        log_level="INFO",
        log_to_file=False,
        notify_console=False,
        data_dir=tmp_path,
    )


@pytest.fixture()
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture()
def store(observer: RecordingObserver) -> ScheduleStore:
    """Fresh store per test, with a recording observer on both channels."""
    s = ScheduleStore()
    s.add_conflict_observer(observer)
    s.add_update_observer(observer)
    return s


@pytest.fixture()
def state(settings: SimpleNamespace, store: ScheduleStore) -> AppState:
    return AppState(settings=settings, store=store)
