# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from daily_schedule.config import Settings
from daily_schedule.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "level", "expected"),
    [
        ("daily_schedule.cli.main", logging.INFO, True),
        ("daily_schedule.tasks.task_store", logging.INFO, False),
        ("daily_schedule.tasks.task_store", logging.WARNING, True),
        ("py.warnings", logging.WARNING, False),
        ("some.library", logging.WARNING, False),
        ("some.library", logging.ERROR, True),
    ],
)
def test_console_filter(name: str, level: int, expected: bool) -> None:
    assert _ConsoleNoiseFilter().filter(_record(name, level)) is expected


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_file=tmp_path / "schedule.log", console_level=logging.CRITICAL)

    logging.getLogger("daily_schedule.tasks.task_store").info("Task added: %s", "Exercise")
    for h in logging.getLogger().handlers:
        h.flush()

    text = (tmp_path / "schedule.log").read_text("utf-8")
    assert "INFO daily_schedule.tasks.task_store: Task added: Exercise" in text


def test_setup_logging_without_file(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_file=tmp_path / "logs" / "schedule.log", log_to_file=False)

    assert not (tmp_path / "logs").exists()
    assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)


def test_setup_logging_uses_settings_log_path(tmp_path: Path, restore_root_logging) -> None:
    settings = Settings(
        app_name="x",
        log_level="INFO",
        log_to_file=True,
        notify_console=False,
        data_dir=tmp_path / "data",
    )
    setup_logging(log_file=settings.log_file_path, console_level=logging.CRITICAL)

    logging.getLogger("daily_schedule.cli.main").info("Starting x...")
    for h in logging.getLogger().handlers:
        h.flush()

    assert settings.log_file_path == tmp_path / "data" / "schedule.log"
    assert "Starting x..." in settings.log_file_path.read_text("utf-8")
