# tests/test_task_factory.py

from __future__ import annotations

from datetime import time

import pytest

from daily_schedule.tasks.task_errors import (
    InvalidDescriptionError,
    InvalidIntervalError,
    InvalidPriorityError,
    InvalidTimeFormatError,
)
from daily_schedule.tasks.task_factory import create_task, parse_time
from daily_schedule.tasks.task_models import Priority


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("00:00", time(0, 0)), ("09:05", time(9, 5)), ("23:59", time(23, 59))],
)
def test_parse_time_accepts_hh_mm(raw: str, expected: time) -> None:
    assert parse_time(raw) == expected


@pytest.mark.parametrize("raw", ["9:00", "24:00", "12:60", "noon", "", "09:00:00", "09-00", "0900"])
def test_parse_time_rejects_bad_input(raw: str) -> None:
    with pytest.raises(InvalidTimeFormatError) as exc:
        parse_time(raw)
    assert exc.value.raw == raw


def test_create_task_from_raw_strings() -> None:
    task = create_task("  Exercise ", "07:00", "08:00", "high")
    assert task.description == "Exercise"
    assert task.start_time == time(7, 0)
    assert task.end_time == time(8, 0)
    assert task.priority is Priority.HIGH
    assert task.completed is False


def test_create_task_accepts_parsed_values() -> None:
    task = create_task("Read", time(21, 0), time(22, 0), Priority.LOW)
    assert str(task) == "21:00 - 22:00: Read [LOW]"


def test_create_task_rejects_empty_description() -> None:
    with pytest.raises(InvalidDescriptionError):
        create_task("   ", "07:00", "08:00", "LOW")


def test_create_task_rejects_bad_priority() -> None:
    with pytest.raises(InvalidPriorityError):
        create_task("Exercise", "07:00", "08:00", "urgent")


def test_create_task_rejects_end_before_start() -> None:
    with pytest.raises(InvalidIntervalError):
        create_task("Exercise", "08:00", "07:00", "LOW")
