# src/daily_schedule/tasks/task_factory.py

from __future__ import annotations

import re
from datetime import datetime, time

from .task_errors import InvalidDescriptionError, InvalidTimeFormatError
from .task_models import TIME_FORMAT, Priority, Task

# strptime alone accepts "9:5"; the shell contract is strictly two digits each.
_HHMM_RE = re.compile(r"^\d{2}:\d{2}$")


def parse_time(raw: str) -> time:
    text = str(raw).strip()
    if not _HHMM_RE.match(text):
        raise InvalidTimeFormatError(raw)
    try:
        return datetime.strptime(text, TIME_FORMAT).time()
    except ValueError as e:
        raise InvalidTimeFormatError(raw) from e


def coerce_time(value: str | time) -> time:
    return value if isinstance(value, time) else parse_time(value)


def coerce_priority(value: str | Priority) -> Priority:
    return value if isinstance(value, Priority) else Priority.parse(value)


def clean_description(raw: str) -> str:
    text = str(raw or "").strip()
    if not text:
        raise InvalidDescriptionError()
    return text


def create_task(
    description: str,
    start: str | time,
    end: str | time,
    priority: str | Priority,
) -> Task:
    """
    Build a validated Task from raw shell input.

    Raises InvalidDescriptionError, InvalidTimeFormatError, InvalidPriorityError
    or InvalidIntervalError (in that order of checking).
    """
    return Task(
        description=clean_description(description),
        start_time=coerce_time(start),
        end_time=coerce_time(end),
        priority=coerce_priority(priority),
    )
