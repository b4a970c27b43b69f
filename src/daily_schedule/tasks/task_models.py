# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from enum import StrEnum

from .task_errors import InvalidDescriptionError, InvalidIntervalError, InvalidPriorityError

TIME_FORMAT = "%H:%M"


class Priority(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @classmethod
    def parse(cls, text: str) -> Priority:
        """Case-insensitive exact lookup by name. No silent default."""
        for p in cls:
            if p.value.casefold() == str(text).casefold():
                return p
        raise InvalidPriorityError(text)


def _check_description(description: str) -> None:
    if not isinstance(description, str) or not description.strip():
        raise InvalidDescriptionError()


def _check_interval(start_time: time, end_time: time) -> None:
    if start_time >= end_time:
        raise InvalidIntervalError()


def _as_priority(value: Priority | str) -> Priority:
    return value if isinstance(value, Priority) else Priority.parse(value)


@dataclass(slots=True)
class Task:
    """
    A described, time-boxed, prioritized unit of work.

    Invariants (checked here and in update()):
    - description is non-empty (it is the store's case-insensitive key)
    - start_time < end_time
    - priority is a Priority member (names are parsed)

    Intervals are half-open: [start_time, end_time).
    """

    description: str
    start_time: time
    end_time: time
    priority: Priority
    completed: bool = False

    def __post_init__(self) -> None:
        _check_description(self.description)
        _check_interval(self.start_time, self.end_time)
        self.priority = _as_priority(self.priority)

    def update(self, description: str, start_time: time, end_time: time, priority: Priority | str) -> None:
        # Validate first so a rejected update leaves every field untouched.
        _check_description(description)
        _check_interval(start_time, end_time)
        priority = _as_priority(priority)
        self.description = description
        self.start_time = start_time
        self.end_time = end_time
        self.priority = priority

    def mark_completed(self) -> None:
        self.completed = True

    def overlaps(self, other: Task) -> bool:
        return self.start_time < other.end_time and self.end_time > other.start_time

    def matches(self, description: str) -> bool:
        return self.description.casefold() == description.casefold()

    def __str__(self) -> str:
        status = " [COMPLETED]" if self.completed else ""
        return (
            f"{self.start_time.strftime(TIME_FORMAT)} - {self.end_time.strftime(TIME_FORMAT)}: "
            f"{self.description} [{self.priority}]{status}"
        )
