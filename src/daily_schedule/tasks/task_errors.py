# src/daily_schedule/tasks/task_errors.py

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .task_models import Task


class ScheduleError(Exception):
    """Base class for every expected, user-recoverable scheduling error."""


class InvalidIntervalError(ScheduleError, ValueError):
    def __init__(self, message: str = "Start time must be before end time.") -> None:
        super().__init__(message)


class InvalidTimeFormatError(ScheduleError, ValueError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid time format: {raw!r} (expected HH:mm).")
        self.raw = raw


class InvalidPriorityError(ScheduleError, ValueError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid priority level: {raw}")
        self.raw = raw


class InvalidDescriptionError(ScheduleError, ValueError):
    def __init__(self) -> None:
        super().__init__("Task description cannot be empty.")


class ConflictError(ScheduleError):
    """
    The new (or edited) interval overlaps a stored task.

    `conflicting_description` names the stored task; `task` is the rejected candidate.
    """

    def __init__(self, message: str, *, conflicting_description: str, task: Task | None = None) -> None:
        super().__init__(message)
        self.conflicting_description = conflicting_description
        self.task = task


class NotFoundError(ScheduleError, LookupError):
    def __init__(self, message: str, *, description: str) -> None:
        super().__init__(message)
        self.description = description


class DuplicateTaskError(ScheduleError):
    def __init__(self, description: str) -> None:
        super().__init__(f'A task named "{description}" already exists.')
        self.description = description
