# src/daily_schedule/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used around the schedule store.

The shell and the store depend on Protocols instead of concrete classes.
This keeps notifiers swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import time

    from ..tasks.task_models import Priority, Task


class ConflictObserver(Protocol):
    """Told about a rejected task and the first stored task it overlaps."""
    def on_task_conflict(self, new_task: Task, conflicting_task: Task) -> None: ...


class UpdateObserver(Protocol):
    """Told after a stored task was edited or marked completed."""
    def on_task_update(self, task: Task) -> None: ...


class TaskRepo(Protocol):
    # Mutations
    def add_task(self, task: Task) -> None: ...
    def remove_task(self, description: str) -> None: ...
    def edit_task(
            self,
            old_description: str,
            new_description: str,
            new_start: str | time,
            new_end: str | time,
            new_priority: Priority | str,
    ) -> None: ...
    def mark_completed(self, description: str) -> None: ...

    # Queries (always copies)
    def get_task(self, description: str) -> Task | None: ...
    def list_tasks(self) -> list[Task]: ...
    def list_tasks_by_priority(self, priority: Priority | str) -> list[Task]: ...
    def count_tasks(self) -> int: ...

    # Observers
    def add_conflict_observer(self, observer: ConflictObserver) -> None: ...
    def add_update_observer(self, observer: UpdateObserver) -> None: ...
