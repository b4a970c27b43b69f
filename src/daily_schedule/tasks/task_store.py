# tasks/task_store.py

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from datetime import time

from ..core.ports import ConflictObserver, UpdateObserver
from .task_errors import ConflictError, NotFoundError
from .task_factory import create_task
from .task_models import Priority, Task

logger = logging.getLogger(__name__)


def _copy(task: Task) -> Task:
    return dataclasses.replace(task)


class ScheduleStore:
    """
    In-memory schedule of non-overlapping tasks.

    Invariants:
    - tasks are kept sorted by start_time (stable) after every mutation
    - no two stored tasks overlap on [start_time, end_time)
    - validation always finishes before the list or a task is mutated

    Descriptions are matched case-insensitively. The store does not enforce
    unique descriptions; the shell does.

    Observers are called synchronously, in registration order. Their exceptions
    are not caught and propagate to the caller of the triggering operation.

    Thread-safety:
    - none; callers sharing a store across threads must hold a lock around
      each call (AppState.lock)
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = []
        self._conflict_observers: list[ConflictObserver] = []
        self._update_observers: list[UpdateObserver] = []
        for task in tasks:
            self.add_task(task)
        logger.debug("ScheduleStore ready total=%d", len(self._tasks))

    # ---- observers ----

    def add_conflict_observer(self, observer: ConflictObserver) -> None:
        self._conflict_observers.append(observer)

    def add_update_observer(self, observer: UpdateObserver) -> None:
        self._update_observers.append(observer)

    def _notify_conflict(self, new_task: Task, conflicting_task: Task) -> None:
        for observer in self._conflict_observers:
            observer.on_task_conflict(_copy(new_task), _copy(conflicting_task))

    def _notify_update(self, task: Task) -> None:
        for observer in self._update_observers:
            observer.on_task_update(_copy(task))

    # ---- low-level helpers ----

    def _sort(self) -> None:
        self._tasks.sort(key=lambda t: t.start_time)

    def _find(self, description: str) -> Task | None:
        for task in self._tasks:
            if task.matches(description):
                return task
        return None

    def _first_conflict(self, candidate: Task, *, exclude: Task | None = None) -> Task | None:
        for existing in self._tasks:
            if existing is exclude:
                continue
            if candidate.overlaps(existing):
                return existing
        return None

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(self, task: Task) -> None:
        conflicting = self._first_conflict(task)
        if conflicting is not None:
            self._notify_conflict(task, conflicting)
            logger.warning(
                "Task conflict detected: new task '%s' conflicts with existing task '%s'",
                task.description,
                conflicting.description,
            )
            raise ConflictError(
                f'Task conflicts with existing task "{conflicting.description}".',
                conflicting_description=conflicting.description,
                task=_copy(task),
            )

        # Own a private copy so the caller's object cannot bypass invariants later.
        self._tasks.append(_copy(task))
        self._sort()
        logger.info("Task added: %s", task.description)

    def remove_task(self, description: str) -> None:
        task = self._find(description)
        if task is None:
            logger.warning("Attempted to remove non-existent task: %s", description)
            raise NotFoundError(f'Task not found: "{description}".', description=description)
        self._tasks.remove(task)
        logger.info("Task removed: %s", task.description)

    def get_task(self, description: str) -> Task | None:
        task = self._find(description)
        return None if task is None else _copy(task)

    def list_tasks(self) -> list[Task]:
        return [_copy(t) for t in self._tasks]

    def list_tasks_by_priority(self, priority: Priority | str) -> list[Task]:
        if not isinstance(priority, Priority):
            priority = Priority.parse(priority)
        # self._tasks is already sorted; filtering keeps that order.
        return [_copy(t) for t in self._tasks if t.priority is priority]

    def edit_task(
        self,
        old_description: str,
        new_description: str,
        new_start: str | time,
        new_end: str | time,
        new_priority: str | Priority,
    ) -> None:
        target = self._find(old_description)
        if target is None:
            logger.warning("Attempted to edit non-existent task: %s", old_description)
            raise NotFoundError(f'Task to edit not found: "{old_description}".', description=old_description)

        # Candidate carries the new fields; the stored task stays untouched until it passes.
        candidate = create_task(new_description, new_start, new_end, new_priority)

        conflicting = self._first_conflict(candidate, exclude=target)
        if conflicting is not None:
            self._notify_conflict(candidate, conflicting)
            logger.warning(
                "Edit conflict detected: updated task '%s' conflicts with existing task '%s'",
                candidate.description,
                conflicting.description,
            )
            raise ConflictError(
                f'Edited task conflicts with existing task "{conflicting.description}".',
                conflicting_description=conflicting.description,
                task=candidate,
            )

        target.update(candidate.description, candidate.start_time, candidate.end_time, candidate.priority)
        self._sort()
        self._notify_update(target)
        logger.info("Task edited: %s -> %s", old_description, target.description)

    def mark_completed(self, description: str) -> None:
        task = self._find(description)
        if task is None:
            logger.warning("Attempted to mark non-existent task as completed: %s", description)
            raise NotFoundError(f'Task not found: "{description}".', description=description)

        # Repeating is a no-op on the flag but still re-notifies.
        task.mark_completed()
        self._notify_update(task)
        logger.info("Task marked as completed: %s", task.description)

    def clear(self) -> None:
        n = len(self._tasks)
        self._tasks.clear()
        logger.info("Schedule cleared (%d tasks removed).", n)
