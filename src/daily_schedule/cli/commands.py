# src/daily_schedule/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_errors import DuplicateTaskError
from ..tasks.task_factory import clean_description, create_task
from ..tasks.task_models import Priority, Task

Ask = Callable[[str], str]
MenuHandler = Callable[[AppState, Ask], str]

logger = logging.getLogger(__name__)

PRIORITY_CHOICES = ", ".join(p.value for p in Priority)


class MenuRegistry:
    """Numbered menu registry used by the console connector (1. Add Task, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, MenuHandler] = {}
        self._labels: dict[str, str] = {}

    def register(self, key: str, handler: MenuHandler, label: str) -> None:
        key = key.strip().lower()
        self._handlers[key] = handler
        self._labels[key] = label

    def handle(self, state: AppState, choice: str, ask: Ask) -> str | None:
        """
        Run the handler for a menu choice like "1".
        Returns a reply string or None if the choice is unknown.
        Scheduling errors propagate to the caller.
        """
        handler = self._handlers.get(choice.strip().lower())
        if handler is None:
            return None
        return handler(state, ask)

    def build_menu(self, title: str = "Daily Schedule") -> str:
        lines = [f"--- {title} ---"]
        for key, label in self._labels.items():
            lines.append(f"{key}. {label}")
        return "\n".join(lines)


registry = MenuRegistry()


def format_task_list(tasks: list[Task]) -> str:
    return "\n".join(f"{i}. {task}" for i, task in enumerate(tasks, start=1))


def _ensure_unique(state: AppState, description: str, *, allow: str | None = None) -> None:
    existing = state.store.get_task(description)
    if existing is None:
        return
    if allow is not None and existing.matches(allow):
        return
    raise DuplicateTaskError(existing.description)


def cmd_add(state: AppState, ask: Ask) -> str:
    description = ask("Enter task description: ")
    start = ask("Enter start time (HH:mm): ")
    end = ask("Enter end time (HH:mm): ")
    priority = ask(f"Enter priority ({PRIORITY_CHOICES}): ")

    task = create_task(description, start, end, priority)
    _ensure_unique(state, task.description)
    state.store.add_task(task)
    return "Task added successfully. No conflicts."


def cmd_remove(state: AppState, ask: Ask) -> str:
    description = ask("Enter description of task to remove: ")
    state.store.remove_task(description)
    return "Task removed successfully."


def cmd_view_all(state: AppState, ask: Ask) -> str:
    tasks = state.store.list_tasks()
    if not tasks:
        return "No tasks scheduled for the day."
    return "--- All Scheduled Tasks ---\n" + format_task_list(tasks)


def cmd_view_by_priority(state: AppState, ask: Ask) -> str:
    priority = Priority.parse(ask(f"Enter priority level to view ({PRIORITY_CHOICES}): "))
    tasks = state.store.list_tasks_by_priority(priority)
    if not tasks:
        return f"No tasks found for priority: {priority}"
    return f"--- Tasks with Priority {priority} ---\n" + format_task_list(tasks)


def cmd_edit(state: AppState, ask: Ask) -> str:
    old_description = ask("Enter description of task to edit: ")
    new_description = ask("Enter NEW description for the task: ")
    start = ask("Enter NEW start time (HH:mm): ")
    end = ask("Enter NEW end time (HH:mm): ")
    priority = ask(f"Enter NEW priority ({PRIORITY_CHOICES}): ")

    # Renaming onto another task's description is rejected; keeping the old one is fine.
    # A missing old task is left for the store to report.
    if state.store.get_task(old_description) is not None:
        _ensure_unique(state, clean_description(new_description), allow=old_description)
    state.store.edit_task(old_description, new_description, start, end, priority)
    return f"Task '{old_description}' successfully updated."


def cmd_complete(state: AppState, ask: Ask) -> str:
    description = ask("Enter description of task to mark as completed: ")
    state.store.mark_completed(description)
    return f"Task '{description}' marked as completed."


registry.register("1", cmd_add, label="Add Task")
registry.register("2", cmd_remove, label="Remove Task")
registry.register("3", cmd_view_all, label="View All Tasks")
registry.register("4", cmd_view_by_priority, label="View Tasks by Priority")
registry.register("5", cmd_edit, label="Edit Task")
registry.register("6", cmd_complete, label="Mark Task as Completed")
