# src/daily_schedule/connectors/console_connector.py

from __future__ import annotations

import contextlib
import logging
import sys
from collections.abc import Callable

from ..cli.commands import registry as menu_registry
from ..core.state import AppState
from ..tasks.task_errors import InvalidTimeFormatError, ScheduleError
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

EXIT_CHOICE = "7"
EXIT_WORDS = {EXIT_CHOICE, "exit", "quit"}


def _print_err(text: str) -> None:
    print(text, file=sys.stderr, flush=True)


class ConsoleNotifier:
    """Renders store notifications on the terminal (conflicts on stderr)."""

    def on_task_conflict(self, new_task: Task, conflicting_task: Task) -> None:
        _print_err(
            f"\nALERT: New task '{new_task.description}' conflicts with existing task "
            f"'{conflicting_task.description}'!"
        )

    def on_task_update(self, task: Task) -> None:
        print(f"\nINFO: Task '{task.description}' has been updated/completed.", flush=True)


def run_console_loop(state: AppState, *, read_line: Callable[[str], str] = input) -> None:
    """
    Menu REPL. Every scheduling error is rendered and the loop resumes;
    only EOF, Ctrl+C or the exit choice end it.
    """
    logger.info("Console connector started.")

    lock = getattr(state, "lock", None)
    title = str(getattr(getattr(state, "settings", None), "app_name", "daily-schedule"))

    def ask(prompt: str) -> str:
        return read_line(prompt).strip()

    while True:
        print("\n" + menu_registry.build_menu(title))
        print(f"{EXIT_CHOICE}. Exit")

        try:
            choice = ask("Enter your choice: ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not choice:
            continue

        if choice.lower() in EXIT_WORDS:
            print("Exiting application. Goodbye!")
            logger.info("Console exit command received.")
            break

        try:
            with lock if lock is not None else contextlib.nullcontext():
                reply = menu_registry.handle(state, choice, ask)
        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed mid-command, exiting.")
            print()
            break
        except InvalidTimeFormatError as e:
            _print_err("Error: Invalid time format. Please use HH:mm (e.g., 09:00).")
            logger.info("Invalid time format input: %r", e.raw)
            continue
        except ScheduleError as e:
            # User-driven errors: INFO is enough.
            _print_err(f"Error: {e}")
            logger.info("Schedule error (%s): %s", type(e).__name__, e)
            continue
        except Exception as e:
            logger.exception("Menu handler crashed.")
            _print_err(f"An unexpected error occurred: {e}")
            continue

        if reply is None:
            _print_err("Invalid choice. Please try again.")
            logger.warning("Invalid menu choice entered: %s", choice)
            continue

        print(reply)

    logger.info("Console connector finished.")
