# src/daily_schedule/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the one ScheduleStore for this process,
- subscribes the console notifier to store events (optional).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier
from ..core.state import AppState
from ..tasks.task_store import ScheduleStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = ScheduleStore()

    if getattr(settings, "notify_console", True):
        notifier = ConsoleNotifier()
        store.add_conflict_observer(notifier)
        store.add_update_observer(notifier)
        logger.debug("Console notifier subscribed to schedule events.")

    return AppState(settings=settings, store=store)
