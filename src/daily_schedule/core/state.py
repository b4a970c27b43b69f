# src/daily_schedule/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: object

    store: TaskRepo

    # Held by the shell around every store call; the store itself is not synchronized.
    lock: threading.RLock = field(default_factory=threading.RLock)
