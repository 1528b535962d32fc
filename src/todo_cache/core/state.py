# src/todo_cache/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_cache: TaskRepo

    # Shared by connectors that may call into the state from several threads.
    lock: threading.RLock = field(default_factory=threading.RLock)
