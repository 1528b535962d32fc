# src/todo_cache/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the task cache into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_cache import TaskCache

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, task_cache: TaskRepo | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and the cache injectable makes the app easier to test and
    avoids hidden global state. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    if task_cache is None:
        task_cache = TaskCache()

    return AppState(settings=settings, task_cache=task_cache)


def shutdown_state(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        state.task_cache.close()
    except Exception:
        logger.exception("Failed to close task cache.")
