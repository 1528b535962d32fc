# src/todo_cache/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from ..core.state import AppState
from .errors import InvalidArgumentError, TaskNotFoundError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskFilter(StrEnum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | None) -> TaskFilter:
        if not raw:
            return cls.ALL
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise InvalidArgumentError(
                f"unknown filter: {raw!r} (expected all, active or completed)"
            ) from None


@dataclass(frozen=True, slots=True)
class TaskStats:
    active: int
    completed: int

    @property
    def total(self) -> int:
        return self.active + self.completed


def create_task(state: AppState, *, title: str, description: str = "") -> Task:
    """
    Convenience helper: build a new task with a fresh id and save it.
    Uses state.task_cache (already constructed in bootstrap).
    """
    task = Task.create((title or "").strip(), (description or "").strip())
    if task.is_empty:
        raise InvalidArgumentError("title or description is required")

    state.task_cache.save_task(task)
    logger.info("Created task id=%s", task.id)
    return task


def filter_tasks(tasks: Iterable[Task], mode: TaskFilter | str = TaskFilter.ALL) -> list[Task]:
    mode = mode if isinstance(mode, TaskFilter) else TaskFilter.parse(mode)
    if mode is TaskFilter.ACTIVE:
        return [t for t in tasks if t.is_active]
    if mode is TaskFilter.COMPLETED:
        return [t for t in tasks if t.completed]
    return list(tasks)


def list_tasks(state: AppState, mode: TaskFilter | str = TaskFilter.ALL) -> list[Task]:
    return filter_tasks(state.task_cache.get_tasks(), mode)


def task_stats(state: AppState) -> TaskStats:
    tasks = state.task_cache.get_tasks()
    completed = sum(1 for t in tasks if t.completed)
    return TaskStats(active=len(tasks) - completed, completed=completed)


def toggle_task(state: AppState, task_id: str) -> Task:
    task = state.task_cache.get_task(task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    if task.completed:
        return state.task_cache.activate_task(task)
    return state.task_cache.complete_task(task)
