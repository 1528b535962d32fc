# src/todo_cache/tasks/errors.py

from __future__ import annotations


class TaskCacheError(Exception):
    """Base class for every error raised by the task cache and its helpers."""


class InvalidArgumentError(TaskCacheError, ValueError):
    """A required argument was None/empty (raised before anything is mutated)."""


class TaskNotFoundError(TaskCacheError, LookupError):
    """An id-based mutation referenced a task that is not in the cache."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"task not found: {task_id}")
        self.task_id = task_id
