# src/todo_cache/tasks/task_cache.py

from __future__ import annotations

import logging
import threading

from .errors import InvalidArgumentError, TaskNotFoundError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskCache:
    """
    In-memory task repository.

    Every mutation is applied to the map immediately, so the next read sees it.
    The cache is a plain object owned by whoever builds it (see
    cli/bootstrap.py); there is no global instance.

    Ordering:
    - one insertion-ordered dict for the whole lifetime (never reassigned)
    - overwriting an existing id keeps its original position

    Thread-safety:
    - every method holds an RLock (re-entrant: id-based complete/activate
      call get_task() while already holding it)
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._lock = threading.RLock()
        self._tasks: dict[str, Task] = {}
        for task in tasks or []:
            self.save_task(task)
        logger.info("TaskCache ready total=%s", len(self._tasks))

    def close(self) -> None:
        """Drop every cached task (scope-exit teardown)."""
        with self._lock:
            n = len(self._tasks)
            self._tasks.clear()
        logger.info("TaskCache closed dropped=%s", n)

    def __enter__(self) -> TaskCache:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __len__(self) -> int:
        return self.count_tasks()

    def __contains__(self, task_id: object) -> bool:
        with self._lock:
            return task_id in self._tasks

    # ---- low-level helpers ----

    @staticmethod
    def _require_task(task: Task | None) -> Task:
        if task is None:
            raise InvalidArgumentError("task is required")
        if not isinstance(task, Task):
            raise InvalidArgumentError(f"expected Task, got {type(task).__name__}")
        return task

    @staticmethod
    def _require_id(task_id: str | None) -> str:
        # Only None is rejected; any other key is looked up as-is, like save/delete.
        if task_id is None:
            raise InvalidArgumentError("task_id is required")
        return task_id

    def _resolve(self, task_or_id: Task | str | None) -> Task:
        if task_or_id is None:
            raise InvalidArgumentError("task or task_id is required")
        if isinstance(task_or_id, Task):
            return task_or_id
        task = self.get_task(task_or_id)
        if task is None:
            raise TaskNotFoundError(task_or_id)
        return task

    def _replace(self, task: Task, *, completed: bool) -> Task:
        updated = task.with_completed(completed)
        self._tasks[updated.id] = updated
        logger.debug("Task %s id=%s", "completed" if completed else "activated", updated.id)
        return updated

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def get_tasks(self) -> list[Task]:
        """Snapshot of every cached task (insertion order)."""
        with self._lock:
            return list(self._tasks.values())

    def save_task(self, task: Task) -> None:
        task = self._require_task(task)
        with self._lock:
            replaced = task.id in self._tasks
            self._tasks[task.id] = task
        logger.debug("Task saved id=%s replaced=%s", task.id, replaced)

    def complete_task(self, task_or_id: Task | str) -> Task:
        """
        Mark a task completed.

        Accepts either a Task (saved as-is with completed=True, even if it was
        not cached yet) or an id, which must already be cached.
        """
        with self._lock:
            return self._replace(self._resolve(task_or_id), completed=True)

    def activate_task(self, task_or_id: Task | str) -> Task:
        """Mirror of complete_task() that sets completed=False."""
        with self._lock:
            return self._replace(self._resolve(task_or_id), completed=False)

    def clear_completed_tasks(self) -> int:
        with self._lock:
            done = [tid for tid, t in self._tasks.items() if t.completed]
            for tid in done:
                del self._tasks[tid]
        logger.debug("Cleared completed tasks n=%s", len(done))
        return len(done)

    def get_task(self, task_id: str) -> Task | None:
        task_id = self._require_id(task_id)
        with self._lock:
            if not self._tasks:
                return None
            return self._tasks.get(task_id)

    def delete_all_tasks(self) -> None:
        with self._lock:
            self._tasks.clear()
        logger.debug("Deleted all tasks")

    def delete_task(self, task_id: str) -> None:
        """
        Remove a task by id.

        Unknown ids are ignored silently (unlike complete/activate by id).
        """
        with self._lock:
            removed = self._tasks.pop(task_id, None)
        if removed is not None:
            logger.debug("Task deleted id=%s", task_id)
