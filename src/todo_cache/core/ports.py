# src/todo_cache/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the presentation layer.

Commands and connectors depend on this Protocol instead of TaskCache itself,
so a different repository (or a test fake) can be dropped into AppState.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    # Queries
    def get_tasks(self) -> list[Task]: ...
    def get_task(self, task_id: str) -> Task | None: ...
    def count_tasks(self) -> int: ...

    # Mutations
    def save_task(self, task: Task) -> None: ...
    def complete_task(self, task_or_id: Task | str) -> Task: ...
    def activate_task(self, task_or_id: Task | str) -> Task: ...
    def clear_completed_tasks(self) -> int: ...
    def delete_all_tasks(self) -> None: ...
    def delete_task(self, task_id: str) -> None: ...

    # Teardown
    def close(self) -> None: ...
