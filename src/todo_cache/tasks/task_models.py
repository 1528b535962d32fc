# src/todo_cache/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace


def new_task_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class Task:
    """
    Immutable to-do record.

    Notes:
    - "id" is assigned once and never changes; completing or re-activating a
      task produces a new Task with the same id (see with_completed()).
    - equality is by value, so a record read back from the cache compares
      equal to the one that was saved.
    """

    id: str
    title: str = ""
    description: str = ""
    completed: bool = False

    @classmethod
    def create(cls, title: str, description: str = "", *, completed: bool = False) -> Task:
        return cls(id=new_task_id(), title=title, description=description, completed=completed)

    @property
    def is_active(self) -> bool:
        return not self.completed

    @property
    def is_empty(self) -> bool:
        return not (self.title or "").strip() and not (self.description or "").strip()

    @property
    def title_for_list(self) -> str:
        if (self.title or "").strip():
            return self.title
        return self.description

    def with_completed(self, completed: bool) -> Task:
        return replace(self, completed=bool(completed))
