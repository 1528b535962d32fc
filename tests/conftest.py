# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_cache.core.state import AppState
from todo_cache.tasks.task_cache import TaskCache
from todo_cache.tasks.task_models import Task


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        log_to_file=False,
        console_enabled=True,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def cache() -> TaskCache:
    return TaskCache()


@pytest.fixture()
def state(settings: SimpleNamespace, cache: TaskCache) -> AppState:
    return AppState(settings=settings, task_cache=cache)


@pytest.fixture()
def milk() -> Task:
    return Task(id="1", title="Buy milk", description="2 litres")
