# tests/test_commands.py

from __future__ import annotations

import inspect

from todo_cache.cli.commands import CommandRegistry, cmd_add, registry
from todo_cache.tasks.errors import InvalidArgumentError
from todo_cache.tasks.task_models import Task


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bb"])

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/BB y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_command_registry_turns_task_errors_into_reply(state) -> None:
    reg = CommandRegistry()

    def bad(state, args):
        raise InvalidArgumentError("task_id is required")

    reg.register("bad", bad, "bad")

    assert reg.handle(state, "/bad") == "Error: task_id is required"


def test_help_lists_registered_commands(state) -> None:
    reply = registry.handle(state, "/help") or ""
    for name in ("add", "list", "done", "undo", "rm", "clear", "reset"):
        assert f"/{name} " in reply


def test_add_list_done_undo_flow(state) -> None:
    reply = registry.handle(state, "/add Buy milk | 2 litres") or ""
    assert reply.startswith("Added: [ ] Buy milk")

    (task,) = state.task_cache.get_tasks()
    assert task.description == "2 litres"

    assert "Completed: Buy milk" == registry.handle(state, f"/done {task.id}")
    assert state.task_cache.get_task(task.id).completed is True

    listing = registry.handle(state, "/list completed") or ""
    assert "[x] Buy milk" in listing

    assert registry.handle(state, "/list active") == "No active tasks."

    assert "Activated: Buy milk" == registry.handle(state, f"/undo {task.id}")
    assert state.task_cache.get_task(task.id).completed is False


def test_add_requires_text(state) -> None:
    assert "Usage" in (registry.handle(state, "/add") or "")
    assert (registry.handle(state, "/add  | ") or "").startswith("Error:")
    assert state.task_cache.get_tasks() == []


def test_done_unknown_id_reports_error(state) -> None:
    reply = registry.handle(state, "/done missing") or ""
    assert reply == "Error: task not found: missing"


def test_list_unknown_filter_reports_error(state) -> None:
    assert (registry.handle(state, "/list someday") or "").startswith("Error: unknown filter")


def test_show_and_rm(state) -> None:
    state.task_cache.save_task(Task(id="1", title="Buy milk"))

    assert registry.handle(state, "/show 1") == "[ ] Buy milk (id: 1)"
    assert registry.handle(state, "/show 2") == "No task with id=2."

    assert registry.handle(state, "/rm 2") == "No task with id=2 (nothing deleted)."
    assert registry.handle(state, "/rm 1") == "Deleted 1."
    assert state.task_cache.get_tasks() == []


def test_clear_reset_and_status(state) -> None:
    state.task_cache.save_task(Task(id="1", title="a", completed=True))
    state.task_cache.save_task(Task(id="2", title="b"))
    state.task_cache.save_task(Task(id="3", title="c"))

    status = registry.handle(state, "/status") or ""
    assert "todo-test status" in status
    assert "Active: 2" in status
    assert "Completed: 1" in status

    assert registry.handle(state, "/clear") == "Cleared 1 completed task(s)."

    notes: list[str] = []
    assert registry.handle(state, "/reset", emit=notes.append) == "All tasks deleted."
    assert notes == ["Deleting 2 task(s)..."]
    assert state.task_cache.get_tasks() == []


def test_toggle_command(state) -> None:
    state.task_cache.save_task(Task(id="1", title="Buy milk"))

    assert registry.handle(state, "/toggle 1") == "Completed: Buy milk"
    assert registry.handle(state, "/toggle 1") == "Activated: Buy milk"
    assert "Usage" in (registry.handle(state, "/toggle") or "")


def test_add_routes_without_emitter(state) -> None:
    notes: list[str] = []

    reply = registry.handle(state, "/add Walk dog", emit=notes.append) or ""

    assert reply.startswith("Added: [ ] Walk dog")
    assert notes == []
    assert list(inspect.signature(cmd_add).parameters) == ["state", "args"]
