# src/todo_cache/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.errors import TaskCacheError
from ..tasks.task_api import TaskFilter, create_task, list_tasks, task_stats, toggle_task
from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        Task errors (bad id, unknown filter, ...) are turned into a reply.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)

            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except TaskCacheError as e:
            logger.debug("Command /%s rejected: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    line = f"[{mark}] {task.title_for_list} (id: {task.id})"
    if task.title.strip() and task.description.strip():
        line += f"\n      {task.description}"
    return line


def _usage_id(cmd: str) -> str:
    return f"Usage: /{cmd} <id>."


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    stats = task_stats(state)
    app_name = str(getattr(state.settings, "app_name", "todo"))
    return (
        f"{app_name} status:\n"
        f"  Tasks: {stats.total}\n"
        f"  Active: {stats.active}\n"
        f"  Completed: {stats.completed}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title>                  -> new task
    /add <title> | <description>  -> new task with description
    """
    raw = " ".join(args)
    if not raw.strip():
        return "Usage: /add <title> [| description]."

    title, _, description = raw.partition("|")
    task = create_task(state, title=title, description=description)
    return f"Added: {format_task(task)}"


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list             -> all tasks
    /list active      -> only active
    /list completed   -> only completed
    """
    mode = TaskFilter.parse(args[0] if args else None)
    tasks = list_tasks(state, mode)
    if not tasks:
        return "No tasks." if mode is TaskFilter.ALL else f"No {mode.value} tasks."
    lines = [f"Tasks ({mode.value}):"]
    for i, t in enumerate(tasks, start=1):
        lines.append(f"{i}. {format_task(t)}")
    return "\n".join(lines)


def cmd_show(state: AppState, args: list[str]) -> str:
    if not args:
        return _usage_id("show")
    task = state.task_cache.get_task(args[0])
    if task is None:
        return f"No task with id={args[0]}."
    return format_task(task)


def cmd_done(state: AppState, args: list[str]) -> str:
    if not args:
        return _usage_id("done")
    task = state.task_cache.complete_task(args[0])
    return f"Completed: {task.title_for_list}"


def cmd_undo(state: AppState, args: list[str]) -> str:
    if not args:
        return _usage_id("undo")
    task = state.task_cache.activate_task(args[0])
    return f"Activated: {task.title_for_list}"


def cmd_toggle(state: AppState, args: list[str]) -> str:
    if not args:
        return _usage_id("toggle")
    task = toggle_task(state, args[0])
    return f"{'Completed' if task.completed else 'Activated'}: {task.title_for_list}"


def cmd_rm(state: AppState, args: list[str]) -> str:
    if not args:
        return _usage_id("rm")
    # delete_task() ignores unknown ids; keep the reply honest.
    existed = state.task_cache.get_task(args[0]) is not None
    state.task_cache.delete_task(args[0])
    return f"Deleted {args[0]}." if existed else f"No task with id={args[0]} (nothing deleted)."


def cmd_clear(state: AppState, args: list[str]) -> str:
    n = state.task_cache.clear_completed_tasks()
    return f"Cleared {n} completed task(s)."


def cmd_reset(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    n = state.task_cache.count_tasks()
    if emit is not None and n:
        emit(f"Deleting {n} task(s)...")
    state.task_cache.delete_all_tasks()
    return "All tasks deleted."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task counts.")
registry.register("add", cmd_add, help_text="Add a task: /add <title> [| description].")
registry.register(
    "list", cmd_list, help_text="List tasks: /list [all|active|completed].", aliases=["ls"]
)
registry.register("show", cmd_show, help_text="Show one task: /show <id>.")
registry.register("done", cmd_done, help_text="Mark a task completed: /done <id>.")
registry.register(
    "undo", cmd_undo, help_text="Mark a task active again: /undo <id>.", aliases=["activate"]
)
registry.register("toggle", cmd_toggle, help_text="Flip completed/active: /toggle <id>.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["delete"])
registry.register("clear", cmd_clear, help_text="Delete every completed task.")
registry.register("reset", cmd_reset, help_text="Delete every task.")
