# tests/test_console_connector.py

from __future__ import annotations

import pytest

from todo_cache.cli import commands
from todo_cache.connectors.console_connector import run_console_loop

from .fakes import ScriptedInput


def test_console_runs_commands_until_exit(state, capsys) -> None:
    script = ScriptedInput(["", "/add Buy milk", "/list", "/exit", "/add never read"])

    run_console_loop(state, input_fn=script)

    out = capsys.readouterr().out
    assert "Added: [ ] Buy milk" in out
    assert "Tasks (all):" in out
    assert [t.title for t in state.task_cache.get_tasks()] == ["Buy milk"]
    # "/exit" stops the loop before the last scripted line is read
    assert len(script.prompts) == 4


def test_console_stops_on_eof_and_keyboard_interrupt(state) -> None:
    run_console_loop(state, input_fn=ScriptedInput([]))
    run_console_loop(state, input_fn=ScriptedInput(["/add x", KeyboardInterrupt()]))

    assert state.task_cache.count_tasks() == 1


def test_console_hints_on_plain_text(state, capsys) -> None:
    run_console_loop(state, input_fn=ScriptedInput(["hello"]))

    assert "Commands start with '/'" in capsys.readouterr().out


def test_console_survives_crashing_handler(state, capsys, monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(state, args):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "boom", boom)

    run_console_loop(state, input_fn=ScriptedInput(["/boom", "/add still alive"]))

    out = capsys.readouterr().out
    assert "Internal error while handling a command." in out
    assert state.task_cache.count_tasks() == 1
