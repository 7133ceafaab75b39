# tests/test_commands.py

from __future__ import annotations

from tasklist.cli.commands import CommandRegistry, registry
from tasklist.connectors.console_connector import run_console_loop


def test_command_registry_routes_and_unknown(state) -> None:
    reg = CommandRegistry()
    called = []

    def handler(state, args, rest):
        called.append((args, rest))
        return "ok"

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x  y") == "ok"
    assert reg.handle(state, "/ALPHA") == "ok"
    assert called == [(["x", "y"], "x  y"), ([], "")]

    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_list_toggle(state) -> None:
    assert "No tasks yet" in registry.handle(state, "/list")

    assert registry.handle(state, "/add   Write docs  ") == "Created [ ] #1 Write docs"
    assert registry.handle(state, "/toggle 1") == "Toggled [x] #1 Write docs"
    assert registry.handle(state, "/list") == "[x] #1 Write docs"

    status = registry.handle(state, "/status") or ""
    assert "1 completed, 0 pending" in status


def test_service_errors_are_reported(state) -> None:
    assert registry.handle(state, "/add") == "Error: Title is required"
    assert registry.handle(state, "/toggle") == "Error: Valid task ID is required"
    assert registry.handle(state, "/toggle nope") == "Error: Valid task ID is required"
    assert registry.handle(state, "/toggle 77") == "Error: Task not found"


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("/list", "/add", "/toggle", "/status"):
        assert name in text


def test_console_loop_adds_plain_text_and_exits(state, capsys) -> None:
    lines = iter(["Buy milk", "", "/toggle 1", "/exit", "never read"])

    run_console_loop(state, read_line=lambda _prompt: next(lines))

    tasks = state.task_service.list()
    assert [(t.title, t.completed) for t in tasks] == [("Buy milk", True)]
    out = capsys.readouterr().out
    assert "Created [ ] #1 Buy milk" in out
    assert "Toggled [x] #1 Buy milk" in out


def test_console_loop_stops_on_eof(state) -> None:
    def read_line(_prompt: str) -> str:
        raise EOFError

    run_console_loop(state, read_line=read_line)
    assert state.task_service.list() == []
